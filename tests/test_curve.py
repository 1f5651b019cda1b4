import pytest

from bnfield.curve import Curve, Point, PointAffine
from bnfield.f2field import F2Field
from bnfield.field import PrimeField

Q = 21888242871839275222246405745257275088696311157297823662689037894645226208583
ORDER = 21888242871839275222246405745257275088548364400416034343698204186575808495617


@pytest.fixture(scope="module")
def g1():
    return Curve.from_strings(PrimeField(Q), "0", "3", "1", "2")


@pytest.fixture(scope="module")
def g2():
    f2 = F2Field(PrimeField(Q), "-1")
    return Curve.from_strings(
        f2,
        "0,0",
        "19485874751759354771024239261021720505790618469301721065564631296452457478373, 266929791119991161246907387137283842545076965332900288569378510910307636690",
        "10857046999023057135944570762232829481370756359578518086990519993285655852781, 11559732032986387107991004021392285783925812861821192530917403151452391805634",
        "8495653923123431417604973247489272438418190587263600148770280649306958101930, 4082367875863433681332203403145435568316851327593401208105741076214120093531",
    )


def _on_curve(curve, p):
    f = curve.field
    a = curve.to_affine(p)
    lhs = f.square(a.y)
    rhs = f.add(f.add(f.mul(f.square(a.x), a.x), f.mul(curve.a, a.x)), curve.b)
    return f.eq(lhs, rhs)


def test_plus_zero(g1):
    p1 = g1.add(g1.one(), g1.zero())
    assert g1.eq(p1, g1.one())


def test_minus_self_is_zero(g1):
    assert g1.is_zero(g1.sub(g1.one(), g1.one()))


def test_times_4(g1):
    p1 = g1.add(g1.one(), g1.one())
    p1 = g1.add(p1, g1.one())
    p1 = g1.add(p1, g1.one())
    p2 = g1.dbl(g1.dbl(g1.one()))
    assert g1.eq(p1, p2)


def test_times_3(g1):
    p1 = g1.add(g1.add(g1.one(), g1.one()), g1.one())
    p2 = g1.sub(g1.dbl(g1.dbl(g1.one())), g1.one())
    assert g1.eq(p1, p2)


def test_times_3_exp(g1):
    p1 = g1.add(g1.add(g1.one(), g1.one()), g1.one())
    p2 = g1.mul_by_scalar(g1.one(), (3).to_bytes(32, "little"))
    assert g1.eq(p1, p2)


def test_times_5(g1):
    p1 = g1.dbl(g1.dbl(g1.one()))
    p1 = g1.add(p1, p1)
    p3 = g1.dbl(g1.dbl(g1.one()))
    p5 = g1.dbl(g1.dbl(g1.one()))
    assert g1.eq(p1, g1.add(p3, p5))


def test_times_65_exp(g1):
    p1 = g1.one()
    for _ in range(6):
        p1 = g1.dbl(p1)
    p1 = g1.add(p1, g1.one())
    p2 = g1.mul_by_scalar(g1.one(), (65).to_bytes(32, "little"))
    assert g1.eq(p1, p2)


def test_g1_exp_to_order(g1):
    p = g1.mul_by_scalar(g1.one(), ORDER.to_bytes(32, "little"))
    assert g1.is_zero(p)


def test_g2_exp_to_order(g2):
    p = g2.mul_by_scalar(g2.one(), ORDER.to_bytes(32, "little"))
    assert g2.is_zero(p)


def test_two_term_sum_matches_reference(g1):
    f = g1.field
    b0 = PointAffine(
        f.from_string("1626275109576878988287730541908027724405348106427831594181487487855202143055"),
        f.from_string("18706364085805828895917702468512381358405767972162700276238017959231481018884"),
    )
    b1 = PointAffine(
        f.from_string("17245156998235704504461341147511350131061011207199931581281143511105381019978"),
        f.from_string("3858908536032228066651712470282632925312300188207189106507111128103204506804"),
    )
    s1 = 20187316456970436521602619671088988952475789765726813868033071292105413408473
    ref = PointAffine(
        f.from_string("9163953212624378696742080269971059027061360176019470242548968584908855004282"),
        f.from_string("20922060990592511838374895951081914567856345629513259026540392951012456141360"),
    )
    r = g1.add(g1.mul_by_scalar(b0, 1), g1.mul_by_scalar(b1, s1))
    assert g1.eq(g1.to_affine(r), ref)


def test_generator_to_string(g1):
    assert g1.to_string(g1.one()) == "(1,2)"
    assert g1.to_string(g1.zero()) == "(0,0)"


def test_g2_generator_to_string(g2):
    assert g2.to_string(g2.one()) == (
        "((10857046999023057135944570762232829481370756359578518086990519993285655852781,"
        "11559732032986387107991004021392285783925812861821192530917403151452391805634),"
        "(8495653923123431417604973247489272438418190587263600148770280649306958101930,"
        "4082367875863433681332203403145435568316851327593401208105741076214120093531))"
    )


def test_g2_double_matches_add(g2):
    p = g2.add(g2.one(), g2.one_affine())
    assert g2.eq(p, g2.dbl(g2.one()))
    assert _on_curve(g2, p)


def test_affine_round_trip(g1):
    p = g1.mul_by_scalar(g1.one(), 12345)
    a = g1.to_affine(p)
    assert g1.eq(g1.to_point(a), p)
    assert g1.eq(a, p)
    assert _on_curve(g1, p)


def test_zero_conversions(g1):
    assert g1.to_affine(g1.zero()) == g1.zero_affine()
    assert g1.is_zero(g1.to_point(g1.zero_affine()))


def test_neg_keeps_representation(g1):
    pa = g1.neg(g1.one_affine())
    pp = g1.neg(g1.one())
    assert isinstance(pa, PointAffine)
    assert isinstance(pp, Point)
    assert g1.eq(pa, pp)
    assert g1.is_zero(g1.add(g1.one_affine(), pa))


def test_mixed_and_affine_adds_agree(g1):
    two = g1.dbl(g1.one())
    two_affine = g1.to_affine(two)
    r1 = g1.add(two, g1.one())
    r2 = g1.add(g1.one_affine(), two_affine)
    r3 = g1.add(two_affine, g1.one())
    assert g1.eq(r1, r2)
    assert g1.eq(r1, r3)
    assert g1.eq(r1, g1.mul_by_scalar(g1.one_affine(), 3))


def test_zero_scalar_gives_zero(g1):
    assert g1.is_zero(g1.mul_by_scalar(g1.one(), bytes(32)))
    assert g1.is_zero(g1.mul_by_scalar(g1.one(), 0))


def test_counters_track_doubling_in_add(g1):
    curve = Curve.from_strings(PrimeField(Q), "0", "3", "1", "2")
    curve.add(curve.one(), curve.one())
    counts = curve.counters()
    assert counts["add"] == 1
    assert counts["dbl"] == 1
    curve.reset_counters()
    assert all(v == 0 for v in curve.counters().values())


def test_rejects_non_points(g1):
    with pytest.raises(TypeError):
        g1.add((1, 2), g1.one())
    with pytest.raises(TypeError):
        g1.to_affine("point")


def test_negative_scalar_rejected(g1):
    with pytest.raises(ValueError):
        g1.mul_by_scalar(g1.one(), -1)


@pytest.mark.parametrize("a", [0, 1, -1, 5])
def test_small_curve_scalar_matches_repeated_add(a):
    p = 10007
    field = PrimeField(p)
    x, y = 3, 7
    a_el = field.from_int(a)
    b = (y * y - x ** 3 - a_el * x) % p
    curve = Curve(field, a_el, b, x, y)
    acc = curve.zero()
    for k in range(1, 25):
        acc = curve.add(acc, curve.one_affine())
        by_scalar = curve.mul_by_scalar(curve.one(), k)
        assert curve.eq(acc, by_scalar)
        if not curve.is_zero(acc):
            assert _on_curve(curve, acc)


@pytest.mark.parametrize("a", [0, 1, -1, 5])
def test_small_curve_double_paths_agree(a):
    p = 10007
    field = PrimeField(p)
    x, y = 3, 7
    a_el = field.from_int(a)
    b = (y * y - x ** 3 - a_el * x) % p
    curve = Curve(field, a_el, b, x, y)
    q = curve.mul_by_scalar(curve.one(), 5)
    d1 = curve.dbl(q)
    d2 = curve.dbl(curve.to_affine(q))
    assert curve.eq(d1, d2)
    assert curve.eq(d1, curve.mul_by_scalar(curve.one(), 10))
    assert _on_curve(curve, d1)