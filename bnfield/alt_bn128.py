"""The alt_bn128 (BN254) fields and curve groups."""

from __future__ import annotations

from .curve import Curve
from .f2field import F2Field
from .field import PrimeField

FQ_PRIME = 21888242871839275222246405745257275088696311157297823662689037894645226208583
FR_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

_G2_B = (
    "19485874751759354771024239261021720505790618469301721065564631296452457478373, "
    "266929791119991161246907387137283842545076965332900288569378510910307636690"
)
_G2_GX = (
    "10857046999023057135944570762232829481370756359578518086990519993285655852781, "
    "11559732032986387107991004021392285783925812861821192530917403151452391805634"
)
_G2_GY = (
    "8495653923123431417604973247489272438418190587263600148770280649306958101930, "
    "4082367875863433681332203403145435568316851327593401208105741076214120093531"
)


class Engine:
    """The base field, its quadratic extension, the scalar field and both groups."""

    def __init__(self) -> None:
        self.f1 = PrimeField(FQ_PRIME)
        self.f2 = F2Field(self.f1, "-1")
        self.fr = PrimeField(FR_PRIME)
        self.g1 = Curve.from_strings(self.f1, "0", "3", "1", "2")
        self.g2 = Curve.from_strings(self.f2, "0,0", _G2_B, _G2_GX, _G2_GY)


ENGINE = Engine()

F1 = ENGINE.f1
F2 = ENGINE.f2
Fr = ENGINE.fr
G1 = ENGINE.g1
G2 = ENGINE.g2