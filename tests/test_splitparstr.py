import pytest

from bnfield.splitparstr import split_par_str


def test_split_in_2():
    assert split_par_str("123,456") == ["123", "456"]


def test_split_in_3():
    assert split_par_str("123,456,789") == ["123", "456", "789"]


def test_split_in_2_in_parenthesis():
    assert split_par_str("(123,456)") == ["123", "456"]


def test_split_in_2_in_many_parenthesis():
    assert split_par_str("(((123,456),(789,abc)))") == ["123,456", "789,abc"]


def test_split_and_pad():
    v = split_par_str(" ( (), ((123) , 456)  , (789 , abc) )  ")
    assert v == ["", "(123),456", "789,abc"]


def test_f12_point():
    v6 = split_par_str(" (((1,2) , (3,4), (5,6))   ,   ((7,8) , (9,10) , (11,12))) ")
    v6_0 = split_par_str(v6[0])
    v6_1 = split_par_str(v6[1])

    assert split_par_str(v6_0[0]) == ["1", "2"]
    assert split_par_str(v6_0[1]) == ["3", "4"]
    assert split_par_str(v6_0[2]) == ["5", "6"]
    assert split_par_str(v6_1[0]) == ["7", "8"]
    assert split_par_str(v6_1[1]) == ["9", "10"]
    assert split_par_str(v6_1[2]) == ["11", "12"]


def test_single_value_is_returned_alone():
    assert split_par_str("  (123) ") == ["123"]


def test_unbalanced_parentheses_raise():
    with pytest.raises(ValueError):
        split_par_str("())(")