import pytest

from Paint_shop.errors import FormatError
from Paint_shop.schema import Colour, Finish, sort_preferences


def test_colour_equality_is_structural():
    assert Colour(1, Finish.MATTE) != Colour(1, Finish.GLOSS)
    assert Colour(1, Finish.MATTE) == Colour(1, Finish.MATTE)
    assert len({Colour(1, Finish.MATTE), Colour(1, Finish.MATTE)}) == 1


def test_gloss_sorts_before_matte_then_lowest_code():
    colours = [Colour(1, Finish.MATTE), Colour(5, Finish.GLOSS), Colour(3, Finish.GLOSS)]
    assert sort_preferences(colours) == (
        Colour(3, Finish.GLOSS),
        Colour(5, Finish.GLOSS),
        Colour(1, Finish.MATTE),
    )
    assert Colour(9, Finish.GLOSS) < Colour(1, Finish.MATTE)
    assert Colour(1, Finish.MATTE) > Colour(9, Finish.GLOSS)
    assert Colour(2, Finish.GLOSS) <= Colour(2, Finish.GLOSS)
    assert Colour(3, Finish.GLOSS) >= Colour(2, Finish.GLOSS)


def test_finish_parse_is_exact():
    assert Finish.parse("G") is Finish.GLOSS
    assert Finish.parse("M") is Finish.MATTE
    for bad in ("g", "r", "GM", ""):
        with pytest.raises(FormatError):
            Finish.parse(bad)


def test_colour_parse_rejects_non_positive_codes():
    assert Colour.parse("7", "M") == Colour(7, Finish.MATTE)
    for bad in ("0", "-1", "x", "1.5", "1_0", "+3", "\u0663"):
        with pytest.raises(FormatError):
            Colour.parse(bad, "G")


def test_colour_str():
    assert str(Colour(4, Finish.GLOSS)) == "4 G"
