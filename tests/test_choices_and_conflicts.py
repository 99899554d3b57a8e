from Paint_shop.io.orders import parse_line
from Paint_shop.resolve import is_valid_choice, next_choice, unsatisfied_customers
from Paint_shop.schema import Choice, Colour, Finish

G, M = Finish.GLOSS, Finish.MATTE


def _example1():
    return {
        1: parse_line("1 M 3 G 5 G"),
        2: parse_line("2 G 3 M 4 G"),
        3: parse_line("5 M"),
    }


def test_next_choice_most_constrained_first():
    choices = next_choice(_example1())
    assert len(choices) == 3
    assert choices[0] == Choice(customer_id=3, colour=Colour(5, M), remaining=1)
    # equal option counts fall back to customer id
    assert [c.customer_id for c in choices] == [3, 1, 2]
    assert choices[1].colour == Colour(3, G)


def test_next_choice_empty():
    assert next_choice({}) == []


def test_is_valid_choice():
    choice = Choice(1, Colour(1, M), 1)
    assert is_valid_choice({}, choice)
    assert is_valid_choice({1: M}, choice)
    assert not is_valid_choice({1: G}, choice)
    assert is_valid_choice({2: G}, choice)


def test_unsatisfied_customers_treats_free_codes_as_gloss():
    prefs = _example1()
    assert unsatisfied_customers(prefs, {3: G, 2: G, 5: M}) == []
    assert unsatisfied_customers(prefs, {}) == [3]
    assert unsatisfied_customers(prefs, {3: M, 5: M, 2: M, 4: M}) == [1]
