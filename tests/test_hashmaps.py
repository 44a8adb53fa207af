import pytest

from drillkit.lessons.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    fill_fruit_basket,
    fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_banana_is_in_basket():
    assert fruit_basket()["banana"] == 2


def _get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _get_fruit_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_record_is_complete():
    assert build_scores_table("A,B,1,3")["B"] == Team("B", 3, 1)


def test_empty_results_give_empty_table():
    assert build_scores_table("") == {}


@pytest.mark.parametrize("line", ["A,B,1", "A,B,x,2", "A,B,256,0", "A,B,-1,0"])
def test_malformed_lines_are_rejected(line):
    with pytest.raises(ValueError):
        build_scores_table(line)


def test_goal_overflow_is_rejected():
    with pytest.raises(ValueError):
        build_scores_table("A,B,200,0\nA,C,100,0")