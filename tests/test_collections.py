import pytest

from rustdrill.lessons.collections import (
    Append,
    Fruit,
    Team,
    Trim,
    Uppercase,
    build_scores_table,
    fill_vec,
    fruit_basket,
    transformer,
    vec_loop,
    vec_map,
)


def test_transformer_it_works():
    output = transformer(
        [
            ("hello", Uppercase()),
            (" all roads lead to rome! ", Trim()),
            ("foo", Append(1)),
            ("bar", Append(5)),
        ]
    )
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_transformer_append_zero_times():
    assert transformer([("x", Append(0))]) == ["x"]


def test_transformer_rejects_unknown_command():
    with pytest.raises(TypeError):
        transformer([("x", "shout")])


def test_vec_loop():
    assert vec_loop([2, 4, 6, 8, 10]) == [4, 8, 12, 16, 20]


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_fill_vec_keeps_original():
    vec0 = [22, 44, 66]
    vec1 = fill_vec(vec0)
    assert vec0 == [22, 44, 66]
    assert vec1 == [22, 44, 66, 88]


def _get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _get_fruit_basket()
    fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _get_fruit_basket()
    fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _get_fruit_basket()
    fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = _get_fruit_basket()
    fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


def test_missing_fruits_get_two():
    basket = _get_fruit_basket()
    fruit_basket(basket)
    assert basket[Fruit.BANANA] == 2
    assert basket[Fruit.PINEAPPLE] == 2


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
    assert build_scores_table(RESULTS)["Spain"] == Team(goals_scored=0, goals_conceded=2)


def test_build_scores_rejects_bad_goals():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_build_scores_rejects_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France\n")