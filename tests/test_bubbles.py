import random

import pytest

from cogsuite.games.bubbles import (
    INTRO_BUBBLES,
    Bubble,
    ascending_ids,
    check_ranking,
    division_display,
    evaluate_display,
    generate_bubble_set,
)


@pytest.mark.parametrize("difficulty", [1, 2])
def test_sets_have_distinct_values_and_operators(difficulty):
    rng = random.Random(11)
    for _ in range(200):
        bubbles = generate_bubble_set(difficulty, rng)
        assert [b.id for b in bubbles] == [1, 2, 3]
        assert len({b.value for b in bubbles}) == 3
        ops = set()
        for b in bubbles:
            assert evaluate_display(b.display) == b.value
            ops.update(ch for ch in b.display if ch in "+-×÷")
        assert len(ops) == 3


def test_division_display():
    assert division_display(4, 6) == "24÷4"
    assert evaluate_display("24÷4") == 6


def test_evaluate_display_variants():
    assert evaluate_display("7+5") == 12
    assert evaluate_display("30-4") == 26
    assert evaluate_display("3×4") == 12
    assert evaluate_display("6") == 6
    with pytest.raises(ValueError):
        evaluate_display("7÷2")
    with pytest.raises(ValueError):
        evaluate_display("")


def test_ranking():
    bubbles = [Bubble(1, 9, "3×3"), Bubble(2, 4, "2+2"), Bubble(3, 7, "10-3")]
    assert ascending_ids(bubbles) == [2, 3, 1]
    assert check_ranking(bubbles, [2, 3, 1])
    assert not check_ranking(bubbles, [2, 1, 3])
    assert not check_ranking(bubbles, [2, 3])


def test_intro_set_order():
    assert ascending_ids(INTRO_BUBBLES) == [1, 2, 3]
    assert "value" not in INTRO_BUBBLES[0].to_dict()


@pytest.mark.parametrize("bad", [0, -1, "1", 1.5, None])
def test_bad_difficulty(bad):
    with pytest.raises(ValueError):
        generate_bubble_set(bad)
