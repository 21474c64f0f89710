import random

import pytest

from cogsuite.games.bubbles import ascending_ids
from cogsuite.games.errors import GameError, InvalidActionError
from cogsuite.sessions import Advance, BubblePhase, BubbleSession, SelectBubble, Tick


def _answer(s, correct=True):
    order = ascending_ids(s.bubbles)
    if not correct:
        order = list(reversed(order))
    t = None
    for bid in order:
        t = s.dispatch(SelectBubble(bid))
    return t


def test_phase_flow_and_summary():
    s = BubbleSession(rng=random.Random(4))
    assert s.phase is BubblePhase.INTRO
    with pytest.raises(InvalidActionError):
        s.dispatch(SelectBubble(1))
    s.dispatch(Advance())
    assert s.phase is BubblePhase.PRACTICE_INFO
    s.dispatch(Advance())
    assert s.phase is BubblePhase.PRACTICE
    assert s.time_left() is None
    assert s.dispatch(Tick(s.generation)).outcome == "ignored"

    _answer(s)
    assert s.question == 2
    _answer(s, correct=False)
    assert s.phase is BubblePhase.PRACTICE_END

    s.dispatch(Advance())
    assert s.phase is BubblePhase.ASSESSMENT
    assert s.question == 1 and s.time_left() == 15

    _answer(s)
    t = _answer(s, correct=False)
    assert t.terminal
    assert s.phase is BubblePhase.COMPLETE
    assert s.summary() == {"answered": 2, "correct": 1, "timed_out": 0, "total": 2}
    snap = s.snapshot()
    assert len(snap["answers"]) == 4
    with pytest.raises(InvalidActionError):
        s.dispatch(Advance())


def test_assessment_timeout_moves_on():
    s = BubbleSession(rng=random.Random(8))
    for _ in range(2):
        s.dispatch(Advance())
    _answer(s)
    _answer(s)
    s.dispatch(Advance())
    gen = s.generation
    s.dispatch(SelectBubble(s.bubbles[0].id))
    outcomes = [s.dispatch(Tick(gen)).outcome for _ in range(15)]
    assert outcomes[-1] == "timeout"
    assert s.question == 2
    assert s.selected == []
    assert s.remaining == 15
    last = s.answers[-1]
    assert last.timed_out and not last.correct
    assert s.generation > gen
    assert s.dispatch(Tick(gen)).outcome == "stale"
    gen = s.generation
    for _ in range(15):
        t = s.dispatch(Tick(gen))
    assert t.terminal
    assert s.summary() == {"answered": 0, "correct": 0, "timed_out": 2, "total": 2}


def test_select_toggles_and_validates():
    s = BubbleSession(rng=random.Random(1))
    s.dispatch(Advance())
    s.dispatch(Advance())
    first = s.bubbles[0].id
    assert s.dispatch(SelectBubble(first)).outcome == "selected"
    assert s.dispatch(SelectBubble(first)).outcome == "deselected"
    assert s.selected == []
    with pytest.raises(GameError) as exc:
        s.dispatch(SelectBubble(42))
    assert exc.value.code == "unknown_bubble"


def test_section_start_invalidates_old_ticks():
    s = BubbleSession(rng=random.Random(2))
    old = s.generation
    s.dispatch(Advance())
    s.dispatch(Advance())
    assert s.generation > old
    assert s.dispatch(Tick(old)).outcome == "stale"


def test_bubble_values_hidden_in_snapshot():
    s = BubbleSession()
    s.dispatch(Advance())
    s.dispatch(Advance())
    for b in s.snapshot()["bubbles"]:
        assert set(b) == {"id", "display"}


def test_each_question_gets_a_fresh_generation():
    s = BubbleSession(rng=random.Random(4))
    for _ in range(2):
        s.dispatch(Advance())
    _answer(s)
    _answer(s)
    s.dispatch(Advance())
    gen = s.generation
    for _ in range(10):
        s.dispatch(Tick(gen))
    assert s.remaining == 5
    _answer(s)
    assert s.question == 2
    assert s.generation > gen
    assert s.dispatch(Tick(gen)).outcome == "stale"
    assert s.remaining == 15
    assert s.dispatch(Tick(s.generation)).outcome == "tick"
