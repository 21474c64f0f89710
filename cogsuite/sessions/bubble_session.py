"""Numerical sort session.

Phases run intro -> practice_info -> practice -> practice_end -> assessment
-> complete. Practice questions are untimed; each assessment question has its
own countdown and a timeout moves on exactly like a finished selection.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cogsuite.games.bubbles import INTRO_BUBBLES, Bubble, ascending_ids, check_ranking, generate_bubble_set
from cogsuite.games.config import (
    BUBBLE_ASSESSMENT_DIFFICULTY,
    BUBBLE_PRACTICE_DIFFICULTY,
    BUBBLE_QUESTION_SECONDS,
    BUBBLE_QUESTIONS_PER_SECTION,
)
from cogsuite.games.errors import GameError, InvalidActionError

from .base import IGNORED, GameSession, Transition
from .events import Advance, SelectBubble, Tick
from .settings import get_setting


class BubblePhase(str, Enum):
    INTRO = "intro"
    PRACTICE_INFO = "practice_info"
    PRACTICE = "practice"
    PRACTICE_END = "practice_end"
    ASSESSMENT = "assessment"
    COMPLETE = "complete"


QUESTION_PHASES = (BubblePhase.PRACTICE, BubblePhase.ASSESSMENT)


@dataclass(frozen=True)
class Answer:
    section: str
    question: int
    bubbles: tuple
    selected: tuple
    correct: bool
    timed_out: bool = False

    def to_dict(self):
        return {
            "section": self.section,
            "question": self.question,
            "expected": ascending_ids(self.bubbles),
            "selected": list(self.selected),
            "correct": self.correct,
            "timed_out": self.timed_out,
        }


class BubbleSession(GameSession):
    game = "bubble"
    handlers = {
        Advance: "_on_advance",
        SelectBubble: "_on_select",
        Tick: "_on_tick",
    }

    def __init__(self, session_id=None, rng=None):
        super().__init__(session_id, rng)
        self.phase = BubblePhase.INTRO
        self.bubbles: List[Bubble] = list(INTRO_BUBBLES)
        self.selected: List[int] = []
        self.question = 1
        self.total = get_setting("BUBBLE_QUESTIONS_PER_SECTION", BUBBLE_QUESTIONS_PER_SECTION, int)
        self.question_seconds = get_setting("BUBBLE_QUESTION_SECONDS", BUBBLE_QUESTION_SECONDS, int)
        self.remaining = self.question_seconds
        self.answers: List[Answer] = []

    def _on_advance(self, ev: Advance) -> Transition:
        if self.phase is BubblePhase.INTRO:
            self.phase = BubblePhase.PRACTICE_INFO
        elif self.phase is BubblePhase.PRACTICE_INFO:
            self._start_section(BubblePhase.PRACTICE)
        elif self.phase is BubblePhase.PRACTICE_END:
            self._start_section(BubblePhase.ASSESSMENT)
        else:
            raise InvalidActionError(f"cannot advance from {self.phase.value}")
        return Transition(self.phase.value)

    def _difficulty(self) -> int:
        return BUBBLE_PRACTICE_DIFFICULTY if self.phase is BubblePhase.PRACTICE else BUBBLE_ASSESSMENT_DIFFICULTY

    def _start_section(self, phase: BubblePhase) -> None:
        self._next_generation()
        self.phase = phase
        self.question = 1
        self.selected = []
        self.remaining = self.question_seconds
        self.bubbles = generate_bubble_set(self._difficulty(), self.rng)

    def _record(self, timed_out: bool = False) -> Answer:
        answer = Answer(
            section=self.phase.value,
            question=self.question,
            bubbles=tuple(self.bubbles),
            selected=tuple(self.selected),
            correct=not timed_out and check_ranking(self.bubbles, self.selected),
            timed_out=timed_out,
        )
        self.answers.append(answer)
        self.log.info(event="bubble_answer", section=answer.section, question=answer.question, correct=answer.correct, timed_out=timed_out)
        return answer

    def _next_question(self) -> None:
        self._next_generation()
        self.selected = []
        self.remaining = self.question_seconds
        if self.question < self.total:
            self.question += 1
            self.bubbles = generate_bubble_set(self._difficulty(), self.rng)
        elif self.phase is BubblePhase.PRACTICE:
            self.phase = BubblePhase.PRACTICE_END
        else:
            self.phase = BubblePhase.COMPLETE

    def _on_select(self, ev: SelectBubble) -> Transition:
        if self.phase not in QUESTION_PHASES:
            raise InvalidActionError(f"bubbles cannot be selected during {self.phase.value}")
        if ev.bubble_id not in {b.id for b in self.bubbles}:
            raise GameError(f"unknown bubble {ev.bubble_id}", code="unknown_bubble")
        if ev.bubble_id in self.selected:
            self.selected.remove(ev.bubble_id)
            return Transition("deselected", details={"selected": list(self.selected)})
        self.selected.append(ev.bubble_id)
        if len(self.selected) < len(self.bubbles):
            return Transition("selected", details={"selected": list(self.selected)})
        answer = self._record()
        self._next_question()
        return Transition("answered", terminal=self.phase is BubblePhase.COMPLETE, details={"answer": answer.to_dict()})

    def _on_tick(self, ev: Tick) -> Transition:
        if not self.is_counting_down():
            return IGNORED
        self.remaining -= 1
        if self.remaining > 0:
            return Transition("tick")
        answer = self._record(timed_out=True)
        self._next_question()
        return Transition(
            "timeout",
            terminal=self.phase is BubblePhase.COMPLETE,
            details={"answer": answer.to_dict(), "generation": self.generation},
        )

    def is_counting_down(self) -> bool:
        return self.phase is BubblePhase.ASSESSMENT

    def time_left(self) -> Optional[int]:
        return self.remaining if self.phase is BubblePhase.ASSESSMENT else None

    def summary(self) -> Dict[str, Any]:
        scored = [a for a in self.answers if a.section == BubblePhase.ASSESSMENT.value]
        return {
            "answered": sum(1 for a in scored if not a.timed_out),
            "correct": sum(1 for a in scored if a.correct),
            "timed_out": sum(1 for a in scored if a.timed_out),
            "total": len(scored),
        }

    def snapshot(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "game": self.game,
            "phase": self.phase.value,
            "generation": self.generation,
            "question": self.question,
            "total": self.total,
            "time_left": self.time_left(),
            "selected": list(self.selected),
        }
        if self.phase in QUESTION_PHASES or self.phase is BubblePhase.INTRO:
            data["bubbles"] = [b.to_dict() for b in self.bubbles]
        if self.phase is BubblePhase.COMPLETE:
            data["summary"] = self.summary()
            data["answers"] = [a.to_dict() for a in self.answers]
        return data
