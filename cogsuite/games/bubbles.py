"""Arithmetic bubbles for the numerical sort game.

A round is three expressions, each built with a different operator, whose
integer results are pairwise distinct so there is exactly one ascending order.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

BUBBLES_PER_SET = 3


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


@dataclass(frozen=True)
class Bubble:
    id: int
    value: int
    display: str

    def to_dict(self, reveal: bool = False):
        data = {"id": self.id, "display": self.display}
        if reveal:
            data["value"] = self.value
        return data


# Fixed demonstration set shown before practice starts
INTRO_BUBBLES: List[Bubble] = [
    Bubble(id=1, value=5, display="2+3"),
    Bubble(id=2, value=6, display="6"),
    Bubble(id=3, value=8, display=""),
]


def make_expression(op: Operator, rng) -> tuple[int, str]:
    """Return (value, display) for one expression using ``op``."""
    if op is Operator.ADD:
        a = rng.randint(2, 25); b = rng.randint(2, 25)
        return a + b, f"{a}+{b}"
    if op is Operator.SUBTRACT:
        b = rng.randint(2, 20)
        a = rng.randint(b + 1, b + 25)  # keeps the result positive
        return a - b, f"{a}-{b}"
    if op is Operator.MULTIPLY:
        a = rng.randint(2, 12); b = rng.randint(2, 9)
        return a * b, f"{a}×{b}"
    divisor = rng.randint(2, 9)
    quotient = rng.randint(2, 12)
    return quotient, division_display(divisor, quotient)


def division_display(divisor: int, quotient: int) -> str:
    return f"{divisor * quotient}÷{divisor}"


def generate_bubble_set(difficulty: int = 1, rng: random.Random | None = None) -> List[Bubble]:
    """Build three bubbles with distinct operators and distinct values.

    ``difficulty`` selects the tier (1 practice, 2 assessment); both tiers
    currently share the same operand ranges.
    """
    if not isinstance(difficulty, int) or difficulty < 1:
        raise ValueError(f"unknown difficulty: {difficulty!r}")
    rng = rng or random
    ops = list(Operator)
    rng.shuffle(ops)
    bubbles: List[Bubble] = []
    used = set()
    for slot, op in enumerate(ops[:BUBBLES_PER_SET], start=1):
        value, display = make_expression(op, rng)
        while value in used:  # regenerate this slot with the same operator
            value, display = make_expression(op, rng)
        used.add(value)
        bubbles.append(Bubble(id=slot, value=value, display=display))
    return bubbles


_EXPR = re.compile(r"^\s*(\d+)\s*([+\-×÷*/x])\s*(\d+)\s*$")


def evaluate_display(display: str) -> int:
    """Evaluate a bubble label such as ``"7+5"`` or ``"30÷6"``."""
    m = _EXPR.match(display)
    if not m:
        if display.strip().isdigit():
            return int(display)
        raise ValueError(f"not an expression: {display!r}")
    a, op, b = int(m.group(1)), m.group(2), int(m.group(3))
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op in ("×", "*", "x"):
        return a * b
    if b == 0 or a % b:
        raise ValueError(f"inexact division: {display!r}")
    return a // b


def ascending_ids(bubbles: Sequence[Bubble]) -> List[int]:
    return [b.id for b in sorted(bubbles, key=lambda b: b.value)]


def check_ranking(bubbles: Sequence[Bubble], selected_ids: Sequence[int]) -> bool:
    """True if ``selected_ids`` lists every bubble in ascending value order."""
    return list(selected_ids) == ascending_ids(bubbles)


__all__ = [
    "Operator",
    "Bubble",
    "INTRO_BUBBLES",
    "generate_bubble_set",
    "evaluate_display",
    "ascending_ids",
    "check_ranking",
]
