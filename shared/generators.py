"""
Challenge generators — pure, side-effect-free functions.

Uses the system PRNG: the arithmetic challenge is a proof-of-human check,
not a secret.
"""

from __future__ import annotations

import operator
import random
from typing import Callable, Optional

from schemas.models.verification import Challenge

OPERAND_MIN = 1
OPERAND_MAX = 10

OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def build_challenge(left: int, op: str, right: int) -> Challenge:
    """Build the challenge for ``left op right``.

    Subtraction may go negative (``3 - 4`` expects ``-1``).

    Raises:
        KeyError: if *op* is not one of ``+``, ``-``, ``*``.
    """
    answer = OPERATORS[op](left, right)
    return Challenge(problem_text=f"{left} {op} {right}", expected_answer=answer)


def generate_challenge(rng: Optional[random.Random] = None) -> Challenge:
    """Generate a random arithmetic challenge.

    Args:
        rng: Optional random source (defaults to the module-level PRNG).

    Returns:
        Challenge with two operands drawn from [1, 10] and one of ``+ - *``.
    """
    rng = rng or random
    left = rng.randint(OPERAND_MIN, OPERAND_MAX)
    right = rng.randint(OPERAND_MIN, OPERAND_MAX)
    op = rng.choice(list(OPERATORS))
    return build_challenge(left, op, right)
