"""Trait list -> one human-readable paragraph."""

from __future__ import annotations

from collections.abc import Sequence

from pigsight.engine.statements import UNABLE_TO_ANALYZE
from pigsight.models.detection import PersonalityTrait


def compose_summary(traits: Sequence[PersonalityTrait]) -> str:
    """Join trait statements into a paragraph.

    Statements already end in a period; no other grammar fixing is done.
    """
    if not traits:
        return UNABLE_TO_ANALYZE

    statements = [t.statement for t in traits]

    if len(statements) == 1:
        return f"You have a {statements[0]}"

    if len(statements) == 2:
        return f"You {statements[0]} You also {statements[1]}"

    first_part = " You ".join(statements[:-1])
    return f"You {first_part} Finally, you {statements[-1]}"
