"""Cheap keyword gate: does the analyzer's caption plausibly describe a pig?

Not a classifier. It only keeps trait inference from running on obviously
wrong input; false positives and negatives are accepted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pigsight.models.detection import Detection

logger = logging.getLogger(__name__)

SUBJECT_KEYWORDS: tuple[str, ...] = (
    "pig",
    "pigs",
    "piggy",
    "piggie",
    "piglet",
    "piglets",
    "hog",
    "hogs",
    "swine",
    "boar",
    "sow",
    "porker",
    "porcine",
    "oink",
)

ANATOMY_KEYWORDS: tuple[str, ...] = (
    "snout",
    "snouts",
    "trotter",
    "trotters",
    "curly tail",
    "curled tail",
    "pink ears",
)


def _compile(words: tuple[str, ...]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


_SUBJECT_RE = _compile(SUBJECT_KEYWORDS)
_ANATOMY_RE = _compile(ANATOMY_KEYWORDS)


@dataclass(frozen=True)
class ValidationRejection:
    """Negative validation outcome. A value, not an exception."""

    description: str | None
    reason: str


def is_expected_subject(description: str | None) -> bool:
    if not description or not description.strip():
        return False
    return bool(_SUBJECT_RE.search(description) or _ANATOMY_RE.search(description))


def check_subject(detection: Detection) -> ValidationRejection | None:
    """None when the drawing passes the gate, otherwise why it did not."""
    description = detection.description
    if is_expected_subject(description):
        return None

    if not description or not description.strip():
        reason = "The analyzer returned no description of the image."
    else:
        reason = "The image does not appear to contain a pig."
    logger.warning("Subject validation rejected image: %s (description=%r)", reason, description)
    return ValidationRejection(description=description, reason=reason)
