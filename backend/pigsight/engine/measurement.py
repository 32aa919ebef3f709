"""Measurement: tagged value for one rule input.

A rule quantity comes from one of three places:

  Direct(value)          analyzer pre-computed it, authoritative
  Derived(value, basis)  computed from region geometry as a fallback
  Absent(reason)         neither is available

Rules build a Measurement first and branch on its tag, so the direct-over-derived
precedence lives in one place per rule instead of in scattered presence checks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Direct:
    value: Any


@dataclass(frozen=True)
class Derived:
    value: float
    basis: str = ""  # what the ratio is relative to, e.g. "head", "canvas"


@dataclass(frozen=True)
class Absent:
    reason: str = ""


Measurement = Union[Direct, Derived, Absent]


def measure(direct: Any, derive: Callable[[], Measurement]) -> Measurement:
    """Prefer the direct value; only call ``derive`` when it is missing."""
    if direct is not None:
        return Direct(direct)
    return derive()
