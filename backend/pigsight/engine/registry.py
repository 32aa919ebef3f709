"""Rule registry: every trait rule is a standalone function registered via decorator.

Usage:
    @rule(category=TraitCategory.TAIL, description="Long tail")
    def tail_length(detection: Detection) -> PersonalityTrait | None:
        ...

Adding a rule = creating one module under ``pigsight.engine.rules``. Rules
always run in TraitCategory declaration order, never in import order.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import Callable, Optional

from pigsight.models.detection import Detection, PersonalityTrait, TraitCategory

logger = logging.getLogger(__name__)

RuleFn = Callable[[Detection], Optional[PersonalityTrait]]

_CATEGORY_ORDER = {category: index for index, category in enumerate(TraitCategory)}


@dataclass
class RuleSpec:
    category: TraitCategory
    fn: RuleFn
    description: str = ""

    @property
    def order(self) -> int:
        return _CATEGORY_ORDER[self.category]


class RuleRegistry:
    """One rule per trait category."""

    def __init__(self) -> None:
        self._rules: dict[TraitCategory, RuleSpec] = {}

    def register(self, spec: RuleSpec) -> None:
        if spec.category in self._rules:
            raise ValueError(f"Duplicate rule for category: {spec.category.value}")
        self._rules[spec.category] = spec
        logger.debug("Registered rule %s", spec.category.value)

    def get(self, category: TraitCategory) -> RuleSpec:
        return self._rules[category]

    def all(self) -> list[RuleSpec]:
        return sorted(self._rules.values(), key=lambda s: s.order)

    @property
    def count(self) -> int:
        return len(self._rules)


# Module-level singleton
_registry = RuleRegistry()


def get_registry() -> RuleRegistry:
    return _registry


def rule(*, category: TraitCategory, description: str = ""):
    """Decorator to register a rule function."""

    def decorator(fn: RuleFn) -> RuleFn:
        _registry.register(RuleSpec(category=category, fn=fn, description=description))
        return fn

    return decorator


def load_rules() -> RuleRegistry:
    """Import every module in ``pigsight.engine.rules`` so @rule decorators fire."""
    package_name = "pigsight.engine.rules"
    package = importlib.import_module(package_name)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package_name}.{module_name}")
    return _registry
