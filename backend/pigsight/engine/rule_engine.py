"""Rule engine: runs every registered trait rule over one Detection."""

from __future__ import annotations

import logging

from pigsight.engine.registry import RuleRegistry, load_rules
from pigsight.models.detection import Detection, PersonalityTrait

logger = logging.getLogger(__name__)


class RuleEngine:
    """Evaluates rules independently, in fixed category order."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or load_rules()

    def infer_traits(self, detection: Detection) -> list[PersonalityTrait]:
        traits: list[PersonalityTrait] = []
        for spec in self.registry.all():
            trait = spec.fn(detection)
            if trait is None:
                logger.debug("  %s: no trait", spec.category.value)
                continue
            logger.debug("  %s: %s", spec.category.value, trait.evidence.key)
            traits.append(trait)

        logger.info(
            "Rule engine: %d/%d rules produced a trait",
            len(traits),
            self.registry.count,
        )
        return traits


def create_engine() -> RuleEngine:
    return RuleEngine()


def infer_traits(detection: Detection) -> list[PersonalityTrait]:
    """Map a Detection to its ordered list of personality traits."""
    return create_engine().infer_traits(detection)
