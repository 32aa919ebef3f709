"""PigSight trait inference engine."""

from pigsight.engine.registry import rule, get_registry, load_rules
from pigsight.engine.rule_engine import RuleEngine, infer_traits
from pigsight.engine.summary import compose_summary
from pigsight.engine.validator import ValidationRejection, check_subject, is_expected_subject

__all__ = [
    "rule",
    "get_registry",
    "load_rules",
    "RuleEngine",
    "infer_traits",
    "compose_summary",
    "ValidationRejection",
    "check_subject",
    "is_expected_subject",
]
