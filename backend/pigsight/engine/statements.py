"""Personality statements, group discussion prompts and the analysis rubric."""

from __future__ import annotations

from typing import Any

from pigsight.engine import thresholds

PERSONALITY_STATEMENTS: dict[str, dict[str, str]] = {
    "placement": {
        "Top": "tendency to be positive and optimistic.",
        "Middle": "tendency to be a realist.",
        "Bottom": "tendency to be pessimistic and may be prone to behaving negatively.",
    },
    "orientation": {
        "Left": "believe in tradition and be friendly; may remember dates well.",
        "Right": "innovative and active; may forget dates and may not have a strong sense of family.",
        "Front": (
            "direct; may enjoy playing devil's advocate; "
            "not prone to fearing or avoiding confrontational discussions."
        ),
    },
    "details": {
        "Many": "analytical; may be cautious and struggle with trust.",
        "Few": "emotional; big-picture; great risk taker; may be reckless or impulsive.",
    },
    "legs": {
        "four": "secure and stick to ideals; may be described as stubborn.",
        "lessThanFour": "major period of change; may struggle with insecurities.",
    },
    "ears": {
        "Large": "good listener (the bigger, the better).",
    },
    "tail": {
        "Long": "indicates intelligence (the longer, the better).",
    },
}

UNABLE_TO_ANALYZE = "Unable to analyze drawing. Please ensure the pig is clearly visible."

DISCUSSION_PROMPTS: tuple[str, ...] = (
    "Who drew at the top of the page? Do they tend to be optimistic in real life?",
    "Who drew at the bottom? Are they more realistic or pessimistic?",
    "Which direction are most pigs facing? What does this say about the group?",
    "Who included the most details? Are they analytical thinkers?",
    "Compare leg counts. Who might be going through changes?",
    "Were the interpretations accurate? Discuss similarities and differences.",
)

ANALYSIS_RUBRIC: dict[str, dict[str, Any]] = {
    "placement": {
        "description": "Vertical position on page",
        "top": "Optimistic, positive outlook",
        "middle": "Realistic, balanced",
        "bottom": "Pessimistic, negative tendency",
        "threshold": {"top": thresholds.PLACEMENT_TOP, "bottom": thresholds.PLACEMENT_BOTTOM},
    },
    "orientation": {
        "description": "Direction the pig is facing",
        "left": "Traditional, friendly",
        "right": "Innovative, active",
        "front": "Direct, confrontational",
        "threshold": thresholds.ORIENTATION_OFFSET_FRACTION,
    },
    "details": {
        "description": "Level of detail in drawing",
        "many": f"Analytical, cautious (>{thresholds.DETAIL_COUNT} parts)",
        "few": f"Emotional, risk-taker (<={thresholds.DETAIL_COUNT} parts)",
        "threshold": thresholds.DETAIL_COUNT,
    },
    "legs": {
        "description": "Number of legs drawn",
        "four": "Secure, stubborn",
        "lessThanFour": "Insecure, changing",
    },
    "ears": {
        "description": "Relative size of ears",
        "large": f"Good listener (>{thresholds.EAR_TO_HEAD:.0%} of head)",
        "threshold": thresholds.EAR_TO_HEAD,
    },
    "tail": {
        "description": "Relative length of tail",
        "long": f"Intelligent (>{thresholds.TAIL_TO_BODY:.0%} of body)",
        "threshold": thresholds.TAIL_TO_BODY,
    },
}


def get_statement(category: str, verdict: str, default: str | None = None) -> str:
    """Statement text for a category verdict, or the ``default`` verdict's text."""
    table = PERSONALITY_STATEMENTS[category]
    if verdict in table:
        return table[verdict]
    if default is not None:
        return table[default]
    raise KeyError(f"No statement for {category}={verdict}")
