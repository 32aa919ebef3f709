"""Custom analyzer schema: asks the service for the direct trait fields.

A prebuilt image analyzer only returns raw regions. Registering this analyzer
makes the service pre-compute the values the rules prefer.
"""

from __future__ import annotations

from typing import Any

CUSTOM_ANALYZER_ID = "pig-feature-analyzer"


def custom_analyzer_definition() -> dict[str, Any]:
    return {
        "description": "Extracts pig drawing features for the Draw the Pig personality test",
        "baseAnalyzerId": "prebuilt-imageAnalyzer",
        "config": {"returnDetails": True},
        "fieldSchema": {
            "fields": {
                "Summary": {
                    "type": "string",
                    "method": "generate",
                    "description": "One sentence describing what the image shows",
                },
                "VerticalPlacement": {
                    "type": "string",
                    "method": "classify",
                    "enum": ["Top", "Middle", "Bottom"],
                    "description": "Vertical position of the pig on the page",
                },
                "Orientation": {
                    "type": "string",
                    "method": "classify",
                    "enum": ["Left", "Right", "Front"],
                    "description": "Direction the pig is facing",
                },
                "LegCount": {
                    "type": "integer",
                    "method": "generate",
                    "description": "Number of legs drawn",
                },
                "EarSize": {
                    "type": "string",
                    "method": "classify",
                    "enum": ["Large", "Normal"],
                    "description": "Whether the ears are notably large relative to the head",
                },
                "TailLength": {
                    "type": "number",
                    "method": "generate",
                    "description": "Tail length relative to body width, from 0 to 1",
                },
                "DetailCount": {
                    "type": "integer",
                    "method": "generate",
                    "description": "Number of distinct parts or details drawn",
                },
            }
        },
    }
