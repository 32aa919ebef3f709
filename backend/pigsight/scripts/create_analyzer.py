"""Create or update the custom pig-feature analyzer in Azure Content Understanding.

Usage:
    python -m pigsight.scripts.create_analyzer          # asks for confirmation
    python -m pigsight.scripts.create_analyzer --yes    # CI / automation
    python -m pigsight.scripts.create_analyzer --check  # only test the connection

Needs CONTENT_UNDERSTANDING_ENDPOINT and CONTENT_UNDERSTANDING_KEY (env or .env).
One-time setup: once the analyzer exists, set ANALYZER_ID to use it.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from dotenv import load_dotenv

from pigsight.config import Settings
from pigsight.gateway.analyzer_definition import CUSTOM_ANALYZER_ID, custom_analyzer_definition
from pigsight.gateway.client import AnalysisGateway
from pigsight.gateway.exceptions import AnalyzerError


def confirm(question: str) -> bool:
    answer = input(f"{question} (yes/no): ").strip().lower()
    return answer in ("yes", "y")


async def create(settings: Settings, analyzer_id: str) -> None:
    async with AnalysisGateway(settings, analyzer_id=analyzer_id) as gateway:
        await gateway.create_analyzer()


async def check(settings: Settings) -> bool:
    async with AnalysisGateway(settings) as gateway:
        return await gateway.check_connection()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the custom pig-feature analyzer")
    parser.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only submit a sample image to test the endpoint and key",
    )
    parser.add_argument(
        "--analyzer-id",
        default=CUSTOM_ANALYZER_ID,
        help=f"Analyzer id to create (default: {CUSTOM_ANALYZER_ID})",
    )
    args = parser.parse_args()

    load_dotenv()
    settings = Settings()

    if not settings.content_understanding_endpoint or not settings.content_understanding_key:
        print("Error: Azure Content Understanding credentials not configured.")
        print("  Set CONTENT_UNDERSTANDING_ENDPOINT and CONTENT_UNDERSTANDING_KEY.")
        sys.exit(1)

    if args.check:
        print(f"Testing connection to {settings.content_understanding_endpoint} ...")
        if not asyncio.run(check(settings)):
            print("Connection failed. See the log for the analyzer response.")
            sys.exit(1)
        print("Connection OK.")
        return

    definition = custom_analyzer_definition()
    print(f"Endpoint: {settings.content_understanding_endpoint}")
    print(f"Analyzer: {args.analyzer_id} (base {definition['baseAnalyzerId']})")
    print("Custom fields:")
    for name, field in definition["fieldSchema"]["fields"].items():
        print(f"  - {name} ({field['type']}): {field['description']}")
    print()

    if not args.yes and not confirm("Create/update this analyzer in Azure?"):
        print("Cancelled.")
        sys.exit(0)

    try:
        asyncio.run(create(settings, args.analyzer_id))
    except AnalyzerError as e:
        print(f"Failed to create analyzer: {e}")
        sys.exit(1)

    print(f"Analyzer {args.analyzer_id} is ready. Set ANALYZER_ID={args.analyzer_id} to use it.")


if __name__ == "__main__":
    main()
