"""Command-line entry point.

Usage:
    python -m recipe_health analyze "2 slices bacon" "heavy cream" pasta
    python -m recipe_health analyze --env-file .env.local broccoli salmon
    python -m recipe_health config
    python -m recipe_health config --json
"""

# ruff: noqa: T201

import argparse
import asyncio
import json
import logging
import sys

from recipe_health.client import InferenceClient
from recipe_health.config import get_config_info, print_config_debug, resolve_config
from recipe_health.exceptions import (
    CallerInputError,
    ConfigurationError,
    InferenceError,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the nutrition quality of a recipe",
        prog="python -m recipe_health",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--env-file", help="Optional .env file to load")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze a list of ingredients")
    analyze.add_argument("ingredients", nargs="*", help="Ingredient descriptions")

    config = sub.add_parser("config", help="Show the effective configuration")
    config.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON instead of human-readable format",
    )
    return parser


async def _analyze(ingredients: list[str], env_file: str | None) -> dict:
    client = InferenceClient(resolve_config(env_file=env_file))
    result = await client.analyze(ingredients)
    return {"analysis": result.to_dict()}


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "config":
            cfg = resolve_config(env_file=args.env_file)
            if args.json:
                print(json.dumps(get_config_info(cfg), indent=2))
            else:
                print_config_debug(cfg)
            return 0

        payload = asyncio.run(_analyze(args.ingredients, args.env_file))
    except CallerInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2
    except InferenceError as e:
        print(f"analysis failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
