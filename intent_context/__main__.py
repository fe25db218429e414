"""Print the intent context prompt section for the current session."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional
from intent_context.config import IntentConfig
from intent_context.prompt import build_context_prompt
from intent_context.service import build_registry
from intent_context.utils.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="intent-context",
        description="Collect developer intent from AI coding assistant sessions"
    )
    parser.add_argument("--provider", help="Use only this provider (overrides INTENT_PROVIDER)")
    parser.add_argument("--manifest", action="store_true", help="List providers and whether they detect")
    parser.add_argument("--debug", action="store_true", help="Show provider debug logging")
    parser.add_argument("--log-file", type=Path, help="Log file path")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> str:
    config = IntentConfig.from_env()
    if args.provider:
        config.explicit_provider = args.provider

    registry = build_registry(config)

    if args.manifest:
        return json.dumps(await registry.generate_manifest(), indent=2)

    return build_context_prompt(await registry.detect_and_collect())


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)
    print(asyncio.run(run(args)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
