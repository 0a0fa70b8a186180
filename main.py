#!/usr/bin/env python
"""CLI for the Beacon credibility analyzer."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from beacon.config import create_from_config, get_default_config_path, load_config

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["analyze", "phishing"]
    text: str
    config: Path
    log: bool = False
    log_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("text")
    @classmethod
    def text_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text is required for analysis.")
        return v


async def run(args: CLIArgs) -> None:
    """Run the selected pipeline and print the result contract as JSON.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    pipeline, run_logger = create_from_config(
        config,
        pipeline_type="content" if args.command == "analyze" else "phishing",
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir,
    )

    logger.info(f"Running {args.command} on {len(args.text)} characters")
    logger.info(f"Config: {args.config}")

    result, usage = await pipeline.run(args.text)

    print(json.dumps(result.to_dict(), indent=2))

    logger.info("\n--- Usage Summary ---")
    logger.info(f"Model calls: {len(usage.api_calls)}")
    logger.info(f"Input tokens: {usage.input_tokens:,}")
    logger.info(f"Output tokens: {usage.output_tokens:,}")
    if usage.registry_requests:
        logger.info(f"Fact-check lookups: {usage.registry_requests}")

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Assess the credibility of a piece of text.")
    parser.add_argument(
        "command",
        choices=["analyze", "phishing"],
        help="analyze: fact-check and bias scan; phishing: phishing scan",
    )
    parser.add_argument(
        "text",
        help="Text to analyze, or '-' to read from stdin",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for log files (default: from config)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()
    text = sys.stdin.read() if ns.text == "-" else ns.text

    try:
        args = CLIArgs(
            command=ns.command,
            text=text,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
