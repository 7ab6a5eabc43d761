"""
Run one widget refresh and print it.

Usage:
    python -m power_law_gauge
    python -m power_law_gauge --profile dual --verbose
    python -m power_law_gauge --config path/to/config.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from power_law_gauge import configure_logging
from power_law_gauge.adapters.console_logger import ConsoleAuditLogger
from power_law_gauge.adapters.quote_chain import QuotesUnavailable
from power_law_gauge.config.loader import ConfigLoader
from power_law_gauge.config.models import WidgetConfig
from power_law_gauge.pipeline.factory import create_pipeline
from power_law_gauge.presentation.widget import build_view, render_text
from power_law_gauge.validation.quote_validator import ValidationError as QuoteRejected

logger = logging.getLogger("power_law_gauge")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="power_law_gauge",
        description="Bitcoin power-law fair value gauge",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--profile", default=None, help="Profile under config/profiles")
    parser.add_argument(
        "--base-path",
        type=Path,
        default=Path("."),
        help="Directory containing config/ (default: current directory)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline events")
    return parser.parse_args(argv)


def load_widget_config(args: argparse.Namespace) -> WidgetConfig:
    """Explicit --config, else config/default.yaml if present, else built-in defaults."""
    return ConfigLoader(base_path=args.base_path).load(args.config, args.profile)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_widget_config(args)
        pipeline = create_pipeline(config, audit_logger=ConsoleAuditLogger(verbose=args.verbose))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        snapshot = pipeline.run()
    except (QuotesUnavailable, QuoteRejected) as e:
        logger.error(f"Cannot refresh gauge: {e}")
        return 1

    print(render_text(build_view(snapshot, config.display)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
