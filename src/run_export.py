"""Orchestration logic for exporting a documentation tree to JSON-RAW."""

import argparse
import logging
from typing import Any

from src.export_data import export_data
from src.load_api_tree import load_api_tree
from src.load_config import load_config
from src.write_api_json import write_api_json

logger = logging.getLogger(__name__)


def run_export(args: argparse.Namespace) -> int:
    """Execute the full export pipeline."""
    config = _init_config(args)
    _init_logging(config, verbose=args.verbose)

    apis = load_api_tree(args.api_file)
    logger.info("Loaded %d classes from %s", len(apis), args.api_file)

    data = export_data(apis, event_class=config["export"]["event_class"])

    output = config["output"]
    out_file = write_api_json(
        data,
        args.out_dir,
        output["filename"],
        output["indent"],
        sort_keys=output["sort_keys"],
    )

    print(f"Exported {len(data)} classes into: {out_file}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    config = load_config(args.config)
    if args.filename:
        config["output"]["filename"] = args.filename
    return config


def _init_logging(config: dict[str, Any], *, verbose: bool) -> None:
    level = "INFO" if verbose else str(config["logging"]["level"]).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
