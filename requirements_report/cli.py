#!/usr/bin/env python3
"""
CLI wrapper for building a requirements report.

Usage:
    python -m requirements_report.cli project.json                  # build with defaults
    python -m requirements_report.cli project.json --output-dir out/
    python -m requirements_report.cli project.yml --config my_report.yml --no-charts
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .data_sources import load_project, load_report_settings
from .logging_utils import get_logger, setup_logging
from .pipelines import ReportGenerationError, build_pdf

logger = get_logger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Build a requirements document PDF from a project file")
    p.add_argument("project", type=Path, help="Project record (JSON or YAML)")
    p.add_argument("--output-dir", dest="output_dir", type=Path)
    p.add_argument("--config", dest="config_path", type=Path, help="YAML overrides for report.defaults.yml")
    p.add_argument("--no-charts", dest="no_charts", action="store_true", help="Skip the requirements analysis page")
    p.add_argument("--log-file", dest="log_file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        cfg = load_report_settings(args.config_path)
        project = load_project(args.project)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.no_charts:
        cfg.charts_enabled = False

    try:
        path = build_pdf(project, cfg, output_dir=args.output_dir)
    except ReportGenerationError as exc:
        logger.error("%s; please try again", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
