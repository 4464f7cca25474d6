#!/usr/bin/env python3
"""
Content analysis from the command line.

Usage:
    edaitorial-analyze --title "My article" --body-file article.html [--no-ai] [--gate]

Prints the analysis (or the publish-gate decision) as JSON. With --gate the
exit code is 1 when publishing would be blocked.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from edaitorial.features.analysis.dependencies.analyzer import get_content_analyzer
from edaitorial.features.quality_gate.dependencies.gate import get_publish_gate
from edaitorial.platform.config import Settings
from edaitorial.platform.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze content quality (SEO, accessibility, typos, links)")
    parser.add_argument("--title", required=True, help="Content title")
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--body", default="", help="Content body (may contain markup)")
    body.add_argument("--body-file", type=Path, help="Read the body from a file")
    parser.add_argument("--content-type", default="article", help="Content type identifier")
    parser.add_argument("--url", default="", help="Content URL or path alias")
    parser.add_argument(
        "--node", action="append", default=[], dest="available_nodes",
        help="Known internal content identifier (repeatable)")
    parser.add_argument("--no-ai", action="store_true", help="Rule-based checks only")
    parser.add_argument("--no-cache", action="store_true", help="Disable the determinism cache")
    parser.add_argument("--gate", action="store_true", help="Evaluate the publish quality gate")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.no_ai:
        overrides["USE_AI"] = False
    if args.no_cache:
        overrides["CACHE_ANALYSIS_RESULTS"] = False
    settings = Settings(**overrides)

    configure_logging(settings.LOG_DIR, settings.LOG_LEVEL)

    body = args.body_file.read_text(encoding="utf-8") if args.body_file else args.body
    if args.gate:
        decision = get_publish_gate(settings).evaluate(
            args.title, body, args.content_type,
            available_nodes=args.available_nodes, url=args.url)
        print(decision.model_dump_json(indent=2))
        return 0 if decision.allowed else 1

    analyzer = get_content_analyzer(settings)
    result = analyzer.analyze(
        args.title, body, args.content_type,
        available_nodes=args.available_nodes, url=args.url)
    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
