#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.src.cli.services.export_service import ExportService
from backend.src.config.settings import VALID_THEMES, load_settings
from backend.src.portfolio.builder import build_portfolio
from backend.src.portfolio.errors import PortfolioError

logger = logging.getLogger("build_portfolio")


def load_document(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def apply_theme(document: Dict[str, Any], theme: Optional[str]) -> Dict[str, Any]:
    """Return a copy of the document whose config uses ``theme`` when one is given."""
    config = document.get("config") if isinstance(document, dict) else None
    if not theme or not isinstance(config, dict):
        return document
    return {**document, "config": {**config, "theme": theme}}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Render a portfolio JSON document into a single HTML page."
    )
    parser.add_argument("document", help="Path to a JSON file with 'config' and 'projects'")
    parser.add_argument(
        "--output",
        help="Where to write the HTML file (defaults to PORTFOLIO_OUTPUT_DIR/<document>.html).",
    )
    parser.add_argument(
        "--theme",
        choices=VALID_THEMES,
        help="Override the theme set in the document.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON summary instead of the output path.",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    document_path = Path(args.document)
    try:
        document = load_document(document_path)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.theme:
        document = apply_theme(document, args.theme)
    elif settings.default_theme and isinstance(document, dict):
        config = document.get("config")
        if isinstance(config, dict) and not config.get("theme"):
            document = apply_theme(document, settings.default_theme)

    try:
        portfolio = build_portfolio(document)
    except PortfolioError as exc:
        print(f"Portfolio error ({exc.code}): {exc}", file=sys.stderr)
        return 1

    output_path = (
        Path(args.output)
        if args.output
        else settings.output_dir / f"{document_path.stem}.html"
    )
    result = ExportService().export_html(portfolio, output_path)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.json:
        print(
            json.dumps(
                {
                    "output": str(result.file_path),
                    "projects": len(portfolio.projects),
                    "theme": portfolio.config.theme,
                    "size_bytes": result.file_size_bytes,
                },
                indent=2,
            )
        )
    else:
        print(f"Portfolio written: {result.file_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
