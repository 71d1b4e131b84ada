"""
Export Service Module

Writes rendered portfolio pages to disk.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from backend.src.portfolio.errors import PortfolioError
from backend.src.portfolio.models import Portfolio
from backend.src.portfolio.renderer import generate_html

_DATACLASS_KWARGS = {"slots": True} if sys.version_info >= (3, 10) else {}

logger = logging.getLogger(__name__)


@dataclass(**_DATACLASS_KWARGS)
class ExportResult:
    """Result of an export operation."""

    success: bool
    file_path: Optional[Path] = None
    format: str = "html"
    error: Optional[str] = None
    file_size_bytes: int = 0


class ExportService:
    """Service for writing portfolio HTML documents."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def export_html(self, portfolio: Portfolio, output_path: Path) -> ExportResult:
        """
        Render the portfolio and save it as an HTML file.

        Args:
            portfolio: The portfolio to render
            output_path: Where to save the HTML file

        Returns:
            ExportResult with success status and file path
        """
        output_path = Path(output_path)
        try:
            html_content = generate_html(portfolio)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html_content, encoding=self.encoding)
        except (PortfolioError, OSError) as exc:
            logger.error("Failed to export portfolio to %s: %s", output_path, exc)
            return ExportResult(
                success=False,
                format="html",
                error=str(exc),
            )

        size = len(html_content.encode(self.encoding))
        logger.info("Exported portfolio to %s (%d bytes)", output_path, size)
        return ExportResult(
            success=True,
            file_path=output_path,
            format="html",
            file_size_bytes=size,
        )
