"""Portfolio record construction and HTML rendering."""

from .builder import add_project, build_portfolio, create_portfolio
from .errors import ConflictError, PortfolioError, ValidationError
from .models import Portfolio, PortfolioConfig, Project, Theme
from .renderer import generate_html
from .validation import escape_html, is_valid_url

__all__ = [
    "ConflictError",
    "Portfolio",
    "PortfolioConfig",
    "PortfolioError",
    "Project",
    "Theme",
    "ValidationError",
    "add_project",
    "build_portfolio",
    "create_portfolio",
    "escape_html",
    "generate_html",
    "is_valid_url",
]
