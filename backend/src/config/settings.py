import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

VALID_THEMES = ("light", "dark")


@dataclass(frozen=True)
class PortfolioSettings:
    """Environment-driven options for the portfolio build script."""

    log_level: str = "INFO"
    output_dir: Path = Path("output")
    default_theme: Optional[str] = None


def load_settings(env_file: Optional[Path] = None) -> PortfolioSettings:
    """
    Load settings from the environment, reading a .env file first.

    Args:
        env_file: Optional explicit .env path; defaults to python-dotenv's lookup.

    Raises:
        ValueError: if PORTFOLIO_DEFAULT_THEME is set to an unknown theme.
    """
    load_dotenv(dotenv_path=env_file)

    default_theme = os.getenv("PORTFOLIO_DEFAULT_THEME") or None
    if default_theme is not None:
        default_theme = default_theme.strip().lower()
        if default_theme not in VALID_THEMES:
            raise ValueError(
                f"PORTFOLIO_DEFAULT_THEME must be one of {', '.join(VALID_THEMES)}, "
                f"got {default_theme!r}"
            )

    return PortfolioSettings(
        log_level=(os.getenv("PORTFOLIO_LOG_LEVEL") or "INFO").upper(),
        output_dir=Path(os.getenv("PORTFOLIO_OUTPUT_DIR") or "output"),
        default_theme=default_theme,
    )
