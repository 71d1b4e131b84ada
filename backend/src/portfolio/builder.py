"""Build and grow an in-memory portfolio."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ConflictError, ValidationError
from .models import DEFAULT_THEME, Portfolio, PortfolioConfig, Project
from .validation import is_valid_url

logger = logging.getLogger(__name__)

ConfigInput = Union[PortfolioConfig, Mapping[str, Any]]
ProjectInput = Union[Project, Mapping[str, Any]]

REQUIRED_CONFIG_FIELDS = ("name", "title", "bio", "email")
REQUIRED_PROJECT_FIELDS = ("id", "title", "description", "url")

MISSING_CONFIG_MESSAGE = "Portfolio requires name, title, bio, and email in configuration"
MISSING_PROJECT_MESSAGE = "Project requires id, title, description, and url"


def _field(source: Any, name: str, alias: Optional[str] = None) -> Any:
    if isinstance(source, Mapping):
        value = source.get(name)
        if value is None and alias:
            value = source.get(alias)
        return value
    return getattr(source, name, None)


def _has_required(source: Any, fields: Sequence[str]) -> bool:
    return all(isinstance(_field(source, name), str) and _field(source, name) for name in fields)


def _copy_model(source: Any, model: type[BaseModel], code: str) -> Any:
    """Return an independent model instance built from ``source``."""
    if isinstance(source, model):
        return source.model_copy(deep=True)
    try:
        return model.model_validate(dict(source))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "input"
        raise ValidationError(
            f"Invalid {model.__name__} data: {location}: {first['msg']}", code
        ) from exc
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid {model.__name__} data: {exc}", code) from exc


def create_portfolio(config: ConfigInput) -> Portfolio:
    """
    Create a portfolio for the owner described by ``config``.

    Args:
        config: A PortfolioConfig or a mapping with the same keys
            (``socialLinks`` is accepted as an alias of ``social_links``).

    Returns:
        A new Portfolio with a resolved theme and no projects.

    Raises:
        ValidationError: when a required field is missing or empty, or when
            any social link is not an absolute URL.
    """
    if config is None or not _has_required(config, REQUIRED_CONFIG_FIELDS):
        raise ValidationError(MISSING_CONFIG_MESSAGE, "missing_fields")

    if isinstance(config, Mapping) and not config.get("theme"):
        # An empty theme falls back to the default like an absent one.
        config = {key: value for key, value in config.items() if key != "theme"}

    resolved: PortfolioConfig = _copy_model(config, PortfolioConfig, "invalid_config")

    if resolved.social_links:
        invalid_links = [
            f"{platform}: {url}"
            for platform, url in resolved.social_links.items()
            if url and not is_valid_url(url)
        ]
        if invalid_links:
            raise ValidationError(
                f"Invalid URLs in social links: {', '.join(invalid_links)}",
                "invalid_url",
            )

    resolved = resolved.model_copy(update={"theme": resolved.theme or DEFAULT_THEME})
    logger.debug("Created portfolio for %s (theme=%s)", resolved.name, resolved.theme)
    return Portfolio(config=resolved, projects=[])


def add_project(portfolio: Portfolio, project: ProjectInput) -> None:
    """
    Append a copy of ``project`` to ``portfolio.projects``.

    Checks run in a fixed order and the first failure is raised: required
    fields, duplicate id, project URL, image URL. Nothing is appended unless
    every check passes.
    """
    if project is None or not _has_required(project, REQUIRED_PROJECT_FIELDS):
        raise ValidationError(MISSING_PROJECT_MESSAGE, "missing_fields")

    project_id = _field(project, "id")
    if any(existing.id == project_id for existing in portfolio.projects):
        raise ConflictError(f'Project with ID "{project_id}" already exists', "duplicate_id")

    title = _field(project, "title")
    url = _field(project, "url")
    if not is_valid_url(url):
        raise ValidationError(f'Invalid URL in project "{title}": {url}', "invalid_url")

    image_url = _field(project, "image_url", alias="imageUrl")
    if image_url and not is_valid_url(image_url):
        raise ValidationError(
            f'Invalid image URL in project "{title}": {image_url}',
            "invalid_url",
        )

    stored: Project = _copy_model(project, Project, "invalid_project")
    portfolio.projects.append(stored)
    logger.debug("Added project %s (%d total)", stored.id, len(portfolio.projects))


def build_portfolio(document: Mapping[str, Any]) -> Portfolio:
    """Build a portfolio from a ``{"config": ..., "projects": [...]}`` document."""
    if not isinstance(document, Mapping):
        raise ValidationError("Portfolio document must be a mapping", "invalid_document")

    config = document.get("config")
    if not isinstance(config, Mapping):
        raise ValidationError(
            "Portfolio document requires a 'config' mapping", "invalid_document"
        )

    projects = document.get("projects", [])
    if not isinstance(projects, list):
        raise ValidationError(
            "Portfolio document 'projects' must be a list", "invalid_document"
        )

    portfolio = create_portfolio(config)
    for entry in projects:
        if not isinstance(entry, Mapping):
            raise ValidationError(
                "Each project in the portfolio document must be a mapping",
                "invalid_document",
            )
        add_project(portfolio, entry)

    logger.info(
        "Built portfolio for %s with %d project(s)",
        portfolio.config.name,
        len(portfolio.projects),
    )
    return portfolio
