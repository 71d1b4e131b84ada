"""
Portfolio HTML renderer.

Turns a Portfolio into one self-contained HTML document with an embedded
stylesheet. Every user-supplied value is escaped before interpolation.
"""

from __future__ import annotations

from typing import Dict, Optional

from .errors import ValidationError
from .models import Portfolio, PortfolioConfig, Project
from .validation import escape_html

DARK_THEME_RULE = "body { background: #121212; color: #ffffff; }"
LIGHT_THEME_RULE = "body { background: #ffffff; color: #000000; }"

BASE_STYLES = (
    "body { font-family: system-ui, sans-serif; padding: 2rem; max-width: 1000px; margin: auto; }",
    "h1, h2 { color: #1a73e8; }",
    ".project-card { border: 1px solid #ccc; padding: 1rem; margin: 1rem 0; border-radius: 8px; }",
    ".tech-tag { background: #eee; padding: 0.3rem 0.6rem; margin: 0.3rem; border-radius: 4px; }",
    ".social-link { margin: 0 0.5rem; color: inherit; text-decoration: none; }",
)

EMPTY_PORTFOLIO_MESSAGE = "Cannot generate HTML for empty portfolio"


def generate_html(portfolio: Portfolio) -> str:
    """
    Render ``portfolio`` as a complete HTML document.

    Raises:
        ValidationError: when the portfolio has no config or no projects.
    """
    if portfolio.config is None or not portfolio.projects:
        raise ValidationError(EMPTY_PORTFOLIO_MESSAGE, "empty_portfolio")

    config = portfolio.config
    project_cards = "".join(_project_card(project) for project in portfolio.projects)

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape_html(config.name)} - {escape_html(config.title)}</title>
  <style>
    {_stylesheet(config)}
  </style>
</head>
<body>
  <header>
    <h1>{escape_html(config.name)}</h1>
    <h2>{escape_html(config.title)}</h2>
    <p>{escape_html(config.bio)}</p>
    <p>Email: <a href="mailto:{escape_html(config.email)}">{escape_html(config.email)}</a></p>
    <div>{_social_links(config.social_links)}</div>
  </header>
  <main>
    <h2>Projects</h2>
    {project_cards}
  </main>
</body>
</html>'''


def _stylesheet(config: PortfolioConfig) -> str:
    theme_rule = DARK_THEME_RULE if config.theme == "dark" else LIGHT_THEME_RULE
    return "\n    ".join((theme_rule,) + BASE_STYLES)


def _social_links(links: Optional[Dict[str, Optional[str]]]) -> str:
    if not links:
        return ""
    return "".join(
        f'<a href="{escape_html(url)}" class="social-link">{escape_html(platform)}</a>'
        for platform, url in links.items()
        if url
    )


def _project_card(project: Project) -> str:
    tech_tags = "".join(
        f'<span class="tech-tag">{escape_html(tech)}</span>' for tech in project.technologies
    )
    image = (
        f'<img src="{escape_html(project.image_url)}" alt="{escape_html(project.title)}">'
        if project.image_url
        else ""
    )
    return f'''
      <div class="project-card">
        <h3>{escape_html(project.title)}</h3>
        <p>{escape_html(project.description)}</p>
        <div class="tech-list">{tech_tags}</div>
        <a href="{escape_html(project.url)}" target="_blank">View Project</a>
        {image}
      </div>
    '''
