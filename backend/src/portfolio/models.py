from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Theme = Literal["light", "dark"]

DEFAULT_THEME: Theme = "light"


class PortfolioConfig(BaseModel):
    """Owner profile shown in the page header."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    title: str
    bio: str
    email: str
    social_links: Optional[Dict[str, Optional[str]]] = Field(None, alias="socialLinks")
    theme: Optional[Theme] = None


class Project(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    url: str
    technologies: List[str] = Field(default_factory=list)
    image_url: Optional[str] = Field(None, alias="imageUrl")


class Portfolio(BaseModel):
    config: PortfolioConfig
    projects: List[Project] = Field(default_factory=list)
