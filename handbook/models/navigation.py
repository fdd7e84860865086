from typing import Tuple

from pydantic import BaseModel, ConfigDict

from handbook.models.page import ContentPage


class Category(BaseModel):
    """A sidebar group: every page sharing one ``Parent`` value."""

    model_config = ConfigDict(frozen=True)

    name: str
    rank: int
    pages: Tuple[ContentPage, ...] = ()


class NavigationTree(BaseModel):
    """All sidebar categories, lowest rank first."""

    model_config = ConfigDict(frozen=True)

    categories: Tuple[Category, ...] = ()
