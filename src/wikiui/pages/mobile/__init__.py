"""Screen models for the Wikipedia Android application."""

from .article import ArticleScreen
from .base import MobileScreen
from .main import MainScreen
from .search import SearchScreen

__all__ = [
    "ArticleScreen",
    "MainScreen",
    "MobileScreen",
    "SearchScreen",
]
