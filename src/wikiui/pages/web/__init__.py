"""Page models for the Wikipedia web site."""

from .article import ArticlePage
from .base import WebPage
from .main import MainPage
from .portal import PortalPage
from .search import SearchResultsPage

__all__ = [
    "ArticlePage",
    "MainPage",
    "PortalPage",
    "SearchResultsPage",
    "WebPage",
]
