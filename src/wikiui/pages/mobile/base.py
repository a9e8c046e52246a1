"""Shared behavior of Android screen models."""

from __future__ import annotations

from ...constants import DEFAULT_APP_PACKAGE
from ...locator import Locator
from ..base import BaseScreen

__all__ = ["MobileScreen"]


class MobileScreen(BaseScreen):
    """Base class for a screen of the Wikipedia Android application."""

    def press_back(self) -> None:
        self.session.go_back()

    def _resource(self, name: str) -> Locator:
        """Build a locator for a view by its unqualified resource ID."""
        package = self.session.app_package or DEFAULT_APP_PACKAGE
        return Locator.id(f"{package}:id/{name}")
