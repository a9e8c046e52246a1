"""Shared behavior of web page models."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Self

from ...locator import Locator
from ..base import BaseScreen

__all__ = ["WebPage"]

_DOCUMENT = Locator.css("html")


class WebPage(BaseScreen):
    """Base class for a page in a browser session."""

    def wait_until_loaded(self) -> Self:
        """Wait for the condition that defines this page and return it.

        Subclasses override this with their defining condition.
        """
        return self

    @property
    def url(self) -> str:
        return self.session.current_url

    @property
    def title(self) -> str:
        return self.session.title

    @contextmanager
    def _leaving_page(self) -> Iterator[None]:
        """Wait, after the body has run, for the current document to unload.

        Wrap the action that navigates away, such as a link click or a form
        submission, so that the destination page's defining condition is not
        evaluated against this page.
        """
        document = self.session.find_one(_DOCUMENT)
        yield
        self.act.wait_stale(document)
