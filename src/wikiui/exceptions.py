"""Exceptions for wikiui.

Element-level failures use the Selenium exceptions directly
(`~selenium.common.exceptions.StaleElementReferenceException` and
`~selenium.common.exceptions.ElementNotInteractableException`). The classes
here cover timeouts of explicit waits and domain-level failures raised by
screen objects.
"""

from __future__ import annotations

from datetime import timedelta

from selenium.common.exceptions import TimeoutException

__all__ = [
    "ConditionTimeoutError",
    "ItemIndexError",
    "ItemNotFoundError",
    "NoResultsError",
    "NotConfiguredError",
    "ScreenError",
]


class ConditionTimeoutError(TimeoutException):
    """A wait condition was not satisfied within its time budget.

    This is a subclass of Selenium's `TimeoutException` so that code written
    against plain `~selenium.webdriver.support.wait.WebDriverWait` continues
    to catch it.

    Parameters
    ----------
    condition
        Human-readable description of the condition that was awaited.
    timeout
        The time budget that elapsed.
    message
        Additional context supplied by the caller, if any.
    """

    def __init__(
        self, condition: str, timeout: timedelta, message: str = ""
    ) -> None:
        seconds = timeout.total_seconds()
        msg = f"Timed out after {seconds:g}s waiting for {condition}"
        if message:
            msg += f": {message}"
        super().__init__(msg)
        self.condition = condition
        self.timeout = timeout


class NotConfiguredError(Exception):
    """A configuration section required for this platform is missing."""


class ScreenError(Exception):
    """Base class for domain-level failures raised by screen objects."""


class NoResultsError(ScreenError):
    """An operation needed a result but the result collection is empty."""


class ItemIndexError(ScreenError, IndexError):
    """A requested index is outside a collection shown on screen.

    Parameters
    ----------
    what
        Name of the collection, used in the error message.
    index
        The requested index.
    size
        Number of items actually present.
    """

    def __init__(self, what: str, index: int, size: int) -> None:
        msg = f"{what} index {index} out of range ({size} present)"
        super().__init__(msg)
        self.index = index
        self.size = size


class ItemNotFoundError(ScreenError):
    """No item in a collection matched the requested text."""
