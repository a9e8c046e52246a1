"""UI automation for the Wikipedia web site and Android application."""

from .elements import ElementActions, ElementProbes
from .exceptions import (
    ConditionTimeoutError,
    ItemIndexError,
    ItemNotFoundError,
    NoResultsError,
    NotConfiguredError,
    ScreenError,
)
from .locator import Locator, LocatorStrategy
from .session import Platform, Session
from .wait import Condition, Waiter

__all__ = [
    "Condition",
    "ConditionTimeoutError",
    "ElementActions",
    "ElementProbes",
    "ItemIndexError",
    "ItemNotFoundError",
    "Locator",
    "LocatorStrategy",
    "NoResultsError",
    "NotConfiguredError",
    "Platform",
    "ScreenError",
    "Session",
    "Waiter",
]
