"""Locators identifying elements on a screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from appium.webdriver.common.appiumby import AppiumBy
from selenium.webdriver.common.by import By

__all__ = [
    "Locator",
    "LocatorStrategy",
]


class LocatorStrategy(Enum):
    """How a locator finds elements.

    The values are the strategy names understood by the WebDriver protocol,
    so they can be passed directly as the ``by`` argument of
    ``find_element``.
    """

    id = By.ID
    """Element ID on the web, resource ID on Android."""

    accessibility_id = AppiumBy.ACCESSIBILITY_ID
    """Accessibility identifier (Android content description)."""

    css = By.CSS_SELECTOR
    """CSS selector."""

    form_name = By.NAME
    """The ``name`` attribute of a form field."""

    platform_query = AppiumBy.ANDROID_UIAUTOMATOR
    """Android UiAutomator query expression."""

    class_name = By.CLASS_NAME
    """Class name (CSS class on the web, widget class on Android)."""

    xpath = By.XPATH
    """XPath expression."""


@dataclass(frozen=True)
class Locator:
    """Descriptor identifying zero or more elements.

    Locators are immutable and compare equal if and only if both the strategy
    and the value match. They carry no reference to a session, so the same
    locator may be resolved repeatedly, and may find a different element each
    time if the screen was re-rendered.
    """

    strategy: LocatorStrategy
    """Strategy used to find the element."""

    value: str
    """Strategy-specific query."""

    def __str__(self) -> str:
        return f"{self.strategy.name}={self.value!r}"

    def by_tuple(self) -> tuple[str, str]:
        """Return the locator in the form accepted by ``find_element``."""
        return (self.strategy.value, self.value)

    @classmethod
    def id(cls, value: str) -> Locator:
        return cls(LocatorStrategy.id, value)

    @classmethod
    def accessibility_id(cls, value: str) -> Locator:
        return cls(LocatorStrategy.accessibility_id, value)

    @classmethod
    def css(cls, value: str) -> Locator:
        return cls(LocatorStrategy.css, value)

    @classmethod
    def form_name(cls, value: str) -> Locator:
        return cls(LocatorStrategy.form_name, value)

    @classmethod
    def platform_query(cls, value: str) -> Locator:
        return cls(LocatorStrategy.platform_query, value)

    @classmethod
    def class_name(cls, value: str) -> Locator:
        return cls(LocatorStrategy.class_name, value)

    @classmethod
    def xpath(cls, value: str) -> Locator:
        return cls(LocatorStrategy.xpath, value)
