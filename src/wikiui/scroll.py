"""Platform-specific scrolling.

Web pages scroll through JavaScript run in the page. Android screens scroll
through UiAutomator's ``UiScrollable``, which scrolls the first scrollable
container until the requested element is on screen and then returns it.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .constants import ANDROID_SCROLLABLE
from .locator import Locator, LocatorStrategy
from .wait import Target

__all__ = [
    "AndroidScroller",
    "Scroller",
    "WebScroller",
    "uiselector_string",
    "xpath_literal",
]


def uiselector_string(value: str) -> str:
    """Quote a value as a Java string literal for a UiSelector expression."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def xpath_literal(value: str) -> str:
    """Quote a value as an XPath 1.0 string literal.

    XPath has no escape syntax, so a value containing both kinds of quote is
    built with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


class Scroller(metaclass=ABCMeta):
    """Scrolls the current screen of one platform."""

    def __init__(self, driver: WebDriver) -> None:
        self._driver = driver

    @abstractmethod
    def scroll_into_view(self, target: Target | str) -> WebElement:
        """Scroll until the target is on screen and return it.

        Parameters
        ----------
        target
            Locator or element to bring into view, or a string, in which case
            the first element whose text contains that string is used.

        Returns
        -------
        WebElement
            The element scrolled into view.

        Raises
        ------
        selenium.common.exceptions.NoSuchElementException
            Raised if no matching element exists.
        """

    @abstractmethod
    def scroll_down(self) -> None:
        """Scroll the main content forward by roughly one screen."""


class WebScroller(Scroller):
    """Scrolls a browser page with JavaScript."""

    def __init__(self, driver: WebDriver, *, step: int = 500) -> None:
        super().__init__(driver)
        self._step = step

    def scroll_into_view(self, target: Target | str) -> WebElement:
        if isinstance(target, str):
            literal = xpath_literal(target)
            locator = Locator.xpath(
                f"//*[text()[contains(normalize-space(.), {literal})]]"
            )
            element = self._driver.find_element(*locator.by_tuple())
        elif isinstance(target, Locator):
            element = self._driver.find_element(*target.by_tuple())
        else:
            element = target
        self._driver.execute_script(
            "arguments[0].scrollIntoView(true);", element
        )
        return element

    def scroll_down(self, pixels: int | None = None) -> None:
        amount = self._step if pixels is None else pixels
        self._driver.execute_script(f"window.scrollBy(0, {int(amount)});")

    def scroll_to_bottom(self) -> None:
        self._driver.execute_script(
            "window.scrollTo(0, document.body.scrollHeight);"
        )


class AndroidScroller(Scroller):
    """Scrolls an Android screen with ``UiScrollable`` queries."""

    def scroll_into_view(self, target: Target | str) -> WebElement:
        if isinstance(target, WebElement):
            return target
        if isinstance(target, str):
            selector = f"textContains({uiselector_string(target)})"
        elif target.strategy == LocatorStrategy.id:
            selector = f"resourceId({uiselector_string(target.value)})"
        elif target.strategy == LocatorStrategy.accessibility_id:
            selector = f"description({uiselector_string(target.value)})"
        elif target.strategy == LocatorStrategy.class_name:
            selector = f"className({uiselector_string(target.value)})"
        else:
            msg = f"Cannot scroll to {target} with UiScrollable"
            raise ValueError(msg)
        query = Locator.platform_query(
            f"{ANDROID_SCROLLABLE}.scrollIntoView(new UiSelector().{selector})"
        )
        return self._driver.find_element(*query.by_tuple())

    def scroll_down(self) -> None:
        query = Locator.platform_query(f"{ANDROID_SCROLLABLE}.scrollForward()")
        self._driver.find_element(*query.by_tuple())
