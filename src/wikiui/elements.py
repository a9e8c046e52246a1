"""Element operations shared by every screen.

Two capability objects are composed into each screen. `ElementActions` is the
act API: it waits for the element to be ready and then operates on it, and
every failure propagates to the caller. `ElementProbes` is the probe API: it
inspects the current state without blocking (or with a bounded wait) and
reports lookup failures as `False` or an empty result instead of raising.
"""

from __future__ import annotations

from datetime import timedelta

import structlog
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from structlog.stdlib import BoundLogger

from .constants import LOGGER_NAME
from .locator import Locator
from .wait import (
    Target,
    Waiter,
    all_elements_visible,
    describe_target,
    element_clickable,
    element_invisible,
    element_stale,
    element_visible,
    elements_present,
    title_contains,
    url_contains,
)

__all__ = [
    "ElementActions",
    "ElementProbes",
]


class ElementActions:
    """Wait-then-act operations on elements.

    Parameters
    ----------
    driver
        Driver used to resolve locators.
    waiter
        Waiter providing the explicit-wait budget.
    logger
        Logger to use. Defaults to the package logger.
    """

    def __init__(
        self,
        driver: WebDriver,
        waiter: Waiter,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self.waiter = waiter
        self._driver = driver
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def wait_visible(self, target: Target) -> WebElement:
        """Wait for the target to be displayed and return the element."""
        return self.waiter.until(element_visible(target))

    def wait_clickable(self, target: Target) -> WebElement:
        """Wait for the target to be displayed and enabled."""
        return self.waiter.until(element_clickable(target))

    def wait_all_visible(self, locator: Locator) -> list[WebElement]:
        """Wait for at least one match, with every match displayed."""
        return self.waiter.until(all_elements_visible(locator))

    def wait_present(self, locator: Locator) -> list[WebElement]:
        """Wait for at least one match to be attached to the document."""
        return self.waiter.until(elements_present(locator))

    def wait_invisible(self, target: Target) -> None:
        """Wait for the target to be absent or hidden."""
        self.waiter.until(element_invisible(target))

    def wait_stale(self, element: WebElement) -> None:
        """Wait for the element to be detached from the document."""
        self.waiter.until(element_stale(element))

    def wait_url_contains(self, text: str) -> None:
        self.waiter.until(url_contains(text))

    def wait_title_contains(self, text: str) -> None:
        self.waiter.until(title_contains(text))

    def click(self, target: Target) -> None:
        """Wait for the target to become clickable and click it.

        Parameters
        ----------
        target
            Locator or element to click.

        Raises
        ------
        ConditionTimeoutError
            Raised if the target never became clickable.
        selenium.common.exceptions.ElementNotInteractableException
            Raised if the target was clickable when checked but the click
            itself was refused, usually because another element now covers
            it.
        selenium.common.exceptions.StaleElementReferenceException
            Raised if the element was detached between the check and the
            click.
        """
        element = self.wait_clickable(target)
        try:
            element.click()
        except ElementClickInterceptedException as e:
            description = describe_target(target)
            msg = f"Click on {description} was intercepted"
            self._logger.warning(msg, target=description)
            raise ElementNotInteractableException(msg) from e
        self._logger.debug("Clicked", target=describe_target(target))

    def type_text(self, target: Target, text: str) -> None:
        """Wait for the target to be visible, clear it, and type the text.

        A `~selenium.common.exceptions.StaleElementReferenceException` raised
        because the field was re-rendered after the visibility check is
        propagated rather than retried.
        """
        element = self.wait_visible(target)
        element.clear()
        element.send_keys(text)
        self._logger.debug("Typed text", target=describe_target(target))

    def read_text(self, target: Target) -> str:
        """Wait for the target to be visible and return its text.

        An empty string is a valid result and is returned as-is.
        """
        return self.wait_visible(target).text

    def read_attribute(self, target: Target, name: str) -> str | None:
        """Wait for the target to be visible and return an attribute."""
        return self.wait_visible(target).get_attribute(name)

    def find_all(self, locator: Locator) -> list[WebElement]:
        """Return the current matches, possibly none, without waiting."""
        with self.waiter.immediate():
            return self._driver.find_elements(*locator.by_tuple())


class ElementProbes:
    """Non-raising inspection of the current screen state.

    Every probe catches Selenium's
    `~selenium.common.exceptions.WebDriverException` (which includes lookup
    failures, staleness and timeouts) and reports it as "not there". Other
    exceptions propagate.
    Lookups run with the driver's implicit wait suspended, so a probe for an
    absent element returns at once.

    Parameters
    ----------
    driver
        Driver used to resolve locators.
    waiter
        Waiter used as the basis for `appears_within`.
    logger
        Logger to use. Defaults to the package logger.
    """

    def __init__(
        self,
        driver: WebDriver,
        waiter: Waiter,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._driver = driver
        self._waiter = waiter
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def is_displayed(self, target: Target) -> bool:
        """Return whether the target is displayed right now."""
        try:
            if isinstance(target, Locator):
                with self._waiter.immediate():
                    element = self._driver.find_element(*target.by_tuple())
            else:
                element = target
            return element.is_displayed()
        except WebDriverException as e:
            self._log_failure("is_displayed", target, e)
            return False

    def count(self, locator: Locator) -> int:
        """Return the number of current matches."""
        return len(self._find_all(locator))

    def texts(self, locator: Locator) -> list[str]:
        """Return the text of every current match, in document order."""
        try:
            return [e.text for e in self._find_all(locator)]
        except WebDriverException as e:
            self._log_failure("texts", locator, e)
            return []

    def first_text(self, locator: Locator) -> str:
        """Return the text of the first match, or the empty string."""
        try:
            elements = self._find_all(locator)
            return elements[0].text if elements else ""
        except WebDriverException as e:
            self._log_failure("first_text", locator, e)
            return ""

    def appears_within(self, target: Target, timeout: timedelta) -> bool:
        """Wait up to ``timeout`` for the target to be visible.

        Returns
        -------
        bool
            `True` if the target became visible in time, `False` otherwise.
        """
        try:
            self._waiter.with_timeout(timeout).until(element_visible(target))
        except WebDriverException as e:
            self._log_failure("appears_within", target, e)
            return False
        return True

    def _find_all(self, locator: Locator) -> list[WebElement]:
        try:
            with self._waiter.immediate():
                return self._driver.find_elements(*locator.by_tuple())
        except WebDriverException as e:
            self._log_failure("find_all", locator, e)
            return []

    def _log_failure(
        self, probe: str, target: Target, exc: WebDriverException
    ) -> None:
        self._logger.debug(
            "Probe failed",
            probe=probe,
            target=describe_target(target),
            error=type(exc).__name__,
        )
