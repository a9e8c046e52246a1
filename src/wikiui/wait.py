"""Explicit waits against an asynchronously-rendering UI.

`Waiter` is a thin wrapper around Selenium's
`~selenium.webdriver.support.wait.WebDriverWait` that polls a condition at a
constant interval until it returns a truthy value or the time budget runs out.
The condition constructors in this module wrap Selenium's
`~selenium.webdriver.support.expected_conditions` (plus a few that Selenium
does not provide) and attach a description used in log messages and timeout
errors.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Generic, TypeVar

import structlog
from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as ec
from selenium.webdriver.support.wait import WebDriverWait
from structlog.stdlib import BoundLogger

from .constants import DEFAULT_POLL_INTERVAL, LOGGER_NAME
from .exceptions import ConditionTimeoutError
from .locator import Locator

T = TypeVar("T")

Target = Locator | WebElement
"""Either a locator, re-resolved on every poll, or an element already found."""

IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)
"""Exceptions treated as "not ready yet" rather than as failures."""

__all__ = [
    "IGNORED_EXCEPTIONS",
    "Condition",
    "Target",
    "Waiter",
    "all_elements_visible",
    "any_of",
    "describe_target",
    "element_clickable",
    "element_count_stable",
    "element_invisible",
    "element_stale",
    "element_visible",
    "elements_present",
    "number_of_elements_at_least",
    "number_of_elements_to_be",
    "text_present_in_element",
    "title_contains",
    "url_contains",
]


class Condition(Generic[T]):
    """A described predicate evaluated against the live driver.

    Parameters
    ----------
    description
        What the condition waits for, phrased to follow "waiting for".
    predicate
        Callable taking the driver and returning a falsy value if the
        condition does not hold yet, or the result of the wait if it does.
    """

    def __init__(
        self, description: str, predicate: Callable[[WebDriver], T]
    ) -> None:
        self.description = description
        self._predicate = predicate

    def __call__(self, driver: WebDriver) -> T:
        return self._predicate(driver)

    def __repr__(self) -> str:
        return f"Condition({self.description!r})"

    def __str__(self) -> str:
        return self.description


class Waiter:
    """Blocks until a condition holds, bounded by a timeout.

    The condition is evaluated immediately and then once per poll interval.
    Lookup failures (`~selenium.common.exceptions.NoSuchElementException` and
    `~selenium.common.exceptions.StaleElementReferenceException`) count as
    "not ready" and are retried. There is no backoff: the interval is
    constant. A wait never gives up before the timeout and never runs more
    than one poll interval past it.

    Parameters
    ----------
    driver
        Driver against which conditions are evaluated.
    timeout
        Time budget for each wait.
    poll_interval
        Delay between evaluations of the condition.
    implicit_wait
        Implicit wait configured on the driver. It is suspended while a
        condition is polled and restored afterwards.
    logger
        Logger to use. Defaults to the package logger.
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: timedelta,
        poll_interval: timedelta = DEFAULT_POLL_INTERVAL,
        *,
        implicit_wait: timedelta = timedelta(0),
        logger: BoundLogger | None = None,
    ) -> None:
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.implicit_wait = implicit_wait
        self._driver = driver
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def with_timeout(self, timeout: timedelta) -> Waiter:
        """Return a waiter sharing this one's driver with another budget."""
        return Waiter(
            self._driver,
            timeout,
            self.poll_interval,
            implicit_wait=self.implicit_wait,
            logger=self._logger,
        )

    @contextmanager
    def immediate(self) -> Iterator[None]:
        """Suspend the driver's implicit wait for the enclosed lookups.

        With an implicit wait in effect, a lookup for an absent element
        blocks for the whole implicit wait before failing. Probes and
        condition polls must see the current state at once.
        """
        if not self.implicit_wait:
            yield
            return
        self._driver.implicitly_wait(0)
        try:
            yield
        finally:
            self._driver.implicitly_wait(self.implicit_wait.total_seconds())

    def until(
        self, condition: Callable[[WebDriver], T], message: str = ""
    ) -> T:
        """Wait until the condition returns a truthy value.

        Parameters
        ----------
        condition
            Condition to evaluate, usually built by one of the constructors
            in this module.
        message
            Additional context to include in the timeout error.

        Returns
        -------
        Any
            The first truthy value returned by the condition.

        Raises
        ------
        ConditionTimeoutError
            Raised if the condition did not hold within the timeout.
        """
        return self._wait(condition, message, negate=False)

    def until_not(
        self, condition: Callable[[WebDriver], Any], message: str = ""
    ) -> Any:
        """Wait until the condition returns a falsy value.

        Parameters
        ----------
        condition
            Condition to evaluate.
        message
            Additional context to include in the timeout error.

        Returns
        -------
        Any
            The falsy value returned by the condition, or `True` if the
            condition raised one of the ignored lookup exceptions.

        Raises
        ------
        ConditionTimeoutError
            Raised if the condition still held at the end of the timeout.
        """
        return self._wait(condition, message, negate=True)

    def _wait(
        self,
        condition: Callable[[WebDriver], Any],
        message: str,
        *,
        negate: bool,
    ) -> Any:
        description = str(condition)
        if negate:
            description = f"not ({description})"
        wait = WebDriverWait(
            self._driver,
            timeout=self.timeout.total_seconds(),
            poll_frequency=self.poll_interval.total_seconds(),
            ignored_exceptions=IGNORED_EXCEPTIONS,
        )
        start = time.monotonic()
        try:
            with self.immediate():
                if negate:
                    result = wait.until_not(condition, message)
                else:
                    result = wait.until(condition, message)
        except TimeoutException as e:
            self._logger.warning(
                "Timed out waiting for condition",
                condition=description,
                timeout=self.timeout.total_seconds(),
            )
            raise ConditionTimeoutError(
                description, self.timeout, message
            ) from e
        self._logger.debug(
            "Condition satisfied",
            condition=description,
            elapsed=round(time.monotonic() - start, 3),
        )
        return result


def describe_target(target: Target) -> str:
    """Return a short description of a target for log and error messages."""
    if isinstance(target, Locator):
        return str(target)
    return "element"


def element_visible(target: Target) -> Condition[WebElement]:
    """The element exists and is displayed."""
    if isinstance(target, Locator):
        predicate = ec.visibility_of_element_located(target.by_tuple())
    else:
        predicate = ec.visibility_of(target)
    return Condition(f"{describe_target(target)} to be visible", predicate)


def element_clickable(target: Target) -> Condition[WebElement]:
    """The element exists, is displayed, and is enabled.

    Each of the three checks is repeated on every poll, so an element that
    becomes visible and is then disabled again does not satisfy the
    condition.
    """
    mark = target.by_tuple() if isinstance(target, Locator) else target
    predicate = ec.element_to_be_clickable(mark)
    return Condition(f"{describe_target(target)} to be clickable", predicate)


def element_invisible(target: Target) -> Condition[WebElement | bool]:
    """The element is either absent or not displayed."""
    mark = target.by_tuple() if isinstance(target, Locator) else target
    predicate = ec.invisibility_of_element_located(mark)
    return Condition(f"{describe_target(target)} to be invisible", predicate)


def elements_present(locator: Locator) -> Condition[list[WebElement]]:
    """At least one element matching the locator is attached."""
    predicate = ec.presence_of_all_elements_located(locator.by_tuple())
    return Condition(f"{locator} to be present", predicate)


def all_elements_visible(locator: Locator) -> Condition[list[WebElement]]:
    """At least one element matches and every match is displayed."""
    predicate = ec.visibility_of_all_elements_located(locator.by_tuple())
    return Condition(f"all of {locator} to be visible", predicate)


def text_present_in_element(locator: Locator, text: str) -> Condition[bool]:
    """The text of the located element contains the given text."""
    predicate = ec.text_to_be_present_in_element(locator.by_tuple(), text)
    return Condition(f"{locator} to contain text {text!r}", predicate)


def url_contains(text: str) -> Condition[bool]:
    """The current URL contains the given substring."""
    return Condition(f"URL to contain {text!r}", ec.url_contains(text))


def title_contains(text: str) -> Condition[bool]:
    """The current page title contains the given substring."""
    return Condition(f"title to contain {text!r}", ec.title_contains(text))


def number_of_elements_to_be(
    locator: Locator, count: int
) -> Condition[list[WebElement] | bool]:
    """Exactly ``count`` elements match the locator.

    The result is the list of matching elements, or `True` when waiting for
    zero elements (an empty list would read as "not yet").
    """

    def predicate(driver: WebDriver) -> list[WebElement] | bool:
        elements = driver.find_elements(*locator.by_tuple())
        if len(elements) != count:
            return False
        return elements or True

    return Condition(f"exactly {count} of {locator}", predicate)


def number_of_elements_at_least(
    locator: Locator, minimum: int
) -> Condition[list[WebElement] | bool]:
    """At least ``minimum`` elements match the locator.

    As with `number_of_elements_to_be`, a minimum of zero is satisfied
    immediately and returns `True` if nothing matches.
    """

    def predicate(driver: WebDriver) -> list[WebElement] | bool:
        elements = driver.find_elements(*locator.by_tuple())
        if len(elements) < minimum:
            return False
        return elements or True

    return Condition(f"at least {minimum} of {locator}", predicate)


def element_count_stable(
    locator: Locator, *, minimum: int = 0
) -> Condition[bool]:
    """The number of matching elements is unchanged between two polls.

    This is the readiness signal for collections that are filled in
    incrementally, such as search results arriving from an API call. The
    condition is stateful: build a new one for every wait.

    Parameters
    ----------
    locator
        Locator of the collection members.
    minimum
        Minimum count that must be reached before the count is considered
        stable.
    """
    counts: list[int] = []

    def predicate(driver: WebDriver) -> bool:
        count = len(driver.find_elements(*locator.by_tuple()))
        stable = bool(counts) and counts[-1] == count and count >= minimum
        counts.append(count)
        return stable

    return Condition(f"count of {locator} to settle", predicate)


def any_of(*conditions: Condition[Any]) -> Condition[Any]:
    """At least one of the conditions holds.

    The result is that of the first condition that holds, in argument order.
    """
    description = " or ".join(c.description for c in conditions)
    return Condition(description, ec.any_of(*conditions))


def element_stale(element: WebElement) -> Condition[bool]:
    """The element has been detached from the document.

    After a click that navigates, or a new search query, this is the signal
    that the old content has been replaced, so that a condition on the new
    content cannot be satisfied by an element of the old.
    """
    return Condition("element to be detached", ec.staleness_of(element))
