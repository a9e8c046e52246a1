"""Non-owning wrapper around a live driver."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from structlog.stdlib import BoundLogger

from .constants import DEFAULT_POLL_INTERVAL
from .locator import Locator
from .wait import Waiter

__all__ = [
    "Platform",
    "Session",
]


class Platform(Enum):
    """Platform a session drives."""

    web = "web"
    android = "android"


class Session:
    """A browser or Android session shared by the screens of one test class.

    The session is created and quit by the test lifecycle. Screens hold a
    reference to it and never call `quit`.

    Parameters
    ----------
    driver
        Selenium or Appium driver.
    platform
        Platform the driver controls.
    explicit_wait
        Default time budget for waits performed by screens.
    poll_interval
        Interval between evaluations of a wait condition.
    implicit_wait
        Implicit wait configured on the driver, suspended by probes and
        condition polls.
    logger
        Logger to use, which will be bound with the platform.
    app_package
        Android application package, used by the app lifecycle methods.
    """

    def __init__(
        self,
        driver: WebDriver,
        *,
        platform: Platform,
        explicit_wait: timedelta,
        poll_interval: timedelta = DEFAULT_POLL_INTERVAL,
        implicit_wait: timedelta = timedelta(0),
        logger: BoundLogger,
        app_package: str | None = None,
    ) -> None:
        self.driver = driver
        self.platform = platform
        self.explicit_wait = explicit_wait
        self.poll_interval = poll_interval
        self.implicit_wait = implicit_wait
        self.logger = logger.bind(platform=platform.value)
        self.app_package = app_package

    def waiter(self, timeout: timedelta | None = None) -> Waiter:
        """Create a waiter against this session.

        Parameters
        ----------
        timeout
            Time budget, defaulting to the session's explicit wait.
        """
        return Waiter(
            self.driver,
            timeout if timeout is not None else self.explicit_wait,
            self.poll_interval,
            implicit_wait=self.implicit_wait,
            logger=self.logger,
        )

    def find_one(self, locator: Locator) -> WebElement:
        """Return the first match, subject only to the implicit wait.

        Raises
        ------
        selenium.common.exceptions.NoSuchElementException
            Raised if nothing matches.
        """
        return self.driver.find_element(*locator.by_tuple())

    def find_all(self, locator: Locator) -> list[WebElement]:
        return self.driver.find_elements(*locator.by_tuple())

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def title(self) -> str:
        return self.driver.title

    def navigate_to(self, url: str) -> None:
        self.logger.info("Navigating", url=url)
        self.driver.get(url)

    def go_back(self) -> None:
        """Go back one step (browser history, or the Android back key)."""
        self.logger.debug("Going back")
        self.driver.back()

    def hide_keyboard(self) -> None:
        """Hide the Android soft keyboard if it is shown."""
        if self.platform != Platform.android:
            return
        if self.driver.is_keyboard_shown():
            self.driver.hide_keyboard()

    def activate_app(self, app_id: str | None = None) -> None:
        """Bring an Android application to the foreground.

        Parameters
        ----------
        app_id
            Package to activate, defaulting to the application under test.
        """
        package = self._app_id(app_id)
        self.logger.info("Activating app", app=package)
        self.driver.activate_app(package)

    def terminate_app(self, app_id: str | None = None) -> bool:
        """Stop an Android application.

        Returns
        -------
        bool
            Whether the application was running and has been stopped.
        """
        package = self._app_id(app_id)
        self.logger.info("Terminating app", app=package)
        return self.driver.terminate_app(package)

    def restart_app(self) -> None:
        """Stop and relaunch the application under test."""
        self.terminate_app()
        self.activate_app()

    def quit(self) -> None:
        """End the session. Only the test lifecycle calls this."""
        self.logger.info("Ending session")
        self.driver.quit()

    def _app_id(self, app_id: str | None) -> str:
        package = app_id or self.app_package
        if not package:
            raise ValueError("No application package known for session")
        return package
