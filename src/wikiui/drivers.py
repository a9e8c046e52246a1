"""Creation of Selenium and Appium drivers from configuration.

Drivers are owned by the test lifecycle. The functions here create them and
wrap them in a `~wikiui.session.Session`. Quitting is left to the caller.
"""

from __future__ import annotations

import structlog
from appium import webdriver as appium_webdriver
from appium.options.android import UiAutomator2Options
from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

from .config import Browser, Config, MobileConfig, WebConfig
from .constants import LOGGER_NAME, WINDOW_SIZE
from .session import Platform, Session

__all__ = [
    "android_session",
    "create_android_driver",
    "create_web_driver",
    "web_session",
]


def _chrome(headless: bool) -> WebDriver:
    options = webdriver.ChromeOptions()
    if headless:
        options.add_argument("--headless=new")
    width, height = WINDOW_SIZE
    options.add_argument(f"--window-size={width},{height}")

    # Chrome refuses to start as root in containers without this.
    options.add_argument("--no-sandbox")

    # Isolate the browser from any local user profile or extensions.
    options.add_argument("--disable-extensions")
    options.add_argument("--incognito")
    return webdriver.Chrome(options=options)


def _firefox(headless: bool) -> WebDriver:
    options = webdriver.FirefoxOptions()
    if headless:
        options.add_argument("-headless")
    options.add_argument("-private")
    return webdriver.Firefox(options=options)


def _edge(headless: bool) -> WebDriver:
    options = webdriver.EdgeOptions()
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--inprivate")
    return webdriver.Edge(options=options)


_FACTORIES = {
    Browser.chrome: _chrome,
    Browser.firefox: _firefox,
    Browser.edge: _edge,
}


def create_web_driver(
    config: WebConfig, browser: str | None = None
) -> WebDriver:
    """Create a browser driver.

    The window is 1920x1080, which emulates a reasonably modern desktop or
    laptop, and the configured implicit wait and page-load timeout are
    applied.

    Parameters
    ----------
    config
        Web configuration.
    browser
        Browser name overriding the configured one, such as the value of
        the ``--browser`` command-line option.

    Returns
    -------
    selenium.webdriver.remote.webdriver.WebDriver
        The new driver.

    Raises
    ------
    ValueError
        Raised if the browser name is not supported.
    """
    if browser:
        try:
            choice = Browser(browser.lower())
        except ValueError:
            msg = f"Unsupported browser: {browser}"
            raise ValueError(msg) from None
    else:
        choice = config.browser
    logger = structlog.get_logger(LOGGER_NAME)
    logger.info(
        "Starting browser", browser=choice.value, headless=config.headless
    )
    driver = _FACTORIES[choice](config.headless)
    driver.set_window_size(*WINDOW_SIZE)
    driver.implicitly_wait(config.implicit_wait.total_seconds())
    driver.set_page_load_timeout(config.page_load_timeout.total_seconds())
    return driver


def create_android_driver(
    config: MobileConfig,
    device_name: str | None = None,
    platform_version: str | None = None,
) -> WebDriver:
    """Create an Appium driver for the Wikipedia Android application.

    Parameters
    ----------
    config
        Mobile configuration.
    device_name
        Device name overriding the configured one.
    platform_version
        Android version overriding the configured one.

    Returns
    -------
    appium.webdriver.webdriver.WebDriver
        The new driver.
    """
    options = UiAutomator2Options()
    options.platform_name = config.platform_name
    options.platform_version = platform_version or config.platform_version
    options.device_name = device_name or config.device_name
    options.automation_name = config.automation_name
    options.app_package = config.app_package
    options.app_activity = config.app_activity
    if config.apk_path:
        options.app = str(config.apk_path.resolve())
    options.no_reset = False
    options.full_reset = False
    options.auto_grant_permissions = True

    server_url = str(config.appium_server_url).rstrip("/")
    logger = structlog.get_logger(LOGGER_NAME)
    logger.info(
        "Starting Appium session",
        server=server_url,
        device=options.device_name,
        platform_version=options.platform_version,
    )
    driver = appium_webdriver.Remote(
        command_executor=server_url, options=options
    )
    driver.implicitly_wait(config.implicit_wait.total_seconds())
    return driver


def web_session(config: Config, browser: str | None = None) -> Session:
    """Start a browser and wrap it in a session."""
    driver = create_web_driver(config.web, browser)
    return Session(
        driver,
        platform=Platform.web,
        explicit_wait=config.web.explicit_wait,
        poll_interval=config.web.poll_interval,
        implicit_wait=config.web.implicit_wait,
        logger=structlog.get_logger(LOGGER_NAME),
    )


def android_session(
    config: Config,
    device_name: str | None = None,
    platform_version: str | None = None,
) -> Session:
    """Start an Appium session and wrap it in a session.

    Raises
    ------
    NotConfiguredError
        Raised if the configuration has no ``mobile`` section.
    """
    mobile = config.require_mobile()
    driver = create_android_driver(mobile, device_name, platform_version)
    return Session(
        driver,
        platform=Platform.android,
        explicit_wait=mobile.explicit_wait,
        poll_interval=mobile.poll_interval,
        implicit_wait=mobile.implicit_wait,
        logger=structlog.get_logger(LOGGER_NAME),
        app_package=mobile.app_package,
    )
