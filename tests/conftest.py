"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wikiui.config import Config
from wikiui.dependencies import ConfigDependency
from wikiui.drivers import android_session, web_session
from wikiui.session import Session

from .support.config import configure
from .support.driver import MockDriver


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("wikiui")
    group.addoption(
        "--run-web",
        action="store_true",
        default=False,
        help="Run the live scenarios against Wikipedia in a browser",
    )
    group.addoption(
        "--run-mobile",
        action="store_true",
        default=False,
        help="Run the live scenarios against the Android application",
    )
    group.addoption(
        "--browser",
        default=None,
        help="Browser for web scenarios, overriding the configuration",
    )
    group.addoption(
        "--device-name",
        default=None,
        help="Android device for mobile scenarios",
    )
    group.addoption(
        "--platform-version",
        default=None,
        help="Android version for mobile scenarios",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip live scenarios unless they were requested."""
    skip_web = pytest.mark.skip(reason="needs --run-web")
    skip_mobile = pytest.mark.skip(reason="needs --run-mobile")
    run_web = config.getoption("--run-web")
    run_mobile = config.getoption("--run-mobile")
    for item in items:
        if item.get_closest_marker("web") and not run_web:
            item.add_marker(skip_web)
        if item.get_closest_marker("mobile") and not run_mobile:
            item.add_marker(skip_mobile)


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear environment overrides that would change the test config."""
    for name in (
        "WIKIUI_APPIUM_SERVER_URL",
        "WIKIUI_BROWSER",
        "WIKIUI_DEVICE_NAME",
        "WIKIUI_HEADLESS",
        "WIKIUI_LOG_LEVEL",
        "WIKIUI_PLATFORM_VERSION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    """Set up and return the default test configuration."""
    return configure("web")


@pytest.fixture
def driver(config: Config) -> MockDriver:
    """Return a mock driver with an empty page loaded."""
    return MockDriver()


@pytest.fixture(scope="class")
def live_config() -> Config:
    """Configuration for live scenarios, from ``WIKIUI_CONFIG_PATH``.

    A fresh dependency is used so that the test configurations loaded by
    the unit tests are not picked up.
    """
    return ConfigDependency().config()


@pytest.fixture(scope="class")
def web(
    request: pytest.FixtureRequest, live_config: Config
) -> Iterator[Session]:
    """Start a browser shared by the scenarios of one test class."""
    browser = request.config.getoption("--browser")
    session = web_session(live_config, browser)
    try:
        yield session
    finally:
        session.quit()


@pytest.fixture(scope="class")
def android(
    request: pytest.FixtureRequest, live_config: Config
) -> Iterator[Session]:
    """Start an Appium session shared by the scenarios of one test class."""
    session = android_session(
        live_config,
        device_name=request.config.getoption("--device-name"),
        platform_version=request.config.getoption("--platform-version"),
    )
    try:
        yield session
    finally:
        session.quit()
