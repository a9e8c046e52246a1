"""Configuration for wikiui.

The suite is configured by a YAML file, by default :file:`wikiui.yaml` in the
working directory. Settings that vary between machines (the browser, headless
mode, the Appium server and the device) may also be set by environment
variables, which take precedence over the file. Only the settings with an
explicit ``validation_alias`` support configuration via environment variable.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Self, override

import yaml
from pydantic import AliasChoices, Field, HttpUrl, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, configure_logging
from safir.pydantic import HumanTimedelta

from .constants import (
    DEFAULT_EXPLICIT_WAIT,
    DEFAULT_IMPLICIT_WAIT,
    DEFAULT_MOBILE_EXPLICIT_WAIT,
    DEFAULT_PAGE_LOAD_TIMEOUT,
    DEFAULT_POLL_INTERVAL,
    LOGGER_NAME,
)
from .exceptions import NotConfiguredError

__all__ = [
    "Browser",
    "CamelCaseSettings",
    "Config",
    "EnvFirstSettings",
    "MobileConfig",
    "WebConfig",
]


class Browser(Enum):
    """Browsers supported for web sessions."""

    chrome = "chrome"
    firefox = "firefox"
    edge = "edge"


class CamelCaseSettings(BaseSettings):
    """Base class for Pydantic settings supporting camel-case.

    This base class also forbids all extra attributes, so that a misspelled
    key in the configuration file is reported rather than ignored.
    """

    model_config = SettingsConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True
    )


class EnvFirstSettings(CamelCaseSettings):
    """Base class for Pydantic settings with environment overrides.

    Classes that inherit from this base class will prioritize environment
    variables over arguments to the class constructor.
    """

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Allow environment
        variables to override init parameters, since init parameters come
        from the YAML configuration file and a developer running the suite
        locally should be able to pick another browser or device without
        editing it.
        """
        return (env_settings, init_settings)


class WebConfig(EnvFirstSettings):
    """Configuration for browser sessions."""

    browser: Browser = Field(
        Browser.chrome,
        title="Browser",
        description="Browser to drive",
        validation_alias=AliasChoices("WIKIUI_BROWSER", "browser"),
    )

    headless: bool = Field(
        False,
        title="Headless mode",
        description="Whether to run the browser without a visible window",
        validation_alias=AliasChoices("WIKIUI_HEADLESS", "headless"),
    )

    implicit_wait: HumanTimedelta = Field(
        DEFAULT_IMPLICIT_WAIT,
        title="Implicit wait",
        description="Fallback wait applied by the driver to every lookup",
    )

    explicit_wait: HumanTimedelta = Field(
        DEFAULT_EXPLICIT_WAIT,
        title="Explicit wait",
        description="Time budget for waits performed by page objects",
    )

    page_load_timeout: HumanTimedelta = Field(
        DEFAULT_PAGE_LOAD_TIMEOUT,
        title="Page load timeout",
        description="Maximum time to wait for a navigation to complete",
    )

    poll_interval: HumanTimedelta = Field(
        DEFAULT_POLL_INTERVAL,
        title="Poll interval",
        description="Interval between evaluations of a wait condition",
    )

    base_url: HttpUrl = Field(
        ...,
        title="Portal URL",
        description="URL of the multilingual Wikipedia portal",
    )

    wikipedia_en_url: HttpUrl = Field(
        ...,
        title="English Wikipedia URL",
        description="URL of the English Wikipedia main page",
    )


class MobileConfig(EnvFirstSettings):
    """Configuration for Android sessions through Appium."""

    appium_server_url: HttpUrl = Field(
        ...,
        title="Appium server URL",
        validation_alias=AliasChoices(
            "WIKIUI_APPIUM_SERVER_URL", "appiumServerUrl"
        ),
    )

    platform_name: str = Field(..., title="Platform name")

    platform_version: str = Field(
        ...,
        title="Platform version",
        description="Android version of the device or emulator",
        validation_alias=AliasChoices(
            "WIKIUI_PLATFORM_VERSION", "platformVersion"
        ),
    )

    device_name: str = Field(
        ...,
        title="Device name",
        validation_alias=AliasChoices("WIKIUI_DEVICE_NAME", "deviceName"),
    )

    automation_name: str = Field(
        ...,
        title="Automation engine",
        description="Appium automation engine, normally UiAutomator2",
    )

    app_package: str = Field(..., title="Application package")

    app_activity: str = Field(..., title="Launch activity")

    apk_path: Path | None = Field(
        None,
        title="APK path",
        description=(
            "APK to install before the session starts. If not set, the"
            " application must already be installed on the device."
        ),
    )

    implicit_wait: HumanTimedelta = Field(
        DEFAULT_IMPLICIT_WAIT,
        title="Implicit wait",
        description="Fallback wait applied by the driver to every lookup",
    )

    explicit_wait: HumanTimedelta = Field(
        DEFAULT_MOBILE_EXPLICIT_WAIT,
        title="Explicit wait",
        description="Time budget for waits performed by screen objects",
    )

    poll_interval: HumanTimedelta = Field(
        DEFAULT_POLL_INTERVAL,
        title="Poll interval",
        description="Interval between evaluations of a wait condition",
    )


class Config(EnvFirstSettings):
    """Configuration for wikiui."""

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
        validation_alias=AliasChoices("WIKIUI_LOG_LEVEL", "logLevel"),
    )

    web: WebConfig = Field(
        ...,
        title="Web configuration",
        description="Configuration for browser sessions",
    )

    mobile: MobileConfig | None = Field(
        None,
        title="Mobile configuration",
        description=(
            "Configuration for Android sessions. Only needed to run the"
            " mobile scenarios."
        ),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_mobile(cls, data: Any) -> Any:
        """Treat an empty ``mobile`` key as an absent section.

        YAML parses a key with no value as `None`, and a section whose
        settings are all commented out as an empty mapping.
        """
        if isinstance(data, dict) and not data.get("mobile"):
            data = {k: v for k, v in data.items() if k != "mobile"}
        return data

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a Config object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        Config
            The corresponding `Config` object.

        Raises
        ------
        pydantic.ValidationError
            Raised if a required setting is missing or a setting is invalid.
        """
        with path.open("r") as f:
            return cls.model_validate(yaml.safe_load(f) or {})

    def configure_logging(self) -> None:
        """Configure logging based on the wikiui configuration."""
        configure_logging(
            name=LOGGER_NAME, log_level=self.log_level, add_timestamp=True
        )

    def require_mobile(self) -> MobileConfig:
        """Return the mobile configuration, which must be present.

        Raises
        ------
        NotConfiguredError
            Raised if the configuration has no ``mobile`` section.
        """
        if not self.mobile:
            raise NotConfiguredError("No mobile section in configuration")
        return self.mobile

