"""Constants for wikiui."""

from datetime import timedelta

__all__ = [
    "ANDROID_SCROLLABLE",
    "CONFIG_PATH",
    "DEFAULT_APP_PACKAGE",
    "DEFAULT_EXPLICIT_WAIT",
    "DEFAULT_IMPLICIT_WAIT",
    "DEFAULT_MOBILE_EXPLICIT_WAIT",
    "DEFAULT_PAGE_LOAD_TIMEOUT",
    "DEFAULT_POLL_INTERVAL",
    "FIRST_PARAGRAPH_MIN_LENGTH",
    "LOGGER_NAME",
    "SUGGESTION_TIMEOUT",
    "WINDOW_SIZE",
]

ANDROID_SCROLLABLE = "new UiScrollable(new UiSelector().scrollable(true))"
"""UiAutomator expression selecting the first scrollable container."""

CONFIG_PATH = "wikiui.yaml"
"""Default configuration path, relative to the working directory."""

DEFAULT_APP_PACKAGE = "org.wikipedia"
"""Package of the Wikipedia Android application and prefix of its IDs."""

DEFAULT_EXPLICIT_WAIT = timedelta(seconds=15)
"""Default explicit wait for web page objects."""

DEFAULT_IMPLICIT_WAIT = timedelta(seconds=10)
"""Default implicit wait applied by the driver to every element lookup."""

DEFAULT_MOBILE_EXPLICIT_WAIT = timedelta(seconds=20)
"""Default explicit wait for mobile screen objects.

Emulators render noticeably slower than desktop browsers, particularly on the
first article load after app start, so the mobile budget is larger.
"""

DEFAULT_PAGE_LOAD_TIMEOUT = timedelta(seconds=30)
"""Default page-load timeout for web sessions."""

DEFAULT_POLL_INTERVAL = timedelta(milliseconds=500)
"""Default interval between evaluations of a wait condition."""

FIRST_PARAGRAPH_MIN_LENGTH = 50
"""Minimum length of an article paragraph to count as the lead paragraph.

Shorter paragraphs are usually hatnotes or coordinates rather than prose.
"""

LOGGER_NAME = "wikiui"
"""Name of the structlog logger used throughout the package."""

SUGGESTION_TIMEOUT = timedelta(seconds=5)
"""How long to wait for search suggestions before treating them as absent."""

WINDOW_SIZE = (1920, 1080)
"""Browser window size for web sessions."""
