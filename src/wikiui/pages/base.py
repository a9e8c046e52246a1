"""Base screen model shared by web pages and Android screens."""

from __future__ import annotations

from datetime import timedelta

from ..elements import ElementActions, ElementProbes
from ..scroll import AndroidScroller, Scroller, WebScroller
from ..session import Platform, Session

__all__ = ["BaseScreen"]


class BaseScreen:
    """Wrapper around one logical screen of the application under test.

    Subclasses build their locators in ``__init__`` and implement their
    operations with the composed capabilities: ``act`` waits and then acts,
    ``probe`` inspects without raising, and ``scroller`` scrolls in the way
    the platform supports.

    Parameters
    ----------
    session
        Session to drive. The screen never quits it.
    timeout
        Time budget for waits, overriding the session's explicit wait.
    """

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        self.session = session
        self.logger = session.logger.bind(screen=type(self).__name__)
        waiter = session.waiter(timeout)
        self.act = ElementActions(session.driver, waiter, logger=self.logger)
        self.probe = ElementProbes(session.driver, waiter, logger=self.logger)
        self.scroller: Scroller
        if session.platform == Platform.android:
            self.scroller = AndroidScroller(session.driver)
        else:
            self.scroller = WebScroller(session.driver)
