"""Screen model for the Explore feed of the Android application."""

from __future__ import annotations

from datetime import timedelta

from ...session import Session
from .base import MobileScreen
from .search import SearchScreen

__all__ = ["MainScreen"]


class MainScreen(MobileScreen):
    """Representation of the main (Explore) screen."""

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._search_container = self._resource("search_container")
        self._onboarding_skip = self._resource(
            "fragment_onboarding_skip_button"
        )
        self._wordmark = self._resource("main_toolbar_wordmark")
        self._announcement = self._resource("view_announcement_text")
        self._explore_tab = self._resource("nav_tab_explore")
        self._saved_tab = self._resource("nav_tab_reading_lists")
        self._search_tab = self._resource("nav_tab_search")
        self._edits_tab = self._resource("nav_tab_edits")
        self._more_tab = self._resource("nav_more_container")
        self._feed_cards = self._resource("view_list_card_list")
        self._feed_card_titles = self._resource("view_card_header_title")

    def skip_onboarding_if_present(self) -> MainScreen:
        """Dismiss the first-run onboarding if it is showing."""
        if self.probe.is_displayed(self._onboarding_skip):
            self.logger.info("Skipping onboarding")
            self.act.click(self._onboarding_skip)
            self.act.wait_invisible(self._onboarding_skip)
        return self

    def wait_for_main_screen(self) -> MainScreen:
        self.skip_onboarding_if_present()
        self.act.wait_visible(self._search_container)
        return self

    def is_main_screen_loaded(self) -> bool:
        return self.probe.is_displayed(self._search_container)

    def click_search(self) -> SearchScreen:
        self.act.click(self._search_container)
        return SearchScreen(self.session).wait_for_search_screen()

    def click_search_tab(self) -> SearchScreen:
        self.act.click(self._search_tab)
        return SearchScreen(self.session).wait_for_search_screen()

    def click_explore_tab(self) -> MainScreen:
        self.act.click(self._explore_tab)
        return self

    def click_saved_tab(self) -> MainScreen:
        self.act.click(self._saved_tab)
        return self

    def click_edits_tab(self) -> MainScreen:
        self.act.click(self._edits_tab)
        return self

    def click_more_tab(self) -> MainScreen:
        self.act.click(self._more_tab)
        return self

    def is_wordmark_displayed(self) -> bool:
        return self.probe.is_displayed(self._wordmark)

    def is_explore_tab_displayed(self) -> bool:
        return self.probe.is_displayed(self._explore_tab)

    def is_saved_tab_displayed(self) -> bool:
        return self.probe.is_displayed(self._saved_tab)

    def is_search_tab_displayed(self) -> bool:
        return self.probe.is_displayed(self._search_tab)

    def is_announcement_displayed(self) -> bool:
        return self.probe.is_displayed(self._announcement)

    def has_feed_cards(self) -> bool:
        return self.probe.is_displayed(self._feed_cards)

    def feed_card_titles_count(self) -> int:
        return self.probe.count(self._feed_card_titles)

    def first_feed_card_title(self) -> str:
        return self.probe.first_text(self._feed_card_titles)

    def scroll_feed(self) -> MainScreen:
        self.scroller.scroll_down()
        return self

    def go_back(self) -> None:
        self.press_back()
