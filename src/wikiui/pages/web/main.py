"""Page model for the English Wikipedia main page."""

from __future__ import annotations

from datetime import timedelta

from selenium.webdriver.remote.webelement import WebElement

from ...constants import SUGGESTION_TIMEOUT
from ...locator import Locator
from ...session import Session
from .article import ArticlePage
from .base import WebPage
from .search import SearchResultsPage

__all__ = ["MainPage"]


class MainPage(WebPage):
    """Representation of the English Wikipedia main page."""

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._search_input = Locator.form_name("search")
        self._search_button = Locator.css("#searchform button.cdx-button")
        self._logo = Locator.css(".mw-logo")
        self._top_banner = Locator.id("mp-topbanner")
        self._main_page_link = Locator.id("n-mainpage-description")
        self._contents_link = Locator.id("n-contents")
        self._current_events_link = Locator.id("n-currentevents")
        self._random_article_link = Locator.id("n-randompage")
        self._featured_article = Locator.id("mp-tfa")
        self._did_you_know = Locator.id("mp-dyk")
        self._in_the_news = Locator.id("mp-itn")
        self._suggestions = Locator.css(".cdx-menu-item")

    def open(self, url: str) -> MainPage:
        self.session.navigate_to(url)
        return self.wait_until_loaded()

    def wait_until_loaded(self) -> MainPage:
        self.act.wait_title_contains("Wikipedia")
        return self

    def is_page_loaded(self) -> bool:
        return self.probe.is_displayed(self._search_input)

    def enter_search_query(self, query: str) -> MainPage:
        self.act.type_text(self._search_input, query)
        return self

    def click_search_button(self) -> SearchResultsPage:
        with self._leaving_page():
            self.act.click(self._search_button)
        return SearchResultsPage(self.session).wait_until_loaded()

    def search(self, query: str) -> SearchResultsPage:
        """Search and wait for the results page or the matching article."""
        self.enter_search_query(query)
        return self.click_search_button()

    def get_search_suggestions(self) -> list[WebElement]:
        """Return the autocomplete entries shown under the search box."""
        timeout = SUGGESTION_TIMEOUT
        if not self.probe.appears_within(self._suggestions, timeout):
            return []
        return self.act.find_all(self._suggestions)

    def click_random_article(self) -> ArticlePage:
        with self._leaving_page():
            self.act.click(self._random_article_link)
        return ArticlePage(self.session).wait_until_loaded()

    def click_main_page_link(self) -> MainPage:
        with self._leaving_page():
            self.act.click(self._main_page_link)
        return self.wait_until_loaded()

    def click_contents_link(self) -> None:
        with self._leaving_page():
            self.act.click(self._contents_link)

    def click_current_events_link(self) -> None:
        with self._leaving_page():
            self.act.click(self._current_events_link)

    def is_logo_displayed(self) -> bool:
        return self.probe.is_displayed(self._logo)

    def is_search_input_displayed(self) -> bool:
        return self.probe.is_displayed(self._search_input)

    def is_top_banner_displayed(self) -> bool:
        return self.probe.is_displayed(self._top_banner)

    def is_featured_article_section_displayed(self) -> bool:
        return self.probe.is_displayed(self._featured_article)

    def is_did_you_know_section_displayed(self) -> bool:
        return self.probe.is_displayed(self._did_you_know)

    def is_in_the_news_section_displayed(self) -> bool:
        return self.probe.is_displayed(self._in_the_news)
