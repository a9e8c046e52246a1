"""Page model for the multilingual Wikipedia portal (www.wikipedia.org)."""

from __future__ import annotations

from datetime import timedelta

from selenium.webdriver.remote.webelement import WebElement

from ...constants import SUGGESTION_TIMEOUT
from ...exceptions import NoResultsError
from ...locator import Locator
from ...session import Session
from .article import ArticlePage
from .base import WebPage
from .main import MainPage
from .search import SearchResultsPage

__all__ = ["PortalPage"]


class PortalPage(WebPage):
    """Representation of the Wikipedia portal page."""

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._search_input = Locator.id("searchInput")
        self._search_button = Locator.css("button[type='submit']")
        self._logo = Locator.css(".central-textlogo-wrapper")
        self._language_selector = Locator.id("searchLanguage")
        self._suggestions = Locator.css(".suggestion-link")
        self._language_links = Locator.css(".central-featured-lang")

    def open(self, url: str) -> PortalPage:
        self.session.navigate_to(url)
        return self.wait_until_loaded()

    def wait_until_loaded(self) -> PortalPage:
        self.act.wait_visible(self._logo)
        return self

    def is_page_loaded(self) -> bool:
        logo = self.probe.is_displayed(self._logo)
        return logo and self.probe.is_displayed(self._search_input)

    def enter_search_query(self, query: str) -> PortalPage:
        self.act.type_text(self._search_input, query)
        return self

    def click_search(self) -> SearchResultsPage:
        with self._leaving_page():
            self.act.click(self._search_button)
        return SearchResultsPage(self.session).wait_until_loaded()

    def search(self, query: str) -> SearchResultsPage:
        """Search from the portal and wait for the results (or article)."""
        self.enter_search_query(query)
        return self.click_search()

    def get_search_suggestions(self) -> list[WebElement]:
        """Return the suggestions shown under the search box.

        Suggestions are fetched as the user types, so wait a short time for
        them to appear. If none appear, return an empty list.
        """
        timeout = SUGGESTION_TIMEOUT
        if not self.probe.appears_within(self._suggestions, timeout):
            return []
        return self.act.wait_all_visible(self._suggestions)

    def click_first_suggestion(self) -> ArticlePage:
        suggestions = self.get_search_suggestions()
        if not suggestions:
            raise NoResultsError("No search suggestions shown")
        with self._leaving_page():
            self.act.click(suggestions[0])
        return ArticlePage(self.session).wait_until_loaded()

    def click_english_link(self) -> MainPage:
        with self._leaving_page():
            self.act.click(self._language_link("en"))
        return MainPage(self.session).wait_until_loaded()

    def click_language_link(self, code: str) -> None:
        """Follow the featured link to the Wikipedia in that language."""
        with self._leaving_page():
            self.act.click(self._language_link(code))

    def click_russian_link(self) -> None:
        self.click_language_link("ru")

    def click_german_link(self) -> None:
        self.click_language_link("de")

    def click_french_link(self) -> None:
        self.click_language_link("fr")

    def click_spanish_link(self) -> None:
        self.click_language_link("es")

    def is_language_link_displayed(self, code: str) -> bool:
        return self.probe.is_displayed(self._language_link(code))

    def is_english_link_displayed(self) -> bool:
        return self.is_language_link_displayed("en")

    def is_russian_link_displayed(self) -> bool:
        return self.is_language_link_displayed("ru")

    def is_search_input_displayed(self) -> bool:
        return self.probe.is_displayed(self._search_input)

    def is_logo_displayed(self) -> bool:
        return self.probe.is_displayed(self._logo)

    def main_language_links_count(self) -> int:
        return self.probe.count(self._language_links)

    def select_search_language(self, code: str) -> PortalPage:
        self.act.click(self._language_selector)
        self.act.click(Locator.css(f"option[lang='{code}']"))
        return self

    def search_placeholder(self) -> str:
        return self.act.read_attribute(self._search_input, "placeholder") or ""

    def get_search_query(self) -> str:
        return self.act.read_attribute(self._search_input, "value") or ""

    def _language_link(self, code: str) -> Locator:
        return Locator.id(f"js-link-box-{code}")
