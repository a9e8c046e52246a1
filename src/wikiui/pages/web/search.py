"""Page model for Wikipedia search results."""

from __future__ import annotations

from datetime import timedelta
from urllib.parse import urlencode, urljoin

from selenium.webdriver.remote.webelement import WebElement

from ...exceptions import ItemIndexError, ItemNotFoundError, NoResultsError
from ...locator import Locator
from ...session import Session
from ...wait import any_of, element_visible
from .article import ArticlePage
from .base import WebPage

__all__ = ["SearchResultsPage"]


class SearchResultsPage(WebPage):
    """Representation of a search results page.

    A search whose query exactly matches an article title is redirected by
    Wikipedia straight to that article. The page is therefore considered
    loaded when either the results container or an article heading is
    visible, and `is_article_redirect` tells the two apart.
    """

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._results = Locator.css(".mw-search-result")
        self._result_links = Locator.css(".mw-search-result-heading a")
        self._container = Locator.css(".searchresults")
        self._heading = Locator.id("firstHeading")
        self._search_input = Locator.form_name("search")
        self._search_button = Locator.css("#searchform button.cdx-button")
        self._next_page = Locator.css(".mw-nextlink")
        self._previous_page = Locator.css(".mw-prevlink")
        self._no_results = Locator.css(".mw-search-nonefound")

    @classmethod
    def open(
        cls, session: Session, base_url: str, query: str
    ) -> SearchResultsPage:
        """Go directly to the full-text results for a query.

        Parameters
        ----------
        session
            Browser session.
        base_url
            URL of the wiki to search, such as ``https://en.wikipedia.org/``.
        query
            Search query, which may be empty.
        """
        params = {"search": query, "title": "Special:Search", "fulltext": "1"}
        url = urljoin(base_url, "/w/index.php") + "?" + urlencode(params)
        session.navigate_to(url)
        return cls(session).wait_until_loaded()

    def wait_until_loaded(self) -> SearchResultsPage:
        results = element_visible(self._container)
        article = element_visible(self._heading)
        self.act.waiter.until(any_of(results, article))
        return self

    def is_page_loaded(self) -> bool:
        if self.probe.is_displayed(self._container):
            return True
        return self.probe.is_displayed(self._heading)

    def is_article_redirect(self) -> bool:
        """Whether the search went straight to an article."""
        if self.probe.count(self._container) > 0:
            return False
        return self.probe.is_displayed(self._heading)

    def has_results(self) -> bool:
        return self.results_count() > 0

    def results_count(self) -> int:
        """Number of results on the current page of results."""
        return self.probe.count(self._results)

    def result_titles(self) -> list[str]:
        return self.probe.texts(self._result_links)

    def first_result_title(self) -> str:
        return self.probe.first_text(self._result_links)

    def any_result_contains(self, text: str) -> bool:
        """Whether any result title contains the text, ignoring case."""
        wanted = text.casefold()
        return any(wanted in t.casefold() for t in self.result_titles())

    def click_first_result(self) -> ArticlePage:
        """Open the first result.

        Raises
        ------
        NoResultsError
            Raised if the search found nothing.
        """
        links = self.act.find_all(self._result_links)
        if not links:
            raise NoResultsError("No search results to click")
        return self._open_result(links[0])

    def click_result_by_index(self, index: int) -> ArticlePage:
        """Open the result at a zero-based position.

        Raises
        ------
        ItemIndexError
            Raised if there is no result at that position.
        """
        links = self.act.find_all(self._result_links)
        if not 0 <= index < len(links):
            raise ItemIndexError("Search result", index, len(links))
        return self._open_result(links[index])

    def click_result_containing(self, text: str) -> ArticlePage:
        """Open the first result whose title contains the text.

        Raises
        ------
        ItemNotFoundError
            Raised if no result title contains the text.
        """
        wanted = text.casefold()
        for link in self.act.find_all(self._result_links):
            if wanted in link.text.casefold():
                return self._open_result(link)
        msg = f"No search result containing {text!r}"
        raise ItemNotFoundError(msg)

    def search(self, query: str) -> SearchResultsPage:
        """Run a new search from the header search box."""
        self.act.type_text(self._search_input, query)
        with self._leaving_page():
            self.act.click(self._search_button)
        return SearchResultsPage(self.session).wait_until_loaded()

    def has_next_page(self) -> bool:
        return self.probe.is_displayed(self._next_page)

    def click_next_page(self) -> SearchResultsPage:
        with self._leaving_page():
            self.act.click(self._next_page)
        return SearchResultsPage(self.session).wait_until_loaded()

    def has_previous_page(self) -> bool:
        return self.probe.is_displayed(self._previous_page)

    def click_previous_page(self) -> SearchResultsPage:
        with self._leaving_page():
            self.act.click(self._previous_page)
        return SearchResultsPage(self.session).wait_until_loaded()

    def is_no_results_message_displayed(self) -> bool:
        return self.probe.is_displayed(self._no_results)

    def get_search_query(self) -> str:
        return self.act.read_attribute(self._search_input, "value") or ""

    def _open_result(self, link: WebElement) -> ArticlePage:
        self.logger.info("Opening search result", title=link.text)
        with self._leaving_page():
            self.act.click(link)
        return ArticlePage(self.session).wait_until_loaded()
