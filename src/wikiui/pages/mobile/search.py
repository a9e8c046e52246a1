"""Screen model for search in the Android application."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from selenium.webdriver.remote.webelement import WebElement

from ...exceptions import ItemIndexError, ItemNotFoundError, NoResultsError
from ...session import Session
from ...wait import any_of, element_count_stable, element_visible
from .article import ArticleScreen
from .base import MobileScreen

if TYPE_CHECKING:
    from .main import MainScreen

__all__ = ["SearchScreen"]


class SearchScreen(MobileScreen):
    """Representation of the search screen.

    Results are fetched from the Wikipedia API as the user types and are
    added to the list as they arrive, while the results of the previous query
    stay on screen until they are replaced. After a query is entered, the
    screen waits for the previous results to go away, then for a result or
    the "no results" view, and then for the number of results to stop
    changing.
    """

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._search_input = self._resource("search_src_text")
        self._close_button = self._resource("search_close_btn")
        self._result_titles = self._resource("page_list_item_title")
        self._result_descriptions = self._resource(
            "page_list_item_description"
        )
        self._empty_view = self._resource("search_empty_view")
        self._recent_searches = self._resource("recent_searches_list")

    def wait_for_search_screen(self) -> SearchScreen:
        self.act.wait_visible(self._search_input)
        return self

    def is_search_screen_loaded(self) -> bool:
        return self.probe.is_displayed(self._search_input)

    def enter_search_query(self, query: str) -> SearchScreen:
        self.act.type_text(self._search_input, query)
        return self

    def clear_search(self) -> SearchScreen:
        if self.probe.is_displayed(self._close_button):
            self.act.click(self._close_button)
        return self

    def wait_for_search_results(
        self, previous: WebElement | None = None
    ) -> SearchScreen:
        """Wait until the results for the entered query have settled.

        The results list is shown before the first result arrives, so the
        wait is for a result or the "no results" view rather than the list.

        Parameters
        ----------
        previous
            A result of the previous query, taken before the new query was
            typed. Those results stay on screen until the new ones arrive,
            so it must be replaced before the new results are looked at.

        Raises
        ------
        ConditionTimeoutError
            Raised if the results did not settle within the wait budget.
        """
        if previous is not None:
            self.act.wait_stale(previous)
        results = element_visible(self._result_titles)
        empty = element_visible(self._empty_view)
        self.act.waiter.until(any_of(results, empty))
        self.act.waiter.until(element_count_stable(self._result_titles))
        return self

    def search(self, query: str) -> SearchScreen:
        """Enter a query and wait for its results.

        An empty or blank query fetches nothing. Only the removal of the
        previous results is waited for, and the result collection stays
        empty.
        """
        titles = self.act.find_all(self._result_titles)
        previous = titles[0] if titles else None
        self.enter_search_query(query)
        if query.strip():
            self.wait_for_search_results(previous)
        elif previous is not None:
            self.act.wait_stale(previous)
        return self

    def has_search_results(self) -> bool:
        return self.search_results_count() > 0

    def search_results_count(self) -> int:
        return self.probe.count(self._result_titles)

    def search_result_titles(self) -> list[str]:
        return self.probe.texts(self._result_titles)

    def search_result_descriptions(self) -> list[str]:
        return self.probe.texts(self._result_descriptions)

    def first_result_title(self) -> str:
        return self.probe.first_text(self._result_titles)

    def any_result_contains(self, text: str) -> bool:
        wanted = text.casefold()
        return any(wanted in t.casefold() for t in self.search_result_titles())

    def click_first_result(self) -> ArticleScreen:
        """Open the first result.

        Raises
        ------
        NoResultsError
            Raised if the result list is empty.
        """
        titles = self.act.find_all(self._result_titles)
        if not titles:
            raise NoResultsError("No search results to click")
        return self._open_result(titles[0])

    def click_result_by_index(self, index: int) -> ArticleScreen:
        """Open the result at a zero-based position.

        Raises
        ------
        ItemIndexError
            Raised if there is no result at that position.
        """
        titles = self.act.find_all(self._result_titles)
        if not 0 <= index < len(titles):
            raise ItemIndexError("Search result", index, len(titles))
        return self._open_result(titles[index])

    def click_result_containing(self, text: str) -> ArticleScreen:
        """Open the first result whose title contains the text.

        Raises
        ------
        ItemNotFoundError
            Raised if no result title contains the text.
        """
        wanted = text.casefold()
        for title in self.act.find_all(self._result_titles):
            if wanted in title.text.casefold():
                return self._open_result(title)
        msg = f"No search result containing {text!r}"
        raise ItemNotFoundError(msg)

    def is_empty_view_displayed(self) -> bool:
        return self.probe.is_displayed(self._empty_view)

    def is_recent_searches_displayed(self) -> bool:
        return self.probe.is_displayed(self._recent_searches)

    def get_search_query(self) -> str:
        return self.act.read_text(self._search_input)

    def dismiss_keyboard(self) -> SearchScreen:
        self.session.hide_keyboard()
        return self

    def go_back(self) -> MainScreen:
        """Leave search and return to the Explore feed."""
        from .main import MainScreen

        self.session.hide_keyboard()
        self.press_back()
        return MainScreen(self.session).wait_for_main_screen()

    def _open_result(self, title: WebElement) -> ArticleScreen:
        self.logger.info("Opening search result", title=title.text)
        self.act.click(title)
        return ArticleScreen(self.session).wait_for_article_to_load()
