"""Screen model for an article in the Android application."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from selenium.webdriver.remote.webelement import WebElement

from ...exceptions import ItemIndexError
from ...locator import Locator
from ...session import Session
from .base import MobileScreen

if TYPE_CHECKING:
    from .main import MainScreen
    from .search import SearchScreen

__all__ = ["ArticleScreen"]


class ArticleScreen(MobileScreen):
    """Representation of the article viewer."""

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._title = self._resource("view_page_title_text")
        self._web_view = self._resource("page_web_view")
        self._toolbar = self._resource("page_toolbar")
        self._toolbar_search = self._resource("page_toolbar_button_search")
        self._toolbar_tabs = self._resource("page_toolbar_button_tabs")
        self._overflow_menu = self._resource(
            "page_toolbar_button_show_overflow_menu"
        )
        self._save_button = self._resource("page_save")
        self._toc_button = self._resource("page_toc_button")
        self._toc_list = self._resource("page_toc_list")
        self._toc_items = self._resource("page_toc_item_text")
        self._language_button = self._resource("page_language")
        self._header_image = self._resource("view_page_header_image")
        self._navigate_up = Locator.class_name("android.widget.ImageButton")

    def wait_for_article_to_load(self) -> ArticleScreen:
        """Wait for the toolbar and then for the rendered article."""
        self.act.wait_visible(self._toolbar)
        self.act.wait_visible(self._web_view)
        return self

    def is_article_loaded(self) -> bool:
        if self.probe.is_displayed(self._toolbar):
            return True
        return self.probe.is_displayed(self._web_view)

    @property
    def title(self) -> str:
        """Title of the article, or the empty string if none is shown.

        Recent versions of the application render the title inside the web
        view rather than as a native view, in which case there is nothing to
        read.
        """
        if not self.probe.appears_within(self._title, self.act.waiter.timeout):
            return ""
        return self.probe.first_text(self._title)

    def is_article_title_displayed(self) -> bool:
        return self.probe.is_displayed(self._title)

    def is_title_match(self, expected: str) -> bool:
        return self.title.casefold() == expected.casefold()

    def title_contains(self, text: str) -> bool:
        return text.casefold() in self.title.casefold()

    def open_table_of_contents(self) -> ArticleScreen:
        self.act.click(self._toc_button)
        self.act.wait_visible(self._toc_list)
        return self

    def is_table_of_contents_displayed(self) -> bool:
        return self.probe.is_displayed(self._toc_list)

    def toc_items_count(self) -> int:
        return self.probe.count(self._toc_items)

    def click_toc_item(self, index: int) -> ArticleScreen:
        """Jump to the table of contents entry at a zero-based position.

        Raises
        ------
        ItemIndexError
            Raised if there is no entry at that position.
        """
        items = self.act.find_all(self._toc_items)
        if not 0 <= index < len(items):
            raise ItemIndexError("Table of contents item", index, len(items))
        self.act.click(items[index])
        return self

    def close_table_of_contents(self) -> ArticleScreen:
        self.press_back()
        self.act.wait_invisible(self._toc_list)
        return self

    def click_save(self) -> ArticleScreen:
        self.act.click(self._save_button)
        return self

    def is_save_button_displayed(self) -> bool:
        return self.probe.is_displayed(self._save_button)

    def click_language_button(self) -> ArticleScreen:
        self.act.click(self._language_button)
        return self

    def is_language_button_displayed(self) -> bool:
        return self.probe.is_displayed(self._language_button)

    def click_toolbar_search(self) -> SearchScreen:
        from .search import SearchScreen

        self.act.click(self._toolbar_search)
        return SearchScreen(self.session).wait_for_search_screen()

    def click_tabs_button(self) -> ArticleScreen:
        self.act.click(self._toolbar_tabs)
        return self

    def click_overflow_menu(self) -> ArticleScreen:
        self.act.click(self._overflow_menu)
        return self

    def scroll_article_down(self) -> ArticleScreen:
        self.scroller.scroll_down()
        return self

    def scroll_to_text(self, text: str) -> WebElement:
        """Scroll until an element containing the text is on screen."""
        return self.scroller.scroll_into_view(text)

    def has_header_image(self) -> bool:
        return self.probe.is_displayed(self._header_image)

    def is_toolbar_displayed(self) -> bool:
        return self.probe.is_displayed(self._toolbar)

    def navigate_up(self) -> None:
        """Tap the navigation arrow in the toolbar."""
        self.act.click(self._navigate_up)

    def go_back(self) -> None:
        self.press_back()

    def go_back_to_search(self) -> SearchScreen:
        from .search import SearchScreen

        self.press_back()
        return SearchScreen(self.session).wait_for_search_screen()

    def go_back_to_main(self) -> MainScreen:
        return self.go_back_to_search().go_back()
