"""Page model for a Wikipedia article."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from ...constants import FIRST_PARAGRAPH_MIN_LENGTH
from ...exceptions import ItemNotFoundError
from ...locator import Locator
from ...session import Session
from .base import WebPage

if TYPE_CHECKING:
    from .main import MainPage
    from .search import SearchResultsPage

__all__ = ["ArticlePage"]


class ArticlePage(WebPage):
    """Representation of an article page.

    The table of contents selectors match both the legacy inline table
    (``#toc``) and the sidebar table of the Vector 2022 skin.
    """

    def __init__(
        self, session: Session, *, timeout: timedelta | None = None
    ) -> None:
        super().__init__(session, timeout=timeout)
        self._heading = Locator.id("firstHeading")
        self._content = Locator.id("mw-content-text")
        self._paragraphs = Locator.css("#mw-content-text p")
        self._toc = Locator.css("#toc, #vector-toc")
        self._toc_links = Locator.css(
            "#toc ul li a, #vector-toc .vector-toc-link"
        )
        self._logo = Locator.css(".mw-logo")
        self._search_input = Locator.form_name("search")
        self._language_button = Locator.css("#p-lang-btn")
        self._language_links = Locator.css(".interlanguage-link a")
        self._edit_link = Locator.css("#ca-edit a")
        self._categories = Locator.id("mw-normal-catlinks")
        self._category_links = Locator.css("#mw-normal-catlinks a")
        self._references = Locator.css(".reference")
        self._infobox = Locator.css(".infobox")
        self._section_headings = Locator.css(".mw-heading")

    def wait_until_loaded(self) -> ArticlePage:
        self.act.wait_visible(self._heading)
        return self

    def is_page_loaded(self) -> bool:
        return self.probe.is_displayed(self._heading)

    @property
    def title(self) -> str:
        """Heading of the article, as displayed."""
        return self.act.read_text(self._heading)

    def is_title_match(self, expected: str) -> bool:
        return self.title.casefold() == expected.casefold()

    def title_contains(self, text: str) -> bool:
        return text.casefold() in self.title.casefold()

    def first_paragraph_text(self) -> str:
        """Return the lead paragraph of the article.

        Short paragraphs (hatnotes, coordinates) are skipped. Returns the
        empty string if no paragraph is long enough.
        """
        for text in self.probe.texts(self._paragraphs):
            if len(text.strip()) > FIRST_PARAGRAPH_MIN_LENGTH:
                return text.strip()
        return ""

    def article_contains_text(self, text: str) -> bool:
        content = self.act.read_text(self._content)
        return text.casefold() in content.casefold()

    def has_table_of_contents(self) -> bool:
        return self.probe.is_displayed(self._toc)

    def toc_section_names(self) -> list[str]:
        return [t for t in self.probe.texts(self._toc_links) if t]

    def click_toc_section(self, name: str) -> ArticlePage:
        """Jump to the first section whose name contains ``name``.

        Raises
        ------
        ItemNotFoundError
            Raised if no table of contents entry matches.
        """
        wanted = name.casefold()
        for link in self.act.find_all(self._toc_links):
            if wanted in link.text.casefold():
                self.act.click(link)
                return self
        msg = f"No table of contents section containing {name!r}"
        raise ItemNotFoundError(msg)

    def has_infobox(self) -> bool:
        return self.probe.is_displayed(self._infobox)

    def references_count(self) -> int:
        return self.probe.count(self._references)

    def has_references(self) -> bool:
        return self.references_count() > 0

    def categories(self) -> list[str]:
        if not self.has_categories():
            return []
        return self.probe.texts(self._category_links)

    def has_categories(self) -> bool:
        return self.probe.is_displayed(self._categories)

    def section_headings_count(self) -> int:
        return self.probe.count(self._section_headings)

    def scroll_to_bottom(self) -> ArticlePage:
        self.scroller.scroll_into_view(self._categories)
        return self

    def click_logo(self) -> MainPage:
        from .main import MainPage

        with self._leaving_page():
            self.act.click(self._logo)
        return MainPage(self.session).wait_until_loaded()

    def search(self, query: str) -> SearchResultsPage:
        """Search from the header search box of the article."""
        from .search import SearchResultsPage

        self.act.type_text(self._search_input, query)
        with self._leaving_page():
            self.act.wait_visible(self._search_input).submit()
        return SearchResultsPage(self.session).wait_until_loaded()

    def has_language_options(self) -> bool:
        return self.probe.is_displayed(self._language_button)

    def available_languages_count(self) -> int:
        return self.probe.count(self._language_links)

    def has_edit_link(self) -> bool:
        return self.probe.is_displayed(self._edit_link)

    def url_contains_article_name(self, name: str) -> bool:
        """Whether the URL contains the article name in its URL form."""
        slug = name.replace(" ", "_").casefold()
        return slug in self.url.casefold()
