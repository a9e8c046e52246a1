"""Fake Wikipedia site served by the mock driver.

The fake site has just enough of the structure of the portal, the English
main page, search results and articles for the page models to run against
it. Links and forms load the page they lead to, detaching the elements of
the current page as a real navigation does.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlencode

from wikiui.locator import Locator

from .driver import MockDriver, MockElement

PORTAL_URL = "https://www.wikipedia.org/"
"""URL of the fake portal."""

WIKI_URL = "https://en.wikipedia.org/"
"""Base URL of the fake English Wikipedia."""

MAIN_URL = WIKI_URL + "wiki/Main_Page"
"""URL of the fake English main page."""

ARTICLES = {
    "Albert Einstein": ["Early life", "Career", "Personal life"],
    "Python (programming language)": ["History", "Design", "Syntax"],
    "Monty Python": ["History", "Legacy"],
    "History of Python": ["Versions"],
}
"""Articles of the fake wiki with their section names."""

SEARCH_RESULTS = {
    "python programming": [
        "Python (programming language)",
        "History of Python",
        "Monty Python",
    ],
    "einstein relativity": ["Albert Einstein"],
}
"""Full-text search results by normalized query."""

MORE_RESULTS = {
    "python programming": ["Python Software Foundation"],
}
"""Second page of full-text results by normalized query."""

RANDOM_ARTICLE = "Monty Python"
"""Article the random article link leads to."""

__all__ = [
    "ARTICLES",
    "MAIN_URL",
    "MORE_RESULTS",
    "PORTAL_URL",
    "RANDOM_ARTICLE",
    "SEARCH_RESULTS",
    "WIKI_URL",
    "FakeWikipedia",
    "article_url",
    "search_url",
]


def article_url(title: str) -> str:
    return WIKI_URL + "wiki/" + title.replace(" ", "_")


def search_url(query: str, offset: int = 0) -> str:
    params = {"search": query, "title": "Special:Search", "fulltext": "1"}
    if offset:
        params["offset"] = str(offset)
    return WIKI_URL + "w/index.php?" + urlencode(params)


class FakeWikipedia:
    """Serves the fake site through a mock driver.

    Parameters
    ----------
    driver
        Mock driver to install the site into.
    suggestion_delay
        Number of lookups before typed-ahead suggestions appear.
    """

    def __init__(self, driver: MockDriver, suggestion_delay: int = 1) -> None:
        self.driver = driver
        self.suggestion_delay = suggestion_delay
        self.searches: list[str] = []
        driver.pages[PORTAL_URL] = self._build_portal
        driver.pages[MAIN_URL] = self._build_main
        for title in ARTICLES:
            driver.pages[article_url(title)] = self._article_builder(title)

    def search(self, query: str) -> None:
        """Submit a search, as the search forms of the site do.

        A query exactly matching an article title goes to the article.
        """
        self.searches.append(query)
        for title in ARTICLES:
            if query.strip().casefold() == title.casefold():
                self.visit(article_url(title))
                return
        self.visit(self.serve_search(query))

    def serve_search(self, query: str) -> str:
        """Make the full-text results for a query available.

        Returns
        -------
        str
            URL of the results.
        """
        url = search_url(query)
        self.driver.pages[url] = self._results_builder(query)
        if query.strip().casefold() in MORE_RESULTS:
            more = search_url(query, offset=20)
            self.driver.pages[more] = self._results_builder(query, offset=20)
        return url

    def visit(self, url: str) -> None:
        """Follow a link to the URL, recording the current page in history."""
        self.driver.history.append(self.driver.current_url)
        self.driver.load(url)

    def _build_portal(self) -> None:
        driver = self.driver
        driver.title = "Wikipedia"
        driver.element(Locator.css(".central-textlogo-wrapper"), "Wikipedia")
        box = driver.element(
            Locator.id("searchInput"),
            attributes={"placeholder": "Search Wikipedia"},
        )
        box.on_keys = self._suggester(Locator.css(".suggestion-link"))
        driver.element(
            Locator.css("button[type='submit']"),
            on_click=lambda: self.search(box.get_attribute("value") or ""),
        )
        driver.element(Locator.id("searchLanguage"))
        for code in ("en", "de", "fr", "es", "ru"):
            driver.element(Locator.css(f"option[lang='{code}']"), code)
            link = driver.element(
                Locator.id(f"js-link-box-{code}"),
                code,
                on_click=self._link(self._language_url(code)),
            )
            driver.add(Locator.css(".central-featured-lang"), link)

    def _build_main(self) -> None:
        driver = self.driver
        driver.title = "Wikipedia, the free encyclopedia"
        self._build_header()
        for section in ("mp-topbanner", "mp-tfa", "mp-dyk", "mp-itn"):
            driver.element(Locator.id(section))
        driver.element(
            Locator.id("n-mainpage-description"),
            "Main page",
            on_click=self._link(MAIN_URL),
        )
        driver.element(
            Locator.id("n-randompage"),
            "Random article",
            on_click=self._link(article_url(RANDOM_ARTICLE)),
        )
        driver.element(
            Locator.id("n-contents"),
            "Contents",
            on_click=self._link(WIKI_URL + "wiki/Wikipedia:Contents"),
        )
        driver.element(
            Locator.id("n-currentevents"),
            "Current events",
            on_click=self._link(WIKI_URL + "wiki/Portal:Current_events"),
        )

    def _build_header(self, query: str = "") -> None:
        driver = self.driver
        driver.element(Locator.css(".mw-logo"), on_click=self._link(MAIN_URL))
        box = driver.element(
            Locator.form_name("search"), attributes={"value": query}
        )
        box.on_keys = self._suggester(Locator.css(".cdx-menu-item"))
        box.on_submit = lambda: self.search(box.get_attribute("value") or "")
        driver.element(
            Locator.css("#searchform button.cdx-button"),
            "Search",
            on_click=box.on_submit,
        )

    def _results_builder(
        self, query: str, offset: int = 0
    ) -> Callable[[], None]:
        def build() -> None:
            driver = self.driver
            driver.title = f"{query} - Search results - Wikipedia"
            self._build_header(query)
            driver.element(Locator.css(".searchresults"))
            key = query.strip().casefold()
            if offset:
                titles = MORE_RESULTS[key]
                driver.element(
                    Locator.css(".mw-prevlink"),
                    "previous 20",
                    on_click=self._link(search_url(query)),
                )
            else:
                titles = SEARCH_RESULTS.get(key, [])
            if key in MORE_RESULTS and not offset:
                driver.element(
                    Locator.css(".mw-nextlink"),
                    "next 20",
                    on_click=self._link(search_url(query, offset=20)),
                )
            if not titles:
                driver.element(
                    Locator.css(".mw-search-nonefound"),
                    "There were no results matching the query.",
                )
            for title in titles:
                driver.element(Locator.css(".mw-search-result"), title)
                driver.element(
                    Locator.css(".mw-search-result-heading a"),
                    title,
                    on_click=self._link(article_url(title)),
                )

        return build

    def _article_builder(self, title: str) -> Callable[[], None]:
        def build() -> None:
            driver = self.driver
            driver.title = f"{title} - Wikipedia"
            self._build_header()
            driver.element(Locator.id("firstHeading"), title)
            lead = (
                f"{title} is the subject of this article, which is long"
                " enough to be the lead paragraph."
            )
            driver.element(Locator.id("mw-content-text"), lead)
            paragraphs = Locator.css("#mw-content-text p")
            driver.add(
                paragraphs,
                MockElement(driver, "Coordinates: 0°N 0°E"),
                MockElement(driver, lead),
            )
            driver.element(Locator.css("#toc, #vector-toc"))
            toc_links = Locator.css(
                "#toc ul li a, #vector-toc .vector-toc-link"
            )
            driver.add(toc_links, MockElement(driver, "(Top)"))
            for section in ARTICLES[title]:
                driver.add(toc_links, MockElement(driver, section))
                driver.add(Locator.css(".mw-heading"), MockElement(driver))
            driver.element(Locator.css(".infobox"))
            for i in range(4):
                driver.element(Locator.css(".reference"), f"[{i + 1}]")
            driver.element(Locator.css("#p-lang-btn"))
            for language in ("Deutsch", "Français", "Español"):
                driver.element(Locator.css(".interlanguage-link a"), language)
            driver.element(Locator.css("#ca-edit a"), "Edit")
            driver.element(Locator.id("mw-normal-catlinks"))
            for category in ("Physicists", "Nobel laureates"):
                driver.element(Locator.css("#mw-normal-catlinks a"), category)

        return build

    def _language_url(self, code: str) -> str:
        if code == "en":
            return MAIN_URL
        return f"https://{code}.wikipedia.org/"

    def _link(self, url: str) -> Callable[[], None]:
        return lambda: self.visit(url)

    def _suggester(self, locator: Locator) -> Callable[[str], None]:
        def suggest(value: str) -> None:
            self.driver.remove(locator)
            wanted = value.strip().casefold()
            if not wanted:
                return
            for title in ARTICLES:
                if title.casefold().startswith(wanted):
                    element = MockElement(
                        self.driver,
                        title,
                        on_click=self._link(article_url(title)),
                    )
                    self.driver.add(
                        locator, element, after=self._lookups(locator)
                    )

        return suggest

    def _lookups(self, locator: Locator) -> int:
        return self.driver.lookups(locator) + self.suggestion_delay
