"""Tests for the web page models against a fake Wikipedia."""

from __future__ import annotations

from datetime import timedelta

import pytest

from wikiui.exceptions import (
    ConditionTimeoutError,
    ItemIndexError,
    ItemNotFoundError,
    NoResultsError,
)
from wikiui.pages.web import (
    ArticlePage,
    MainPage,
    PortalPage,
    SearchResultsPage,
)
from wikiui.pages.web import portal as portal_module
from wikiui.session import Session

from .support.driver import MockDriver, mock_session
from .support.wikipedia import (
    MAIN_URL,
    MORE_RESULTS,
    PORTAL_URL,
    RANDOM_ARTICLE,
    WIKI_URL,
    FakeWikipedia,
    article_url,
)


@pytest.fixture
def site(driver: MockDriver) -> FakeWikipedia:
    return FakeWikipedia(driver)


@pytest.fixture
def session(driver: MockDriver, site: FakeWikipedia) -> Session:
    return mock_session(driver)


def test_portal(session: Session) -> None:
    portal = PortalPage(session).open(PORTAL_URL)

    assert portal.is_page_loaded()
    assert portal.is_logo_displayed()
    assert portal.is_search_input_displayed()
    assert portal.is_english_link_displayed()
    assert portal.is_russian_link_displayed()
    assert not portal.is_language_link_displayed("tlh")
    assert portal.main_language_links_count() == 5
    assert portal.search_placeholder() == "Search Wikipedia"
    assert portal.get_search_query() == ""

    portal.enter_search_query("Albert Einstein")
    assert portal.get_search_query() == "Albert Einstein"
    assert portal.select_search_language("de") is portal


def test_portal_search(session: Session, site: FakeWikipedia) -> None:
    results = PortalPage(session).open(PORTAL_URL).search("Python programming")

    assert isinstance(results, SearchResultsPage)
    assert site.searches == ["Python programming"]
    assert not results.is_article_redirect()
    assert results.has_results()
    assert results.results_count() == 3
    assert results.first_result_title() == "Python (programming language)"
    assert results.any_result_contains("MONTY")
    assert not results.any_result_contains("Java")


def test_portal_search_redirect(session: Session) -> None:
    results = PortalPage(session).open(PORTAL_URL).search("Albert Einstein")

    assert results.is_page_loaded()
    assert results.is_article_redirect()
    assert not results.has_results()
    assert results.url == article_url("Albert Einstein")


def test_portal_suggestions(session: Session) -> None:
    portal = PortalPage(session).open(PORTAL_URL)
    portal.enter_search_query("Albert")

    suggestions = portal.get_search_suggestions()
    assert [s.text for s in suggestions] == ["Albert Einstein"]
    article = portal.click_first_suggestion()
    assert isinstance(article, ArticlePage)
    assert article.title == "Albert Einstein"


def test_portal_no_suggestions(
    session: Session, monkeypatch: pytest.MonkeyPatch
) -> None:
    timeout = timedelta(milliseconds=200)
    monkeypatch.setattr(portal_module, "SUGGESTION_TIMEOUT", timeout)
    portal = PortalPage(session).open(PORTAL_URL)
    portal.enter_search_query("qwxz")

    assert portal.get_search_suggestions() == []
    with pytest.raises(NoResultsError):
        portal.click_first_suggestion()


def test_portal_language_links(session: Session) -> None:
    portal = PortalPage(session).open(PORTAL_URL)

    main = portal.click_english_link()
    assert isinstance(main, MainPage)
    assert main.url == MAIN_URL

    session.go_back()
    portal = PortalPage(session).wait_until_loaded()
    portal.click_german_link()
    assert session.current_url == "https://de.wikipedia.org/"
    session.go_back()
    PortalPage(session).wait_until_loaded().click_french_link()
    assert session.current_url == "https://fr.wikipedia.org/"


def test_main_page(session: Session) -> None:
    main = MainPage(session).open(MAIN_URL)

    assert main.is_page_loaded()
    assert "Wikipedia" in main.title
    assert main.is_logo_displayed()
    assert main.is_search_input_displayed()
    assert main.is_top_banner_displayed()
    assert main.is_featured_article_section_displayed()
    assert main.is_did_you_know_section_displayed()
    assert main.is_in_the_news_section_displayed()

    main.enter_search_query("Python")
    suggestions = main.get_search_suggestions()
    assert [s.text for s in suggestions] == ["Python (programming language)"]


def test_main_page_navigation(session: Session) -> None:
    main = MainPage(session).open(MAIN_URL)

    article = main.click_random_article()
    assert isinstance(article, ArticlePage)
    assert article.title == RANDOM_ARTICLE

    main = article.click_logo()
    assert isinstance(main, MainPage)
    assert main.click_main_page_link() is main
    assert main.url == MAIN_URL

    main.click_contents_link()
    assert session.current_url.endswith("/wiki/Wikipedia:Contents")
    session.go_back()
    MainPage(session).wait_until_loaded().click_current_events_link()
    assert session.current_url.endswith("/wiki/Portal:Current_events")


def test_search_results(session: Session) -> None:
    results = MainPage(session).open(MAIN_URL).search("Python programming")

    assert results.result_titles() == [
        "Python (programming language)",
        "History of Python",
        "Monty Python",
    ]
    assert not results.is_no_results_message_displayed()
    assert results.get_search_query() == "Python programming"

    article = results.click_result_by_index(1)
    assert article.title == "History of Python"
    session.go_back()
    results = SearchResultsPage(session).wait_until_loaded()
    article = results.click_result_containing("monty")
    assert article.title == "Monty Python"
    session.go_back()
    results = SearchResultsPage(session).wait_until_loaded()
    article = results.click_first_result()
    assert article.title == "Python (programming language)"


def test_search_results_bad_index(session: Session) -> None:
    results = MainPage(session).open(MAIN_URL).search("Python programming")

    with pytest.raises(ItemIndexError, match=r"index 99 .* \(3 present\)"):
        results.click_result_by_index(99)
    with pytest.raises(IndexError):
        results.click_result_by_index(-1)
    with pytest.raises(ItemNotFoundError):
        results.click_result_containing("Java")
    assert results.results_count() == 3


@pytest.mark.parametrize("query", ["", "qwxzqwxz"])
def test_search_no_results(
    session: Session, site: FakeWikipedia, query: str
) -> None:
    site.serve_search(query)
    results = SearchResultsPage.open(session, WIKI_URL, query)

    assert results.is_page_loaded()
    assert not results.is_article_redirect()
    assert not results.has_results()
    assert results.results_count() == 0
    assert results.result_titles() == []
    assert results.first_result_title() == ""
    assert results.is_no_results_message_displayed()
    with pytest.raises(NoResultsError):
        results.click_first_result()
    with pytest.raises(ItemIndexError):
        results.click_result_by_index(0)


def test_search_repeated(session: Session, site: FakeWikipedia) -> None:
    site.serve_search("Python programming")
    first = SearchResultsPage.open(session, WIKI_URL, "Python programming")
    count = first.results_count()
    second = SearchResultsPage.open(session, WIKI_URL, "Python programming")

    assert count == 3
    assert second.results_count() == count
    assert second.result_titles() == first.result_titles()


@pytest.mark.parametrize(
    "query", ["Albert", "C++ & \"quoted\" text", "Ångström", "  spaced  "]
)
def test_search_query_preserved(
    session: Session, site: FakeWikipedia, query: str
) -> None:
    site.serve_search(query)
    results = SearchResultsPage.open(session, WIKI_URL, query)

    assert results.get_search_query() == query


def test_search_again(session: Session) -> None:
    results = MainPage(session).open(MAIN_URL).search("Python programming")

    results = results.search("Einstein relativity")
    assert results.result_titles() == ["Albert Einstein"]
    assert results.get_search_query() == "Einstein relativity"


def test_search_pagination(session: Session) -> None:
    results = MainPage(session).open(MAIN_URL).search("Python programming")

    assert results.has_next_page()
    assert not results.has_previous_page()
    more = results.click_next_page()
    assert more.result_titles() == MORE_RESULTS["python programming"]
    assert not more.has_next_page()
    assert more.has_previous_page()

    results = more.click_previous_page()
    assert results.results_count() == 3
    assert results.has_next_page()


def test_article(driver: MockDriver, session: Session) -> None:
    session.navigate_to(article_url("Albert Einstein"))
    article = ArticlePage(session).wait_until_loaded()

    assert article.is_page_loaded()
    assert article.title == "Albert Einstein"
    assert article.is_title_match("albert einstein")
    assert not article.is_title_match("Einstein")
    assert article.title_contains("EINSTEIN")
    assert article.first_paragraph_text().startswith("Albert Einstein is")
    assert article.article_contains_text("LEAD PARAGRAPH")
    assert not article.article_contains_text("relativity")
    assert article.url_contains_article_name("Albert Einstein")
    assert not article.url_contains_article_name("Isaac Newton")

    assert article.has_table_of_contents()
    assert article.toc_section_names() == [
        "(Top)",
        "Early life",
        "Career",
        "Personal life",
    ]
    assert article.click_toc_section("career") is article
    with pytest.raises(ItemNotFoundError):
        article.click_toc_section("Awards")
    assert article.section_headings_count() == 3

    assert article.has_infobox()
    assert article.has_references()
    assert article.references_count() == 4
    assert article.has_categories()
    assert article.categories() == ["Physicists", "Nobel laureates"]
    assert article.has_language_options()
    assert article.available_languages_count() == 3
    assert article.has_edit_link()

    assert article.scroll_to_bottom() is article
    script, _ = driver.scripts[-1]
    assert script == "arguments[0].scrollIntoView(true);"


def test_article_search(session: Session) -> None:
    session.navigate_to(article_url("Monty Python"))
    article = ArticlePage(session).wait_until_loaded()

    results = article.search("Python programming")
    assert isinstance(results, SearchResultsPage)
    assert results.results_count() == 3
    article = results.click_first_result()
    assert article.url_contains_article_name("Python (programming language)")


def test_not_loaded(session: Session) -> None:
    session.navigate_to(WIKI_URL + "wiki/Special:BlankPage")
    timeout = timedelta(milliseconds=200)

    with pytest.raises(ConditionTimeoutError, match="searchresults"):
        SearchResultsPage(session, timeout=timeout).wait_until_loaded()
    with pytest.raises(ConditionTimeoutError, match="firstHeading"):
        ArticlePage(session, timeout=timeout).wait_until_loaded()
    assert not ArticlePage(session).is_page_loaded()
    assert not SearchResultsPage(session).is_page_loaded()
    assert not PortalPage(session).is_page_loaded()


def test_probes_under_implicit_wait(
    driver: MockDriver, site: FakeWikipedia
) -> None:
    driver.implicitly_wait(10)
    session = mock_session(driver, implicit_wait=timedelta(seconds=10))
    results = MainPage(session).open(MAIN_URL).search("Einstein relativity")

    assert results.results_count() == 1
    assert not results.has_next_page()
    assert not results.has_previous_page()
    assert not results.is_no_results_message_displayed()
    assert driver.blocking_lookups == 0
