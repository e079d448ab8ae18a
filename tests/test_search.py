import pytest

from free_nonprofits.catalog import build_catalog
from free_nonprofits.search import BrowseState, filter_services, matches_query


@pytest.fixture
def catalog(sample_records):
    return build_catalog(sample_records)


def _names(services):
    return [s.name for s in services]


def test_default_shows_all_ranked(catalog):
    assert _names(filter_services(catalog.services)) == [
        "Canva",
        "Cloudflare",
        "Slack",
        "Asana",
        "Local Hosting Co",
    ]


def test_category_filter_is_exact(catalog):
    assert _names(filter_services(catalog.services, "", "Marketing & CRM")) == ["Canva"]
    assert filter_services(catalog.services, "", "marketing & crm") == []


def test_search_matches_name_description_and_category(catalog):
    assert _names(filter_services(catalog.services, "SLACK")) == ["Slack"]
    assert _names(filter_services(catalog.services, "galileo")) == ["Cloudflare"]
    assert _names(filter_services(catalog.services, "crm")) == ["Canva"]


@pytest.mark.parametrize(
    "category", ["all", "Design & Creative", "Web Hosting", "No Such Category"]
)
def test_search_ignores_selected_category(catalog, category):
    expected = _names(filter_services(catalog.services, "free"))
    assert _names(filter_services(catalog.services, "free", category)) == expected
    assert expected


def test_whitespace_query_falls_back_to_category(catalog):
    assert _names(filter_services(catalog.services, "   ", "Web Hosting")) == [
        "Local Hosting Co"
    ]


def test_missing_description_does_not_match(make_service):
    service = make_service("Plain", description=None)
    assert not matches_query(service, "description")
    assert matches_query(service, "plain")


def test_ties_broken_by_name(make_service):
    services = [
        make_service("B", score=80),
        make_service("A", score=80),
        make_service("C", score=90),
    ]
    assert _names(filter_services(services)) == ["C", "A", "B"]


def test_browse_state_search_resets_category(catalog):
    state = BrowseState(catalog)
    state.select_category("Design & Creative")
    assert _names(state.visible()) == ["Canva"]
    state.set_search("slack")
    assert state.selected_category == "all"
    assert _names(state.visible()) == ["Slack"]


def test_browse_state_blank_search_keeps_category(catalog):
    state = BrowseState(catalog, selected_category="Design & Creative")
    state.set_search("  ")
    assert state.selected_category == "Design & Creative"


def test_empty_result_and_reset(catalog):
    state = BrowseState(catalog)
    state.set_search("nothing matches this")
    assert state.is_empty
    assert state.summary() == 'Showing 0 of 5 services matching "nothing matches this"'
    state.reset()
    assert not state.is_empty
    assert _names(state.visible()) == _names(filter_services(catalog.services))
    assert state.summary() == "Showing 5 of 5 services"


def test_summary_in_category(catalog):
    state = BrowseState(catalog)
    state.select_category("Marketing & CRM")
    assert state.summary() == "Showing 1 of 5 services in Marketing & CRM"
