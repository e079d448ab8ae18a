from free_nonprofits.catalog import build_catalog, parse_listing
from free_nonprofits.registry_store import parse_registry
from free_nonprofits.rendering import render_listing

CURATED = {
    "Canva": {
        "url": "https://www.canva.com/canva-for-nonprofits/",
        "about": "Online design platform.",
        "offer": "Canva Pro free.",
        "score": 90,
        "categories": ["Design & Creative"],
    },
    "Cloudflare": {
        "url": "https://www.cloudflare.com/galileo/",
        "about": "Web security network. Protects sites.",
        "offer": "Free protection.",
        "score": 85,
        "categories": ["Infrastructure & Security"],
    },
    "Zoom": {
        "url": "https://zoom.us/nonprofits",
        "about": "Video meetings.",
        "categories": ["Communication & Collaboration"],
    },
}


def _triples(catalog):
    return {(s.name, s.url, tuple(s.categories)) for s in catalog.services}


def test_generate_then_parse_preserves_name_url_categories():
    records = parse_registry(CURATED)
    forward = build_catalog(records)
    reverse = parse_listing(render_listing(records))
    assert _triples(reverse) == _triples(forward)


def test_score_markers_round_trip():
    records = parse_registry(CURATED)
    reverse = parse_listing(render_listing(records, include_scores=True))
    assert {s.name: s.score for s in reverse.services} == {
        "Canva": 90,
        "Cloudflare": 85,
        "Zoom": 50,
    }
    assert reverse.get("Canva").about == "Online design platform."


def test_parsed_categories_are_encounter_order():
    records = parse_registry(CURATED)
    reverse = parse_listing(render_listing(records))
    assert reverse.categories == [
        "Infrastructure & Security",
        "Design & Creative",
        "Communication & Collaboration",
    ]
