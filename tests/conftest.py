"""Shared pytest fixtures for the free nonprofit services tests."""

import json
from pathlib import Path

import pytest

from free_nonprofits.models import CatalogService
from free_nonprofits.registry_store import parse_registry

SAMPLE_REGISTRY = {
    "Canva": {
        "url": "https://www.canva.com/canva-for-nonprofits/",
        "about": "Online design platform.",
        "offer": "Canva Pro free for eligible nonprofits.",
        "score": 90,
        "categories": ["Design & Creative", "Marketing & CRM"],
    },
    "Cloudflare": {
        "url": "https://www.cloudflare.com/galileo/",
        "about": "Web security and performance network.",
        "offer": "Free enterprise-level protection through Project Galileo.",
        "score": 85,
        "categories": ["Infrastructure & Security"],
    },
    "Asana": {
        "url": "https://asana.com/nonprofit",
        "about": "Work management platform.",
        "offer": "50% discount on paid plans.",
        "categories": ["Productivity & Analytics"],
    },
    "Slack": {
        "url": "https://slack.com/nonprofits",
        "about": "Team messaging app.",
        "offer": "Free Pro plan for small nonprofits.",
        "score": 85,
        "categories": ["Communication & Collaboration"],
    },
    "Local Hosting Co": {
        "url": "https://hosting.example.org",
        "about": "Regional web host.",
        "offer": "Free shared hosting.",
        "score": 40,
        "categories": ["Web Hosting"],
    },
}


@pytest.fixture
def sample_registry_data():
    return json.loads(json.dumps(SAMPLE_REGISTRY))


@pytest.fixture
def sample_records(sample_registry_data):
    return parse_registry(sample_registry_data)


@pytest.fixture
def project_root(tmp_path: Path, sample_registry_data) -> Path:
    """A project tree with the registry at its well-known location."""
    registry = tmp_path / "scripts" / "services.json"
    registry.parent.mkdir(parents=True)
    registry.write_text(json.dumps(sample_registry_data, indent=2), encoding="utf-8")
    (tmp_path / "app" / "public" / "logos").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def fake_logo_probe():
    """Probe reporting a logo only for the given service names."""

    def _make(*names: str):
        def probe(service_name: str) -> str | None:
            if service_name in names:
                return f"/logos/{service_name.lower()}.png"
            return None

        return probe

    return _make


@pytest.fixture
def make_service():
    def _make(name: str, score: int | None = 50, **overrides) -> CatalogService:
        data = {
            "name": name,
            "url": f"https://example.org/{name.lower()}",
            "description": f"{name} description.",
            "score": score,
            "categories": ["Design & Creative"],
        }
        data.update(overrides)
        return CatalogService(**data)

    return _make
