import pytest

from free_nonprofits.categories import (
    CATEGORY_ORDER,
    category_to_slug,
    is_reserved_section,
    merge_categories,
    ordered_categories,
)


@pytest.mark.parametrize(
    "category, slug",
    [
        ("Infrastructure & Security", "infrastructure--security"),
        ("Design & Creative", "design--creative"),
        ("Marketing & CRM", "marketing--crm"),
        ("Fundraising", "fundraising"),
    ],
)
def test_category_to_slug(category, slug):
    assert category_to_slug(category) == slug


def test_ordered_categories_follow_curated_order_and_drop_unknown():
    seen = {"Business & Operations", "Web Hosting", "Design & Creative"}
    assert ordered_categories(seen) == ["Design & Creative", "Business & Operations"]


def test_ordered_categories_custom_order():
    assert ordered_categories(["b", "a", "c"], order=["c", "a"]) == ["c", "a"]


def test_merge_categories_preserves_first_seen_order():
    existing = ["B", "A"]
    assert merge_categories(existing, ["A", "C", "B", "C"]) == ["B", "A", "C"]


def test_reserved_sections():
    assert is_reserved_section("## Contents")
    assert is_reserved_section("## Eligibility requirements")
    assert not is_reserved_section("## " + CATEGORY_ORDER[0])
