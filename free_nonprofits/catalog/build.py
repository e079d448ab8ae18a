"""Registry -> catalog transform.

Every registry record becomes exactly one catalog entry carrying its full
category list. The catalog's category index is restricted to the curated
category order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..categories import CATEGORY_ORDER, ordered_categories
from ..logos import LogoProbe, no_logos
from ..models import Catalog, CatalogService, ServiceRecord, utc_timestamp
from ..ordering import sorted_by_name

logger = logging.getLogger(__name__)


def to_catalog_service(record: ServiceRecord, logo_probe: LogoProbe = no_logos) -> CatalogService:
    service = CatalogService(
        name=record.name,
        url=record.url,
        description=record.offer,
        about=record.about,
        offer=record.offer,
        score=record.score,
        categories=list(record.categories),
    )
    logo = logo_probe(record.name)
    if logo:
        service.logo = logo
    logger.debug("Catalog entry '%s' (logo=%s)", record.name, logo)
    return service


def build_catalog(
    records: Mapping[str, ServiceRecord],
    category_order: Sequence[str] = CATEGORY_ORDER,
    logo_probe: LogoProbe = no_logos,
    timestamp: str | None = None,
) -> Catalog:
    """Flatten ``records`` into the catalog consumed by the browsing page.

    Services are sorted by name. ``categories`` lists the members of
    ``category_order`` referenced by at least one service; entries may still
    carry categories outside that list.
    """
    services = sorted_by_name(to_catalog_service(r, logo_probe) for r in records.values())
    seen = {category for service in services for category in service.categories}
    categories = ordered_categories(seen, category_order)
    unknown = seen.difference(categories)
    if unknown:
        logger.info(
            "Categories referenced by services but not indexed: %s",
            ", ".join(sorted(unknown)),
        )
    return Catalog(
        services=services,
        categories=categories,
        last_updated=timestamp or utc_timestamp(),
    )


__all__ = ["build_catalog", "to_catalog_service"]
