"""Reusable Annotated field type aliases for service models.

Field-level semantics live here so the models in `models.py` stay short and
other tooling (CLI helpers, checks) can reuse the same constraints.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

Name = Annotated[
    str,
    Field(
        min_length=1,
        description="Unique service name; also the entry's display title.",
        examples=["Google for Nonprofits", "Canva"],
    ),
]

# Links are carried through verbatim; well-formedness is not checked.
Url = Annotated[
    str,
    Field(
        min_length=1,
        description="Destination link for the service's nonprofit programme.",
        examples=["https://www.google.com/nonprofits/"],
    ),
]

About = Annotated[
    str | None,
    Field(description="What the service is."),
]

Offer = Annotated[
    str | None,
    Field(description="What is granted to qualifying nonprofits."),
]

Score = Annotated[
    int,
    Field(description="Ordering weight; higher ranks first. No enforced bounds."),
]

Categories = Annotated[
    list[str],
    Field(
        min_length=1,
        description="Ordered category names; the first is the primary category.",
    ),
]

Logo = Annotated[
    str | None,
    Field(description="Public URL of the service logo, when one exists."),
]
