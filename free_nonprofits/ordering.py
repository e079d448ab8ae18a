"""Ordering keys shared by the generator, the parser and the search engine."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from typing import Protocol, TypeVar

DEFAULT_SCORE = 50


class Named(Protocol):
    name: str


class Ranked(Named, Protocol):
    score: int | None


T = TypeVar("T", bound=Named)
R = TypeVar("R", bound=Ranked)


def name_sort_key(name: str) -> tuple[str, str]:
    """Locale-style collation key for a display name.

    Primary order ignores case and accents; ties are broken lowercase-first
    so the ordering is total and independent of the process locale.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.swapcase()


def sorted_by_name(items: Iterable[T]) -> list[T]:
    return sorted(items, key=lambda item: name_sort_key(item.name))


def rank_key(item: Ranked) -> tuple[int, tuple[str, str]]:
    """Score descending, then name ascending."""
    score = DEFAULT_SCORE if item.score is None else item.score
    return -score, name_sort_key(item.name)


def ranked(items: Iterable[R]) -> list[R]:
    return sorted(items, key=rank_key)


__all__ = ["DEFAULT_SCORE", "name_sort_key", "rank_key", "ranked", "sorted_by_name"]
