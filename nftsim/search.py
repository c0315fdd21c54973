"""Lookups over lists of market items."""

from __future__ import annotations

from typing import Sequence

from .models import Nft


def bsearch_id_asc(items: Sequence[Nft], target_id: int) -> int | None:
    """Index of the item with the id in a list ordered by ascending id."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        current = items[mid].id
        if current < target_id:
            low = mid + 1
        elif current > target_id:
            high = mid - 1
        else:
            return mid
    return None


def bsearch_id_desc(items: Sequence[Nft], target_id: int) -> int | None:
    """Index of the item with the id in a list ordered by descending id."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        current = items[mid].id
        if current > target_id:
            low = mid + 1
        elif current < target_id:
            high = mid - 1
        else:
            return mid
    return None


def find_by_id(items: Sequence[Nft], target_id: int) -> int | None:
    """Index of the first item with the id, searching in order."""
    return next((i for i, nft in enumerate(items) if nft.id == target_id), None)


def find_by_name(items: Sequence[Nft], name: str) -> int | None:
    """Index of the first item whose name matches exactly."""
    return next((i for i, nft in enumerate(items) if nft.name == name), None)