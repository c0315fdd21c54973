"""Stable in-place orderings of market item lists."""

from __future__ import annotations

from .models import Nft


def sort_by_id(items: list[Nft], descending: bool = False) -> None:
    items.sort(key=lambda nft: nft.id, reverse=descending)


def sort_by_price(items: list[Nft], descending: bool = False) -> None:
    items.sort(key=lambda nft: nft.price_eth, reverse=descending)


def sort_by_date(items: list[Nft], descending: bool = False) -> None:
    items.sort(key=lambda nft: nft.created_date, reverse=descending)


def sort_by_royalty(items: list[Nft], descending: bool = False) -> None:
    items.sort(key=lambda nft: nft.royalty, reverse=descending)