"""The market list: generation, lookup, ordering and purchases."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, timedelta

from .hashset import NameTable
from .mathutil import truncate_float
from .models import (
    BLOCKCHAINS,
    CREATORS,
    DATE_FORMAT,
    MAX_ITEMS,
    NFT_NAMES,
    OWNERS,
    Nft,
    SortStatus,
)
from .search import bsearch_id_asc, bsearch_id_desc, find_by_id, find_by_name
from .sorting import sort_by_date, sort_by_id, sort_by_price, sort_by_royalty

_SORTERS = {
    "id": sort_by_id,
    "price": sort_by_price,
    "date": sort_by_date,
    "royalty": sort_by_royalty,
}


def unique_name(names: NameTable, rng: random.Random) -> str:
    """Draw 'Name #NNNN' names until one is not in the table, then record it."""
    while True:
        name = f"{rng.choice(NFT_NAMES)} #{rng.randrange(9000) + 1000}"
        if name not in names:
            names.add(name)
            return name


@dataclass
class Market:
    """Items for sale, their current order and what the user has bought."""

    items: list[Nft]
    status: SortStatus = SortStatus.ID_ASC
    owned: list[Nft] = field(default_factory=list)

    @classmethod
    def generate(cls, rng: random.Random | None = None, today: date | None = None) -> "Market":
        """A full market of randomly made items with ids 1 upward."""
        if rng is None:
            rng = random.Random()
        if today is None:
            today = date.today()
        names = NameTable()
        items = []
        for nft_id in range(1, MAX_ITEMS + 1):
            created = today - timedelta(days=rng.randrange(1000))
            items.append(
                Nft(
                    id=nft_id,
                    name=unique_name(names, rng),
                    creator=rng.choice(CREATORS),
                    owner=rng.choice(OWNERS),
                    blockchain=rng.choice(BLOCKCHAINS),
                    price_eth=truncate_float(rng.random() * 10 + 0.1),
                    created_at=created.strftime(DATE_FORMAT),
                    royalty=truncate_float(rng.random() * 0.15),
                )
            )
        return cls(items=items)

    def _locate(self, target_id: int) -> int | None:
        if self.status is SortStatus.ID_ASC:
            return bsearch_id_asc(self.items, target_id)
        if self.status is SortStatus.ID_DESC:
            return bsearch_id_desc(self.items, target_id)
        return find_by_id(self.items, target_id)

    def find_id(self, target_id: int) -> Nft | None:
        """The item with the id, searched the fastest way the current order allows."""
        index = self._locate(target_id)
        return None if index is None else self.items[index]

    def find_name(self, name: str) -> Nft | None:
        index = find_by_name(self.items, name)
        return None if index is None else self.items[index]

    def sort(self, status: SortStatus) -> None:
        """Reorder the items and remember the new order."""
        status = SortStatus(status)
        if status.field is None:
            raise ValueError("cannot sort into the unsorted state")
        _SORTERS[status.field](self.items, descending=status.descending)
        self.status = status

    def buy(self, nft_id: int) -> Nft:
        """Move the item with the id from the market to the user's holdings."""
        index = self._locate(nft_id)
        if index is None:
            raise KeyError(nft_id)
        nft = self.remove(index)
        self.owned.append(nft)
        return nft

    def remove(self, index: int) -> Nft:
        """Take the item at the position out of the market, keeping the order."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"no item at position {index}")
        return self.items.pop(index)