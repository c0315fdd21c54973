"""Text screens of the market terminal, returned as strings."""

from __future__ import annotations

from typing import Sequence

from .models import Nft

PROMPT = "Choose Option: "
OPTION_NOT_EXIST = "Option does not exist.\n"
INVALID_NAME = "That name is not permitted.\n"
USERNAME_PROMPT = "Enter your username (1-10 characters): "
ID_PROMPT = "Enter nft id or -1 to exit:"
ID_OUT_OF_RANGE = (
    "ID doesn't exist. Choose between 1-1000 or -1 to exit.\n"
    + "-" * 55
    + "\n"
)
NAME_PROMPT = "Enter nft name (you must end it with '.') or -1 to exit:"

_BANNER = "=" * 62
_RULE = "=" * 115
_THIN_RULE = " " + "-" * 113 + " "


def _numbered(labels: Sequence[str], *extra: tuple[int, str]) -> tuple[str, ...]:
    """Menu entries numbered from 1, followed by explicitly numbered ones."""
    entries = [*enumerate(labels, start=1), *extra]
    return tuple(f"{number}. {label}" for number, label in entries)


_BACK = (0, "Back")

_MENUS = {
    1: _numbered(
        (
            "Refresh Page",
            "Next Page",
            "Previous Page",
            "First Page",
            "Last Page",
            "Sort by ID (Ascending)",
            "Sort by ID (Descending)",
            "Sort by Price (Ascending)",
            "Next Option",
        ),
        _BACK,
    ),
    2: _numbered(
        (
            "Sort by Price (Descending)",
            "Sort by Date (Ascending)",
            "Sort by Date (Descending)",
            "Sort by Royalty (Ascending)",
            "Sort by Royalty (Descending)",
            "Search by ID",
            "Search by NFT Name",
            "Next Option",
            "Previous Option",
        ),
        _BACK,
    ),
    3: _numbered(
        (
            "Purchase NFT",
            "Filter by Blockchain Type",
            "Filter by Creator Name",
            "Filter by Release Year",
            "Filter by Owner Name",
            "Show only your NFT",
        ),
        (9, "Previous Option"),
        _BACK,
    ),
}

_HEADER = " | " + " | ".join(
    (
        " ID ",
        "Name".center(24),
        "Creator".center(12),
        "Owner".center(12),
        f"{'Blockchain':<10}",
        f"{'Price ETH':<9}",
        f"{'Created At':<10}",
        f"{'Royalty':<7}",
    )
) + " |"


def clear_screen() -> str:
    """Terminal control sequence that homes the cursor and clears the screen."""
    return "\033[H\033[2J"


def logo() -> str:
    title = "Sagitarius Market - NFT Marketplace"
    return f"{_BANNER}\n{' ' * 13}{title}\n{_BANNER}\n"


def balance_line(balance: float) -> str:
    return f"Balance: {balance:.2f} ETH\n"


def main_menu() -> str:
    entries = _numbered(("Browse Market", "View Your portfolio"), (0, "Exit App"))
    return logo() + "".join(f"{entry}\n" for entry in entries)


def market_menu(number: int) -> str:
    """One of the three market option menus."""
    try:
        lines = _MENUS[number]
    except KeyError:
        raise ValueError(f"no market menu {number}") from None
    return "\n" + "\n".join(lines) + "\n"


def _row(nft: Nft) -> str:
    cells = (
        f"{nft.id:4d}",
        f"{nft.name:<24}",
        f"{nft.creator:<12}",
        f"{nft.owner:<12}",
        f"{nft.blockchain:<10}",
        f"{nft.price_eth:9.2f}",
        f"{nft.created_at:>10}",
        f"{nft.royalty * 100:5.0f} %",
    )
    return " | " + " | ".join(cells) + " |"


def market_table(items: Sequence[Nft], page: int, per_page: int, max_page: int) -> str:
    """The market listing for one page of items."""
    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be positive")
    rows = [_row(nft) for nft in items[(page - 1) * per_page : page * per_page]]
    lines = [_RULE, _HEADER, _THIN_RULE, *rows, _RULE, f"  PAGES {page}/{max_page}", _RULE]
    return "\n".join(lines) + "\n"


def quit_message() -> str:
    return logo() + "Thanks for using our app!\n\n"


def not_found(target: str) -> str:
    return f"{target} not found.\n{'-' * 26}\n"