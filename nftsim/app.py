"""The interactive terminal session of the market."""

from __future__ import annotations

import argparse
import itertools
import random
import sys
from datetime import date
from typing import TextIO

from .market import Market
from .mathutil import int_div_ceil
from .models import Nft, SortStatus, User
from .render import (
    ID_OUT_OF_RANGE,
    ID_PROMPT,
    INVALID_NAME,
    NAME_PROMPT,
    OPTION_NOT_EXIST,
    PROMPT,
    USERNAME_PROMPT,
    balance_line,
    clear_screen,
    logo,
    main_menu,
    market_menu,
    market_table,
    not_found,
    quit_message,
)
from .scanner import read_sentence

ENTRIES_PER_PAGE = 15
STARTING_BALANCE = 10.0

_MENU1_SORTS = {6: SortStatus.ID_ASC, 7: SortStatus.ID_DESC, 8: SortStatus.PRICE_ASC}
_MENU2_SORTS = {
    1: SortStatus.PRICE_DESC,
    2: SortStatus.DATE_ASC,
    3: SortStatus.DATE_DESC,
    4: SortStatus.ROYALTY_ASC,
    5: SortStatus.ROYALTY_DESC,
}


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class App:
    """A market session reading commands from one stream and writing screens to another."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
        today: date | None = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._lines = iter(self._in)
        self._rng = rng if rng is not None else random.Random()
        self._today = today
        self.user = User()
        self.market: Market | None = None

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        try:
            return next(self._lines).rstrip("\r\n")
        except StopIteration:
            raise EOFError("input ended") from None

    def _read_option(self) -> int | None:
        self._write(PROMPT)
        return _parse_int(self._read_line())

    def run(self) -> None:
        """Ask for a name, build the market and serve menus until the user leaves."""
        try:
            self._welcome()
            self.market = Market.generate(self._rng, self._today)
            self.user.balance_eth = STARTING_BALANCE
            self._write(clear_screen())
            self._main_loop()
        except EOFError:
            self._write("\n")

    def _welcome(self) -> None:
        self._write(clear_screen())
        while True:
            self._write(logo())
            self._write(USERNAME_PROMPT)
            name = self._read_line().strip()
            if 0 < len(name) < 11:
                self.user.name = name
                return
            self._write(clear_screen())
            self._write(INVALID_NAME)

    def _main_loop(self) -> None:
        while True:
            self._write(f"Welcome, {self.user.name}!\n")
            self._write(main_menu())
            option = self._read_option()
            if option == 0:
                self._write(clear_screen())
                self._write(quit_message())
                return
            if option == 1:
                self._write(clear_screen())
                if not self._browse():
                    return
            elif option == 2:
                # The portfolio screen has no content; the session ends here.
                return
            else:
                self._write(clear_screen())
                self._write(OPTION_NOT_EXIST)

    def _browse(self) -> bool:
        """Run the market screens; True when the user goes back to the main menu."""
        assert self.market is not None
        view: list[Nft] | None = None
        page, menu = 1, 1
        while True:
            items = self.market.items if view is None else view
            max_page = int_div_ceil(len(items), ENTRIES_PER_PAGE)
            self._write(balance_line(self.user.balance_eth))
            self._write(market_table(items, page, ENTRIES_PER_PAGE, max_page))
            self._write(market_menu(menu))
            option = self._read_option()

            if option == 0:
                self._write(clear_screen())
                return True

            if menu == 1:
                if option == 1:
                    pass
                elif option == 2:
                    page = min(page + 1, max(max_page, 1))
                elif option == 3:
                    page = max(page - 1, 1)
                elif option == 4:
                    page = 1
                elif option == 5:
                    page = max(max_page, 1)
                elif option in _MENU1_SORTS:
                    self.market.sort(_MENU1_SORTS[option])
                elif option == 9:
                    menu = 2
                else:
                    self._write(clear_screen())
                    self._write(OPTION_NOT_EXIST)
                    continue
            elif menu == 2:
                if option in _MENU2_SORTS:
                    self.market.sort(_MENU2_SORTS[option])
                elif option in (6, 7):
                    found = self._search_id() if option == 6 else self._search_name()
                    if found is not None:
                        view, page = [found], 1
                elif option == 8:
                    menu = 3
                elif option == 9:
                    menu = 1
                else:
                    self._write(clear_screen())
                    self._write(OPTION_NOT_EXIST)
                    continue
            else:
                if option == 9:
                    menu = 2
                else:
                    self._write(clear_screen())
                    self._write(OPTION_NOT_EXIST)
                    continue
            self._write(clear_screen())

    def _search_id(self) -> Nft | None:
        assert self.market is not None
        self._write(clear_screen())
        while True:
            self._write(ID_PROMPT)
            target = _parse_int(self._read_line())
            if target is not None and -1 <= target < 1000 and target != 0:
                break
            self._write(clear_screen())
            self._write(ID_OUT_OF_RANGE)
        if target == -1:
            return None
        nft = self.market.find_id(target)
        if nft is None:
            self._write(not_found("ID"))
        return nft

    def _search_name(self) -> Nft | None:
        assert self.market is not None
        self._write(clear_screen())
        self._write(NAME_PROMPT)
        line = self._read_line()
        if line.strip() == "-1":
            return None
        name = read_sentence(itertools.chain([line], self._lines))[:-1]
        nft = self.market.find_name(name)
        if nft is None:
            self._write(not_found("Name"))
        return nft


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nftsim", description="NFT trading market simulator.")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible market")
    args = parser.parse_args(argv)
    App(rng=random.Random(args.seed)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())