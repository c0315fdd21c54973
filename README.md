# nftsim

A small terminal game that simulates browsing an NFT marketplace. Each time it starts, it
generates a market of 1024 NFTs at random. Every NFT has an ID, a unique name, a creator,
an owner, a blockchain, a price in ETH, a creation date and a royalty rate. You start with
a balance of 10 ETH.

## Installation

```
pip install .
```

## Running

```
nftsim
nftsim --seed 42
```

`--seed` makes the generated market the same on every run.

You are first asked for a username of 1 to 10 characters. The main menu offers:

- `1` browse the market
- `2` view your portfolio
- `0` exit

Inside the market, options are spread over three menus. You can:

- page through the listing, 15 entries per page (refresh, next, previous, first, last)
- sort by ID, price, creation date or royalty, ascending or descending
- search by ID between 1 and 999 (enter `-1` to cancel)
- search by exact NFT name; end the name with a `.` (enter `-1` to cancel)
- move between the menus with "Next Option" and "Previous Option"

Options are chosen by number; in the market menus `0` goes back to the main menu.
If input runs out, the session ends.

## Using it as a library

The building blocks can be imported directly:

```python
import random
from nftsim.market import Market
from nftsim.models import SortStatus

market = Market.generate(random.Random(42))
market.sort(SortStatus.PRICE_DESC)
print(market.find_id(17))
bought = market.buy(17)
print(market.owned)
```

Also available:

- `nftsim.models`: the `Nft` record, the `SortStatus` enum and the `User` record
- `nftsim.sorting`: stable in-place sorts by ID, price, date and royalty
- `nftsim.search`: binary and linear search by ID, and search by name
- `nftsim.hashset`: `NameTable`, a fixed-size set of names with linear probing
- `nftsim.scanner`: `read_sentence`, which joins words up to one ending with `.`
- `nftsim.mathutil`: ceiling division, two-decimal truncation and the current date
- `nftsim.render`: the text screens of the game, returned as strings

## What it does not do

- The portfolio option has no screen: choosing it ends the session.
- The third market menu lists purchasing and filtering by blockchain, creator, release
  year or owner, but only "Previous Option" and "Back" work there. Purchases are
  available only through `Market.buy` when used as a library, and the balance never
  changes.
- Nothing is saved between runs.

## Tests

```
pip install .[test]
pytest
```