"""Core market records, sort states and the name pools used to build a market."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime

MAX_ITEMS = 1024
DATE_FORMAT = "%d-%m-%Y"


@dataclass(frozen=True)
class Nft:
    """A single token listed on the market."""

    id: int
    name: str
    creator: str
    owner: str
    blockchain: str
    price_eth: float
    created_at: str
    royalty: float

    @property
    def created_date(self) -> date:
        """The creation date parsed from its day-month-year text."""
        return datetime.strptime(self.created_at, DATE_FORMAT).date()


class SortStatus(enum.IntEnum):
    """The order the market list is currently in."""

    UNSORTED = 0
    ID_ASC = 1
    ID_DESC = 2
    PRICE_ASC = 3
    PRICE_DESC = 4
    DATE_ASC = 5
    DATE_DESC = 6
    ROYALTY_ASC = 7
    ROYALTY_DESC = 8

    @property
    def field(self) -> str | None:
        """Name of the attribute the list is ordered by, or None if unsorted."""
        if self is SortStatus.UNSORTED:
            return None
        return _SORT_FIELDS[(self.value - 1) // 2]

    @property
    def descending(self) -> bool:
        return self is not SortStatus.UNSORTED and self.value % 2 == 0


_SORT_FIELDS = ("id", "price", "date", "royalty")


@dataclass
class User:
    """The person trading on the market."""

    name: str = ""
    balance_eth: float = 0.0


def _pool(text: str) -> tuple[str, ...]:
    """One entry per non-blank line of a text block."""
    return tuple(line.strip() for line in text.splitlines() if line.strip())


BLOCKCHAINS = _pool(
    """
    Ethereum
    Polygon
    Solana
    BSC
    Avalanche
    Fantom
    Tezos
    Near
    Arbitrum
    Optimism
    """
)

NFT_NAMES = _pool(
    """
    Meta Relic
    Ethereal Bloom
    Void Runner
    Pixel Propher
    Celestial Spark
    Chain Phantom
    Arcane Ember
    Quantum Fang
    Nova Shard
    Starlight Rune
    Blade of Echoes
    Aether Prism
    Neon Dagger
    Solar Grimoire
    Obsidian Warden
    Spectral Helm
    Drift Core
    Cosmic Elixir
    Phantom Medallion
    Crimson Module
    Radiant Flux
    Stormforged Coin
    Pulse Saber
    Warp Totem
    Shattered Glyph
    Graviton Claw
    Frostfire Bloom
    Mirage Chip
    Ancient Sparkstone
    Twilight Reactor
    Netherstone Ring
    Temporal Blade
    Lumina Relic
    Echo Core
    Runebound Pendant
    Starforged Mirror
    Cyber Antler
    Dream Circuit
    Token Whisper
    Lunar Amulet
    Bio Synth
    Prism Pulse
    Hallowed Byte
    Phantom Badge
    Shimmer Chip
    Darklight Crest
    Genesis Mask
    Chainbound Ring
    Flare Tesseract
    Dusk Saber
    Solaris Gem
    Reactor Bloom
    Vortex Crown
    Nova Pendant
    Sparkshade
    Shadow Bit
    Dimensional Core
    Crypto Fang
    Chrono Medallion
    Pixel Ghoul
    Neon Ember
    Ether Idol
    Twilight Blade
    Vault Crystal
    Glitch Ember
    Echo Nova
    Fusion Crest
    Eclipse Rune
    Fractal Warden
    Warp Spark
    Null Beacon
    Arc Drift
    Chain Wisp
    Oblivion Chip
    Meta Halo
    Glimmer Core
    Xeno Prism
    Dust Circuit
    Rune Flare
    Solar Pulse
    Data Shard
    Spectrum Relic
    Pulse Totem
    Zephyr Node
    Fragment Token
    Phantom Totem
    Pixel Rune
    Spirit Code
    Quantum Halo
    Dreamflame Ring
    Lucid Mask
    Shroud Chip
    Token Bloom
    Stellar Crest
    Crypto Ember
    Starlit Module
    Chain Halo
    Nova Byte
    Neon Whisper
    Echo Tether
    """
)

CREATORS = _pool(
    """
    LarvaLabs
    YugaLabs
    ArtBlocks
    OpenSea
    Manifold
    Zora
    Rarible
    Foundation
    Valve
    Nintendo
    FromSoft
    CDProjekt
    EpicGames
    Ubisoft
    Bungie
    Rockstar
    NaughtyDog
    Bethesda
    SuperRare
    NiftyGate
    """
)

OWNERS = _pool(
    """
    William H.
    Emily B.
    Charles D.
    Grace L.
    Henry M.
    Alice T.
    Thomas W.
    Zayd A.
    Layla S.
    Omar K.
    Amina Z.
    Yusuf R.
    Hana J.
    Elowen F.
    Kaelthor V.
    Nymeria N.
    Thalor Q.
    Seraphina Y.
    Draven C.
    Aeloria E.
    Khalid N.
    Salma R.
    Faris H.
    Noor M.
    Tariq B.
    Maya L.
    Rami S.
    Lina K.
    Jamal D.
    Iman F.
    Samir A.
    Dana Y.
    Zain T.
    Rania W.
    Bilal J.
    Nadia Z.
    Hassan O.
    Amira E.
    Adil Q.
    Fatima C.
    """
)