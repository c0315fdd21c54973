"""Terminal NFT marketplace simulator: market generation, sorting, search and text screens."""

__version__ = "0.1.0"