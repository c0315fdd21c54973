import pytest

from nftsim.models import Nft
from nftsim.search import bsearch_id_asc, bsearch_id_desc, find_by_id, find_by_name


def make_nft(nft_id):
    return Nft(nft_id, f"Echo Core #{1000 + nft_id}", "Zora", "Emily B.", "Tezos", 1.0, "01-01-2024", 0.1)


@pytest.fixture
def ascending():
    return [make_nft(i) for i in range(1, 21)]


@pytest.fixture
def descending():
    return [make_nft(i) for i in range(20, 0, -1)]


def test_bsearch_asc_finds_every_id(ascending):
    for nft in ascending:
        idx = bsearch_id_asc(ascending, nft.id)
        assert ascending[idx].id == nft.id


def test_bsearch_asc_missing(ascending):
    assert bsearch_id_asc(ascending, 0) is None
    assert bsearch_id_asc(ascending, 21) is None
    assert bsearch_id_asc([], 1) is None


def test_bsearch_desc_finds_every_id(descending):
    for nft in descending:
        idx = bsearch_id_desc(descending, nft.id)
        assert descending[idx].id == nft.id


def test_bsearch_desc_missing(descending):
    assert bsearch_id_desc(descending, 99) is None
    assert bsearch_id_desc(descending, 0) is None


def test_linear_search_unsorted():
    items = [make_nft(i) for i in (7, 3, 11, 5)]
    assert find_by_id(items, 11) == 2
    assert find_by_id(items, 4) is None


def test_linear_search_returns_first_match():
    items = [make_nft(3), make_nft(3)]
    assert find_by_id(items, 3) == 0


def test_find_by_name(ascending):
    target = ascending[4].name
    assert find_by_name(ascending, target) == 4
    assert find_by_name(ascending, target + ".") is None