import io

import pytest

from nftsim.scanner import read_sentence


def test_single_word():
    assert read_sentence(["alice."]) == "alice."


def test_joins_words_across_tokens():
    assert read_sentence(["Meta", "Relic", "#1234."]) == "Meta Relic #1234."


def test_accepts_lines():
    stream = io.StringIO("Echo  Core\n#2001. trailing words\n")
    assert read_sentence(stream) == "Echo Core #2001."


def test_stops_at_first_terminated_word():
    words = iter(["one.", "two."])
    assert read_sentence(words) == "one."
    assert next(words) == "two."


def test_blank_tokens_are_skipped():
    assert read_sentence(["", "  ", "bob."]) == "bob."


def test_missing_terminator_raises():
    with pytest.raises(EOFError):
        read_sentence(["no", "period", "here"])