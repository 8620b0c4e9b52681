# src/e2e/test_scanner_stream.py
import io
import pytest

from wordy.tokenizer import Scanner, iter_words, iter_words_from_text

TEXT = "I love tacos.\nThey're so  yum!\n\n1999 -- ok"
WORDS = ["I", "love", "tacos", "Theyre", "so", "yum", "ok"]


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 4096])
def test_chunk_size_does_not_change_words(chunk_size):
    stream = io.BytesIO(TEXT.encode("utf-8"))
    assert list(iter_words(stream, chunk_size=chunk_size)) == WORDS


def test_multibyte_words_split_across_reads():
    stream = io.BytesIO("café olé".encode("utf-8"))
    assert list(iter_words(stream, chunk_size=1)) == ["café", "olé"]


def test_only_spaces_and_digits_yield_nothing():
    assert list(iter_words_from_text("  \n\t 42 7 ")) == []
    assert list(iter_words_from_text("")) == []


def test_scanner_counts_bytes_and_words():
    data = TEXT.encode("utf-8")
    sc = Scanner(io.BytesIO(data), chunk_size=5)
    assert list(sc) == WORDS
    assert sc.bytes_read == len(data)
    assert sc.words == len(WORDS)


def test_word_longer_than_buffer_cap_raises():
    sc = Scanner(io.BytesIO(b"a" * 100), chunk_size=10, max_token_size=32)
    with pytest.raises(ValueError):
        list(sc)


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        Scanner(io.BytesIO(b""), chunk_size=0)
