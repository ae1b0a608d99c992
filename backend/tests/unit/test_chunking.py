"""Unit tests for fixed-window chunking."""

import pytest

from learnplay.application.services.chunking import chunk_text


def test_small_window_example():
    """Size 2, no overlap: every two characters become a chunk."""
    assert chunk_text("A. B. C.", chunk_size=2, overlap=0) == ["A.", " B", ". ", "C."]


def test_text_shorter_than_window_is_single_chunk():
    assert chunk_text("hello", chunk_size=100, overlap=10) == ["hello"]


def test_empty_text_yields_no_chunks():
    assert chunk_text("", chunk_size=10, overlap=2) == []


def test_whitespace_only_windows_are_dropped():
    chunks = chunk_text("ab    cd", chunk_size=2, overlap=0)
    assert chunks == ["ab", "cd"]


def test_chunks_are_not_trimmed():
    chunks = chunk_text(" ab ", chunk_size=4, overlap=0)
    assert chunks == [" ab "]


def test_consecutive_chunks_share_overlap():
    text = "The quick brown fox jumps over the lazy dog repeatedly."
    overlap = 4
    chunks = chunk_text(text, chunk_size=12, overlap=overlap)

    assert len(chunks) > 2
    for prev, nxt in zip(chunks, chunks[1:]):
        assert prev[-overlap:] == nxt[:overlap]


def test_all_but_last_chunk_are_full_size():
    text = "abcdefghijklmnopqrstuvwxyz"
    chunks = chunk_text(text, chunk_size=10, overlap=3)

    assert all(len(c) == 10 for c in chunks[:-1])
    assert len(chunks[-1]) <= 10
    assert text.endswith(chunks[-1])


def test_chunks_cover_entire_input():
    text = "Photosynthesis converts light energy into chemical energy."
    overlap = 5
    chunks = chunk_text(text, chunk_size=16, overlap=overlap)

    rebuilt = chunks[0] + "".join(c[overlap:] for c in chunks[1:])
    assert rebuilt == text


def test_no_chunk_is_blank():
    text = "a\n\n\n\n\n\n\n\nb   \t\t\t   c"
    for chunk in chunk_text(text, chunk_size=3, overlap=1):
        assert chunk.strip()


def test_chunking_is_deterministic():
    text = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
    assert chunk_text(text, 7, 2) == chunk_text(text, 7, 2)


@pytest.mark.parametrize(
    "size, overlap",
    [(0, 0), (-5, 0), (5, 5), (5, 9), (5, -1)],
)
def test_invalid_parameters_raise(size, overlap):
    with pytest.raises(ValueError):
        chunk_text("some text", chunk_size=size, overlap=overlap)
