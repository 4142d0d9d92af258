"""
Tests for the chunk splitter.
"""

from langchain_core.documents import Document

from ytnotes.core.splitter import split_documents
from ytnotes.models.schemas import SummaryConfig


def make_transcript(count=300):
    words = [f"w{i:04d}" for i in range(count)]
    return words, [Document(page_content=" ".join(words), metadata={"source": "abc123", "title": "T"})]


def test_chunks_are_bounded():
    _, docs = make_transcript()

    chunks = split_documents(docs)

    assert len(chunks) > 1
    assert all(len(chunk.page_content) <= 500 for chunk in chunks)


def test_consecutive_chunks_overlap():
    _, docs = make_transcript()

    chunks = split_documents(docs)

    for prev, nxt in zip(chunks, chunks[1:]):
        prev_words = prev.page_content.split()
        nxt_words = nxt.page_content.split()
        shared = [w for w in nxt_words if w in set(prev_words)]
        overlap = " ".join(shared)

        assert shared
        assert prev_words[-len(shared):] == shared
        assert nxt_words[:len(shared)] == shared
        assert len(overlap) <= 50


def test_chunks_keep_original_order():
    words, docs = make_transcript()

    chunks = split_documents(docs)

    seen = []
    for chunk in chunks:
        for word in chunk.page_content.split():
            if word not in seen:
                seen.append(word)
    assert seen == words


def test_metadata_is_kept():
    _, docs = make_transcript()

    chunks = split_documents(docs)

    assert all(chunk.metadata["title"] == "T" for chunk in chunks)


def test_segment_order_across_documents():
    docs = [Document(page_content=f"segment {i}") for i in range(5)]

    chunks = split_documents(docs, SummaryConfig(chunk_size=500, chunk_overlap=50))

    assert [c.page_content for c in chunks] == [f"segment {i}" for i in range(5)]
