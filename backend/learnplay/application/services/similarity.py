"""Cosine similarity ranking over chunk embeddings."""

from collections.abc import Sequence

import numpy as np

from learnplay.domain.entities import ScoredChunk

TOP_K = 5
CONTEXT_SEPARATOR = "\n\n---\n\n"
_EPSILON = 1e-8


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product over the product of Euclidean norms.

    The epsilon in the denominator keeps all-zero vectors at 0.0 instead of
    dividing by zero.
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.shape != vb.shape:
        raise ValueError(f"vector length mismatch: {va.shape[0]} != {vb.shape[0]}")

    return float(np.dot(va, vb) / (np.linalg.norm(va) * np.linalg.norm(vb) + _EPSILON))


def rank_chunks(
    query_embedding: Sequence[float],
    embeddings: Sequence[Sequence[float]],
) -> list[ScoredChunk]:
    """Score every chunk against the query and return the best ``TOP_K``.

    The sort is stable, so chunks with equal scores keep their original order.
    """
    if len(embeddings) == 0:
        return []

    query = np.asarray(query_embedding, dtype=np.float64)
    matrix = np.asarray(embeddings, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[1] != query.shape[0]:
        raise ValueError(
            f"embedding shape {matrix.shape} does not match query length {query.shape[0]}"
        )

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    scores = (matrix @ query) / (norms + _EPSILON)

    order = np.argsort(-scores, kind="stable")[:TOP_K]
    return [ScoredChunk(index=int(i), score=float(scores[i])) for i in order]


def build_context(chunks: Sequence[str], ranked: Sequence[ScoredChunk]) -> str:
    """Join the ranked chunks' text in rank order."""
    return CONTEXT_SEPARATOR.join(chunks[s.index] for s in ranked)
