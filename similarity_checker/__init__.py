"""similarity_checker — Visual similarity assertions for rendered images.

Public API:

    from similarity_checker import assert_similar, is_similar

    assert_similar(actual, expected)              # raises on failure
    is_similar(actual, expected, threshold=0.95)  # returns bool
"""

from similarity_checker.core.assertions import DEFAULT_THRESHOLD, assert_similar, is_similar
from similarity_checker.core.errors import InvalidArgument, SimilarityBelowThreshold, SimilarityError, SizeMismatch
from similarity_checker.core.similarity import channel_scores, compute_similarity

__all__ = [
    'DEFAULT_THRESHOLD',
    'InvalidArgument',
    'SimilarityBelowThreshold',
    'SimilarityError',
    'SizeMismatch',
    'assert_similar',
    'channel_scores',
    'compute_similarity',
    'is_similar',
]
