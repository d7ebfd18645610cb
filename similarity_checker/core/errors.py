"""Exceptions raised by the similarity assertions.

InvalidArgument is a caller bug (bad threshold). SizeMismatch and
SimilarityBelowThreshold are assertion failures, so they subclass
AssertionError and test runners report them as failures, not errors.
"""

from __future__ import annotations


class SimilarityError(Exception):
    """Base class for every error raised by similarity_checker."""


class InvalidArgument(SimilarityError, ValueError):
    """Threshold outside [-1.0, 1.0]."""

    def __init__(self, threshold: float):
        self.threshold = threshold
        super().__init__(f'Invalid threshold: {threshold}')


class SizeMismatch(SimilarityError, AssertionError):
    """The actual and expected images do not share the same (width, height)."""

    def __init__(self, actual_size: tuple[int, int], expected_size: tuple[int, int]):
        self.actual_size = actual_size
        self.expected_size = expected_size
        super().__init__(
            f'The actual image ({actual_size[0]}, {actual_size[1]}) is not the same size as the '
            f'expected image ({expected_size[0]}, {expected_size[1]}).'
        )


class SimilarityBelowThreshold(SimilarityError, AssertionError):
    """Similarity score is lower than the requested threshold."""

    def __init__(self, score: float, threshold: float):
        self.score = score
        self.threshold = threshold
        super().__init__(f'The images are not visually similar. Expected: {threshold}; Actual: {score}.')
