"""Pass/fail checks on top of compute_similarity.

Both checks validate the threshold first, then the image sizes, and only then
compute the score. is_similar turns a size mismatch or low score into False;
assert_similar raises SizeMismatch or SimilarityBelowThreshold.
"""

from __future__ import annotations

import logging
import numbers

from PIL import Image

from similarity_checker.core.channels import image_size
from similarity_checker.core.errors import InvalidArgument, SimilarityBelowThreshold, SizeMismatch
from similarity_checker.core.similarity import compute_similarity

log = logging.getLogger(__name__)

# Near-identical, tolerant of anti-aliasing and compression noise
DEFAULT_THRESHOLD = 0.99


def _check_threshold(threshold: float) -> None:
    # NaN fails the range comparison
    if not isinstance(threshold, numbers.Real) or not -1.0 <= threshold <= 1.0:
        raise InvalidArgument(threshold)


def _check_size(actual: Image.Image, expected: Image.Image) -> None:
    actual_size = image_size(actual)
    expected_size = image_size(expected)
    if actual_size != expected_size:
        raise SizeMismatch(actual_size, expected_size)


def is_similar(actual: Image.Image, expected: Image.Image, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Return True if both images are the same size and their similarity is >= threshold."""
    _check_threshold(threshold)
    if image_size(actual) != image_size(expected):
        log.debug('size mismatch: %s vs %s', image_size(actual), image_size(expected))
        return False
    return compute_similarity(actual, expected) >= threshold


def assert_similar(actual: Image.Image, expected: Image.Image, threshold: float = DEFAULT_THRESHOLD) -> None:
    """Assert both images are the same size and their similarity is >= threshold."""
    _check_threshold(threshold)
    _check_size(actual, expected)
    score = compute_similarity(actual, expected)
    if score < threshold:
        raise SimilarityBelowThreshold(score, threshold)
