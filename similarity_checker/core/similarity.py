"""Similarity aggregation — four channel correlations on a shared thread pool.

Extraction of both images runs as two tasks, then the four channel pairs are
correlated as four tasks. The score is the minimum of the four: one badly
mismatched channel (e.g. alpha) fails the whole comparison.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor

from PIL import Image

from similarity_checker.core.channels import extract_channels
from similarity_checker.core.correlation import cross_correlation
from similarity_checker.core.env import env_int
from similarity_checker.core.types import CHANNELS

log = logging.getLogger(__name__)

# 2 extraction tasks + 4 correlation tasks per comparison
DEFAULT_MAX_WORKERS = 6

_pool: ThreadPoolExecutor | None = None
_pool_lock = threading.Lock()


def shared_pool() -> ThreadPoolExecutor:
    """Return the process-wide worker pool, creating it on first use."""
    global _pool
    with _pool_lock:
        if _pool is None:
            workers = env_int('SIMILARITY_MAX_WORKERS', DEFAULT_MAX_WORKERS)
            if workers < 1:
                raise ValueError(f'SIMILARITY_MAX_WORKERS must be >= 1, got {workers}')
            log.debug('creating similarity pool with %d workers', workers)
            _pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='similarity')
        return _pool


def channel_scores(
    actual: Image.Image,
    expected: Image.Image,
    executor: Executor | None = None,
) -> dict[str, float]:
    """Correlate each channel of actual against expected, keyed by channel name."""
    pool = executor or shared_pool()

    # Extraction is joined before correlation is queued; pool tasks never wait on each other.
    actual_future = pool.submit(extract_channels, actual)
    expected_future = pool.submit(extract_channels, expected)
    actual_channels = actual_future.result()
    expected_channels = expected_future.result()

    futures = {
        name: pool.submit(cross_correlation, actual_channels.get(name), expected_channels.get(name))
        for name in CHANNELS
    }
    scores = {name: future.result() for name, future in futures.items()}
    log.debug('channel scores: %s', scores)
    return scores


def compute_similarity(
    actual: Image.Image,
    expected: Image.Image,
    executor: Executor | None = None,
) -> float:
    """Return the worst channel correlation, in [-1.0, 1.0]."""
    return min(channel_scores(actual, expected, executor).values())
