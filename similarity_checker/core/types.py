"""Shared types for similarity-tool: ChannelSet, Technique, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from PIL import Image

# Channel order used everywhere: buffers, scores, reports
CHANNELS: tuple[str, ...] = ('alpha', 'red', 'green', 'blue')


@dataclass(frozen=True, eq=False)
class ChannelSet:
    """The four channel buffers of one image, each a read-only 1-D uint8 array (row-major)."""

    alpha: np.ndarray
    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter((self.alpha, self.red, self.green, self.blue))

    def __len__(self) -> int:
        return len(CHANNELS)

    def get(self, name: str) -> np.ndarray:
        """Return the buffer for a channel name from CHANNELS."""
        if name not in CHANNELS:
            raise KeyError(f'Unknown channel: {name}. Available: {", ".join(CHANNELS)}')
        return getattr(self, name)


class Technique:
    """A self-registering analysis technique.

    Usage in a technique module:

        technique = Technique(name='similarity', help='Cross-correlation score')

        @technique.run
        def run(actual, expected, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, actual: Image.Image, expected: Image.Image, report: Report, args: Any) -> None:
        """Execute the technique's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Technique {self.name} has no run function')
        self._run_fn(actual, expected, report, args)


@dataclass
class Report:
    """Accumulates results from techniques for text/JSON output."""

    actual_path: str = ''
    expected_path: str = ''
    actual_size: tuple[int, int] = (0, 0)
    expected_size: tuple[int, int] = (0, 0)
    threshold: float | None = None
    techniques: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, technique_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of a technique."""
        self.techniques[technique_name] = data

    def record_pass(self, technique_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, technique_name: str) -> None:
        self.fail_count += 1

    @property
    def failed(self) -> bool:
        return self.fail_count > 0
