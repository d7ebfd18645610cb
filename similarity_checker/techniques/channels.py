"""Per-channel statistics for both images.

For each of alpha, red, green and blue reports mean, standard deviation,
min and max, and whether the channel is constant. A constant channel has
zero variance, so its correlation falls back to 1.0 (identical) or 0.0.

Example:
    uv run similarity-tool channels ./tmp actual.png expected.png --json
"""

import numpy as np
from PIL import Image

from similarity_checker.core.channels import extract_channels
from similarity_checker.core.types import CHANNELS, Report, Technique

technique = Technique(
    name='channels',
    help='Mean, std, min, max per ARGB channel. Flags constant (zero-variance) channels.',
)


def _stats(buf: np.ndarray) -> dict:
    lo, hi = int(buf.min()), int(buf.max())
    return {
        'mean': round(float(buf.mean()), 3),
        'std': round(float(buf.std()), 3),
        'min': lo,
        'max': hi,
        'constant': lo == hi,
    }


@technique.run
def run(actual: Image.Image, expected: Image.Image, report: Report, args) -> None:
    data = {}
    for side, image in (('actual', actual), ('expected', expected)):
        channels = extract_channels(image)
        data[side] = {name: _stats(channels.get(name)) for name in CHANNELS}
    report.add('channels', data)
