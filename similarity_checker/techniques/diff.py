"""Pixel diff between the actual and expected image.

Computes the largest per-channel absolute difference of every pixel (ARGB)
and counts pixels where it exceeds 20.

Generates a diff image: green = match, red = mismatch.
Saves to <tmp_dir>/diff.png.

Both images must be the same size; nothing is resized.

Example:
    uv run similarity-tool diff ./tmp actual.png expected.png
"""

import os

import numpy as np
from PIL import Image

from similarity_checker.core.channels import image_size
from similarity_checker.core.errors import SizeMismatch
from similarity_checker.core.types import Report, Technique

technique = Technique(
    name='diff',
    help='Pixel-diff actual vs expected. Output mismatch percentage and a diff image.',
)

DIFF_THRESHOLD = 20


@technique.run
def run(actual: Image.Image, expected: Image.Image, report: Report, args) -> None:
    if image_size(actual) != image_size(expected):
        report.add('diff', {'error': str(SizeMismatch(image_size(actual), image_size(expected)))})
        return

    act_arr = np.asarray(actual.convert('RGBA')).astype(int)
    exp_arr = np.asarray(expected.convert('RGBA')).astype(int)
    diffs = np.abs(act_arr - exp_arr).max(axis=-1)
    matches = diffs <= DIFF_THRESHOLD

    h, w = matches.shape
    pixel_count = h * w
    match_count = int(np.sum(matches))

    diff_img = np.zeros((h, w, 3), dtype=np.uint8)
    diff_img[matches] = [0, 200, 0]  # green = match
    diff_img[~matches] = [200, 0, 0]  # red = mismatch

    os.makedirs(args.tmp_dir, exist_ok=True)
    diff_path = os.path.join(args.tmp_dir, 'diff.png')
    Image.fromarray(diff_img).save(diff_path)

    report.add(
        'diff',
        {
            'mismatch_pct': round((1.0 - match_count / max(pixel_count, 1)) * 100, 1),
            'max_delta': int(diffs.max()),
            'diff_image': diff_path,
        },
    )
