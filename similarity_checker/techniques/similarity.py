"""Per-channel cross-correlation score with a pass/fail verdict.

Correlates the alpha, red, green and blue channels of the actual image
against the expected image and reports each score plus the overall
similarity (the minimum of the four). Passes when the overall score is
>= --threshold (default 0.99, or SIMILARITY_THRESHOLD).

Images of different sizes fail without a score.

Example:
    uv run similarity-tool similarity ./tmp actual.png expected.png
    uv run similarity-tool similarity ./tmp actual.png expected.png --threshold 0.95
"""

from PIL import Image

from similarity_checker.core.assertions import DEFAULT_THRESHOLD
from similarity_checker.core.channels import image_size
from similarity_checker.core.errors import SizeMismatch
from similarity_checker.core.similarity import channel_scores
from similarity_checker.core.types import Report, Technique

technique = Technique(
    name='similarity',
    help='Cross-correlation of ARGB channels. Pass if the worst channel >= threshold.',
)


@technique.run
def run(actual: Image.Image, expected: Image.Image, report: Report, args) -> None:
    threshold = getattr(args, 'threshold', None)
    if threshold is None:
        threshold = DEFAULT_THRESHOLD

    if image_size(actual) != image_size(expected):
        report.add('similarity', {'error': str(SizeMismatch(image_size(actual), image_size(expected))), 'pass': False})
        report.record_fail('similarity')
        return

    scores = channel_scores(actual, expected)
    score = min(scores.values())
    passed = score >= threshold
    report.add(
        'similarity',
        {
            'channels': {name: round(value, 6) for name, value in scores.items()},
            'score': round(score, 6),
            'threshold': threshold,
            'pass': passed,
        },
    )
    if passed:
        report.record_pass('similarity')
    else:
        report.record_fail('similarity')
