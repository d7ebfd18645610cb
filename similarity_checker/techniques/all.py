"""Run every technique, combine into a single report.

Runs: channels, diff, similarity.

Example:
    uv run similarity-tool all ./tmp actual.png expected.png
    uv run similarity-tool all ./tmp actual.png expected.png --json
"""

from PIL import Image

from similarity_checker.core.types import Report, Technique

technique = Technique(
    name='all',
    help='Run every technique (channels, diff, similarity). Combine into a single report.',
)

SKIP = {'all'}


@technique.run
def run(actual: Image.Image, expected: Image.Image, report: Report, args) -> None:
    from similarity_checker.registry import all_techniques

    for name, tech in sorted(all_techniques().items()):
        if name in SKIP:
            continue
        tech.execute(actual, expected, report, args)
