"""similarity-tool — Visual similarity checks between a rendered image and a reference.

Usage: uv run similarity-tool <technique> <tmp_dir> <actual> <expected> [options]

Techniques are auto-discovered from similarity_checker/techniques/.
Each technique module's docstring is its documentation.
Run `similarity-tool help <technique>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, similarity-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

Exit status is 1 when any technique records a failure.
"""

import argparse
import importlib
import logging
import os
import sys

from PIL import Image

from similarity_checker import registry
from similarity_checker.core.assertions import DEFAULT_THRESHOLD
from similarity_checker.core.channels import image_size
from similarity_checker.core.env import env_float, load_env
from similarity_checker.core.errors import InvalidArgument, SimilarityError
from similarity_checker.core.report import format_json, format_text
from similarity_checker.core.types import Report


def _load_technique_module(name: str) -> object:
    """Load the raw module for a technique (for docstring access)."""
    return importlib.import_module(f'similarity_checker.techniques.{name}')


def _short_help(name: str, default: str) -> str:
    doc = (_load_technique_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else default


def _build_parser() -> argparse.ArgumentParser:
    techniques = registry.all_techniques()

    epilog = (
        'Examples:\n'
        '  similarity-tool similarity ./tmp actual.png expected.png\n'
        '  similarity-tool similarity ./tmp actual.png expected.png --threshold 0.95\n'
        '  similarity-tool all ./tmp actual.png expected.png --json\n'
        '  similarity-tool diff ./tmp actual.png expected.png\n'
        '  similarity-tool help similarity\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        f'  SIMILARITY_THRESHOLD    default threshold (default {DEFAULT_THRESHOLD})\n'
        '  SIMILARITY_MAX_WORKERS  worker pool size (default 6)\n'
    )
    parser = argparse.ArgumentParser(
        prog='similarity-tool',
        description='Visual similarity checks between a rendered image and a reference.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='technique', help='Technique to run')

    for name, tech in sorted(techniques.items()):
        p = sub.add_parser(name, help=_short_help(name, tech.help))
        p.add_argument('tmp_dir', help='Working directory for artefacts')
        p.add_argument('actual', help='Path to the rendered image')
        p.add_argument('expected', help='Path to the reference image')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-t',
            '--threshold',
            type=float,
            default=None,
            metavar='T',
            help='Minimum similarity in [-1, 1] (default: $SIMILARITY_THRESHOLD or 0.99)',
        )
        p.add_argument('-v', '--verbose', action='store_true', help='Debug logging from the library')

    help_parser = sub.add_parser('help', help='Print full docs for a technique')
    help_parser.add_argument('command', nargs='?', help='Technique name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a technique."""
    techniques = registry.all_techniques()

    if command is None:
        print('Available techniques:\n')
        for name, tech in sorted(techniques.items()):
            print(f'  {name:<14} {_short_help(name, tech.help)}')
        print('\nRun: similarity-tool help <technique> for full docs.')
        return

    if command not in techniques:
        print(f'Unknown technique: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(techniques))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_technique_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _load_image(path: str) -> Image.Image:
    if not os.path.isfile(path):
        print(f'Error: image not found: {path}', file=sys.stderr)
        sys.exit(1)
    return Image.open(path).convert('RGBA')


def _resolve_threshold(args: argparse.Namespace) -> float:
    threshold = args.threshold
    if threshold is None:
        threshold = env_float('SIMILARITY_THRESHOLD', DEFAULT_THRESHOLD)
    if not -1.0 <= threshold <= 1.0:
        raise InvalidArgument(threshold)
    return threshold


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'similarity-tool: loaded {env_path}', file=sys.stderr)

    if not args.technique:
        parser.print_help()
        sys.exit(1)

    if args.technique == 'help':
        _print_help(args.command)
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    actual = _load_image(args.actual)
    expected = _load_image(args.expected)

    try:
        args.threshold = _resolve_threshold(args)
        report = Report(
            actual_path=args.actual,
            expected_path=args.expected,
            actual_size=image_size(actual),
            expected_size=image_size(expected),
            threshold=args.threshold,
        )
        registry.get(args.technique).execute(actual, expected, report, args)
    except (SimilarityError, ValueError) as exc:
        print(f'similarity-tool: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate — must happen after output so report is visible even on failure
    if report.failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
