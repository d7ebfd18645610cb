"""Report builder — text and JSON output for similarity-tool results."""

import json
import os
from typing import Any

from similarity_checker.core.types import CHANNELS, Report


def _dim(size: tuple[int, int]) -> str:
    return f'{size[0]}×{size[1]}'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [
        f'similarity-tool: {os.path.basename(report.actual_path)} ({_dim(report.actual_size)})'
        f' vs {os.path.basename(report.expected_path)} ({_dim(report.expected_size)})',
        '',
    ]

    for tech_name, tech_data in report.techniques.items():
        lines.append(f'── {tech_name}')
        if 'error' in tech_data:
            lines.append(f'  error: {tech_data["error"]}')
        elif tech_name == 'similarity':
            for name in CHANNELS:
                lines.append(f'  {name:<6} {tech_data["channels"][name]:+.4f}')
            mark = '✓' if tech_data['pass'] else '✗'
            lines.append(f'  score: {tech_data["score"]:+.4f}  threshold: {tech_data["threshold"]}  {mark}')
        elif tech_name == 'channels':
            for side in ('actual', 'expected'):
                parts = []
                for name in CHANNELS:
                    stats = tech_data[side][name]
                    flag = ' const' if stats['constant'] else ''
                    parts.append(f'{name}={stats["mean"]:.1f}±{stats["std"]:.1f}{flag}')
                lines.append(f'  {side:<8} {", ".join(parts)}')
        elif tech_name == 'diff':
            lines.append(f'  diff: {tech_data["mismatch_pct"]:.1f}% mismatch  image: {tech_data["diff_image"]}')
        else:
            for k, v in tech_data.items():
                lines.append(f'  {tech_name}.{k}: {v}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'actual': report.actual_path,
        'expected': report.expected_path,
        'dimensions': {
            'actual': {'width': report.actual_size[0], 'height': report.actual_size[1]},
            'expected': {'width': report.expected_size[0], 'height': report.expected_size[1]},
        },
        'threshold': report.threshold,
        'techniques': report.techniques,
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)
