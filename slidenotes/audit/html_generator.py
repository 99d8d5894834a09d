"""
Generate diff HTML reports.

Renders a DiffSegment sequence as a standalone page with inserted text in
green and removed text in red.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from jinja2 import Template

from slidenotes.diff import diff_stats
from slidenotes.models import DiffSegment


class DiffHTMLGenerator:
    """
    Generate HTML diff reports.

    Features:
    - Inline view with insertions and removals highlighted
    - Per-kind character counts
    - Toggle to hide removed text and preview the revision alone
    """

    HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title|e }}</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: #111827;
            color: #d1d5db;
            padding: 20px;
        }

        .header {
            background: #1f2937;
            padding: 20px;
            border-radius: 8px;
            margin-bottom: 20px;
        }

        .header h1 {
            color: #fff;
            margin-bottom: 10px;
        }

        .header .meta {
            color: #9ca3af;
            font-size: 14px;
        }

        .controls {
            background: #1f2937;
            padding: 15px;
            border-radius: 8px;
            margin-bottom: 20px;
        }

        .diff {
            background: #1f2937;
            padding: 20px;
            border-radius: 8px;
            white-space: pre-wrap;
            word-break: break-word;
            font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
            font-size: 14px;
            line-height: 1.6;
        }

        ins {
            background: rgba(34, 197, 94, 0.25);
            color: #86efac;
            text-decoration: none;
        }

        del {
            background: rgba(239, 68, 68, 0.25);
            color: #fca5a5;
        }

        .hide-removed del {
            display: none;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>{{ title|e }}</h1>
        <div class="meta">
            <strong>Segments:</strong> {{ segments|length }} |
            <strong>Inserted:</strong> {{ stats.inserted }} chars |
            <strong>Removed:</strong> {{ stats.removed }} chars |
            <strong>Unchanged:</strong> {{ stats.unchanged }} chars |
            <strong>Created:</strong> {{ created_at }}
        </div>
    </div>

    <div class="controls">
        <label>
            <input type="checkbox" id="toggle-removed" checked onchange="toggleRemoved()">
            Show removed text
        </label>
    </div>

    <div class="diff" id="diff">{% for seg in segments -%}
{%- if seg.kind.value == 'inserted' -%}<ins>{{ seg.text|e }}</ins>
{%- elif seg.kind.value == 'removed' -%}<del>{{ seg.text|e }}</del>
{%- else -%}{{ seg.text|e }}{%- endif -%}
{%- endfor %}</div>

    <script>
        function toggleRemoved() {
            const checkbox = document.getElementById('toggle-removed');
            document.getElementById('diff').classList.toggle('hide-removed', !checkbox.checked);
        }
    </script>
</body>
</html>
"""

    def __init__(self, title: str = "Speaker Notes Revision"):
        self.title = title

    def generate(
        self,
        segments: List[DiffSegment],
        output_path: Optional[Path] = None,
    ) -> str:
        """
        Generate the diff report.

        Args:
            segments: Output of `diff_text`
            output_path: If given, the HTML is also written there

        Returns:
            The HTML document
        """
        print(f"[Audit] Generating HTML diff for {len(segments)} segments", file=sys.stderr)

        template = Template(self.HTML_TEMPLATE)
        html_content = template.render(
            title=self.title,
            segments=segments,
            stats=diff_stats(segments),
            created_at=datetime.now().isoformat(timespec="seconds"),
        )

        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html_content)
            print(f"[Audit] Saved HTML diff to {output_path}", file=sys.stderr)

        return html_content
