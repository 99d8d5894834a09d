"""
Character-level diff between the formatted notes and their revision.

Alignment uses Myers' O(ND) shortest edit script, so the unchanged text
is always a longest common subsequence of the two strings.
"""

import sys
from typing import Dict, Iterable, List, Tuple

from slidenotes.models import DiffKind, DiffSegment


def _common_prefix(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _common_suffix(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[-1 - i] == b[-1 - i]:
        i += 1
    return i


def _shortest_edit(a: str, b: str) -> List[Tuple[DiffKind, str]]:
    """
    Per-character edit script from `a` to `b` with the fewest insertions
    and removals. Removals come before insertions where both are possible.
    """
    n, m = len(a), len(b)
    v: Dict[int, int] = {1: 0}  # diagonal k -> furthest x
    trace: List[Dict[int, int]] = []

    for d in range(n + m + 1):
        trace.append(v.copy())
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[k - 1] < v[k + 1]):
                x = v[k + 1]
            else:
                x = v[k - 1] + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                return _backtrack(a, b, trace)

    return []


def _backtrack(a: str, b: str, trace: List[Dict[int, int]]) -> List[Tuple[DiffKind, str]]:
    x, y = len(a), len(b)
    ops: List[Tuple[DiffKind, str]] = []

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[k - 1] < v[k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[prev_k]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            ops.append((DiffKind.UNCHANGED, a[x - 1]))
            x -= 1
            y -= 1
        if d > 0:
            if x == prev_x:
                ops.append((DiffKind.INSERTED, b[y - 1]))
            else:
                ops.append((DiffKind.REMOVED, a[x - 1]))
        x, y = prev_x, prev_y

    ops.reverse()
    return ops


def diff_text(original: str, revised: str) -> List[DiffSegment]:
    """
    Align two strings character by character.

    Adjacent runs of the same kind are merged, so no two neighbouring
    segments share a kind and no segment is empty.
    """
    head = _common_prefix(original, revised)
    tail = _common_suffix(original[head:], revised[head:])
    middle_a = original[head:len(original) - tail]
    middle_b = revised[head:len(revised) - tail]

    ops: List[Tuple[DiffKind, str]] = []
    if head:
        ops.append((DiffKind.UNCHANGED, original[:head]))
    ops.extend(_shortest_edit(middle_a, middle_b))
    if tail:
        ops.append((DiffKind.UNCHANGED, original[len(original) - tail:]))

    runs: List[List] = []  # [kind, text] pairs, merged as they come
    for kind, text in ops:
        if runs and runs[-1][0] == kind:
            runs[-1][1] += text
        else:
            runs.append([kind, text])

    return [DiffSegment(kind=kind, text=text) for kind, text in runs]


def reconstruct(segments: Iterable[DiffSegment], side: str) -> str:
    """
    Rebuild one side of a diff.

    Args:
        segments: Output of `diff_text`
        side: "original" or "revised"
    """
    if side == "original":
        skip = DiffKind.INSERTED
    elif side == "revised":
        skip = DiffKind.REMOVED
    else:
        raise ValueError(f"Unknown side: {side}")
    return "".join(seg.text for seg in segments if seg.kind != skip)


def diff_stats(segments: Iterable[DiffSegment]) -> Dict[str, int]:
    """Character counts per kind."""
    stats = {kind.value: 0 for kind in DiffKind}
    for seg in segments:
        stats[seg.kind.value] += len(seg.text)
    return stats


def render_terminal(segments: Iterable[DiffSegment], color: bool = True) -> str:
    """Render a diff for the terminal, using ANSI colors or [-..-]{+..+} markers."""
    out = []
    for seg in segments:
        if seg.kind == DiffKind.UNCHANGED:
            out.append(seg.text)
        elif seg.kind == DiffKind.INSERTED:
            out.append(f"\033[32m{seg.text}\033[0m" if color else f"{{+{seg.text}+}}")
        else:
            out.append(f"\033[31m{seg.text}\033[0m" if color else f"[-{seg.text}-]")
    return "".join(out)


def log_stats(segments: List[DiffSegment]) -> None:
    stats = diff_stats(segments)
    print(
        f"[Diff] {len(segments)} segment(s): "
        f"+{stats['inserted']} -{stats['removed']} ={stats['unchanged']}",
        file=sys.stderr,
    )
