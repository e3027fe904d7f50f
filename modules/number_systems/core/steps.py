from __future__ import annotations

from typing import Any, Dict, Iterable, List


HEADER = "header"
BLANK = "blank"
DETAIL = "detail"

DETAIL_INDENT = "   "


def classify_line(line: str) -> str:
    if line.startswith("Step"):
        return HEADER
    if not line.strip():
        return BLANK
    return DETAIL


def group_steps(lines: Iterable[str]) -> List[Dict[str, Any]]:
    """Fold a flat trace into ``{"title", "details"}`` blocks.

    Blank lines close the current block. Details that appear before any
    header (the single-line traces) land in a block whose title is None.
    """
    groups: List[Dict[str, Any]] = []
    current: Dict[str, Any] | None = None
    for line in lines:
        kind = classify_line(line)
        if kind == BLANK:
            current = None
            continue
        if kind == HEADER:
            current = {"title": line, "details": []}
            groups.append(current)
            continue
        if current is None:
            current = {"title": None, "details": []}
            groups.append(current)
        current["details"].append(line.strip())
    return groups
