"""Plain-text rendering of a ScoreResult: strength bar, label and checklist."""

from __future__ import annotations

from src.scorer import MAX_SCORE, ScoreResult

_FILLED = "#"
_EMPTY = "."
_MET = "[x]"
_UNMET = "[ ]"


def render_bar(result: ScoreResult, width: int = 30) -> str:
    """Render the score as a fixed-width bar, e.g. ``[#######.......]``."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    filled = round(result.fill * width)
    return "[" + _FILLED * filled + _EMPTY * (width - filled) + "]"


def render_checklist(result: ScoreResult) -> list[str]:
    """One line per criterion, in declaration order."""
    return [f"{_MET if c.satisfied else _UNMET} {c.description or c.name}" for c in result.criteria]


def render_report(result: ScoreResult, width: int = 30) -> str:
    """Full text report: bar with score, feedback label, then the checklist."""
    lines = [
        f"{render_bar(result, width)} {result.score}/{MAX_SCORE}",
        result.label,
        "",
        *render_checklist(result),
    ]
    return "\n".join(lines)
