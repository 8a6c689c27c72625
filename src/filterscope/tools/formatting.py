"""Text rendering of roots and axis values."""

from __future__ import annotations

from typing import Iterable


def format_root(root: complex) -> str:
    return f"{root.real:+.6f} {root.imag:+.6f}j"


def format_roots(roots: Iterable[complex] | None) -> str:
    """One root per line, or ``(none)`` when there are no roots."""
    lines = [format_root(complex(r)) for r in (roots if roots is not None else ())]
    return "\n".join(lines) if lines else "(none)"


def fmt_tick(v: float) -> str:
    """Compact tick label: scientific for tiny/huge values, fixed otherwise."""
    av = abs(v)
    if (0.0 < av < 0.01) or av >= 10_000.0:
        return f"{v:.2e}"
    if av >= 100.0:
        return f"{v:.0f}"
    if av >= 10.0:
        return f"{v:.1f}"
    return f"{v:.2f}"
