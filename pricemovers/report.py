"""Plain-text rendering of the top price increases and decreases."""

from __future__ import annotations

from decimal import Decimal, localcontext

from pricemovers.selection.tracker import ChangeTracker

_CENTS = Decimal("0.01")


def format_amount(difference: Decimal) -> str:
    """Render a difference as dollars rounded half-even to cents.

    Zero and positive values print as ``$1.23``, negatives as ``-$1.23``.
    The sign is taken after rounding, so a negative amount that rounds to
    zero prints as ``$0.00`` rather than ``-$0.00``.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, difference.adjusted() + 3)
        rounded = difference.quantize(_CENTS)
        magnitude = abs(rounded)
    if rounded.is_signed() and rounded != 0:
        return f"-${magnitude}"
    return f"${magnitude}"


def render_report(tracker: ChangeTracker, count: int, year: int, label: str = "NADAC per unit") -> str:
    lines = [f"Top {count} {label} price increases of {year}:"]
    lines.extend(f"{format_amount(diff)}: {description}" for diff, description in tracker.increases())
    lines.append("")
    lines.append(f"Top {count} {label} price decreases of {year}:")
    lines.extend(f"{format_amount(diff)}: {description}" for diff, description in tracker.decreases())
    return "\n".join(lines) + "\n"
