"""String rendering shared by the generated quantity types."""

from __future__ import annotations

from typing import Any, Sequence

DEFAULT_DIGITS = 2


def format_magnitude(value: float, digits: int = DEFAULT_DIGITS) -> str:
    """Round to ``digits`` fractional digits and drop trailing zeros.

    ``0.111`` renders as ``"0.11"``, ``1.0`` as ``"1"``, ``-0.001`` as ``"0"``.
    """

    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_quantity(
    value: float,
    abbreviation: str,
    fmt: str | None = None,
    args: Sequence[Any] = (),
) -> str:
    """Render a converted value and its abbreviation.

    Without ``fmt`` the value is rounded with :func:`format_magnitude`. With
    ``fmt`` the raw float and the abbreviation are positional arguments 0 and
    1, followed by ``args``.
    """

    if fmt is None:
        return f"{format_magnitude(value)} {abbreviation}"
    return fmt.format(value, abbreviation, *args)


__all__ = ["DEFAULT_DIGITS", "format_magnitude", "format_quantity"]
