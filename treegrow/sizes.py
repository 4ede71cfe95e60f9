"""Human-readable byte sizes using binary (1024-based) units."""

from __future__ import annotations

SIZE_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_size(num_bytes: int) -> str:
    """Format ``num_bytes`` as ``"300 B"`` or ``"1.50 KiB"``.

    Negative inputs are treated as zero. Sizes beyond the largest unit stay in
    that unit.
    """
    value = float(max(0, int(num_bytes)))
    if value < 1024:
        return f"{int(value)} B"
    unit_idx = 0
    while value >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    return f"{value:.2f} {SIZE_UNITS[unit_idx]}"
