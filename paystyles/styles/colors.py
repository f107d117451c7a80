"""Color helpers for derived style values."""
import re

TRANSPARENT = 'rgba(0,0,0,0)'
_HEX_COLOR = re.compile(r'#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})')


def hex_to_rgba(color: str, alpha: float = 1) -> str:
    """
    Convert '#rgb' / '#rrggbb' to an 'rgba(r,g,b,a)' string.

    Alpha is clamped to [0, 1] and always printed with two decimals.
    Anything else, including hex digits without the leading '#', gives
    fully transparent black.

        >>> hex_to_rgba('#000000', 0.15)
        'rgba(0,0,0,0.15)'
        >>> hex_to_rgba('#fff', 1)
        'rgba(255,255,255,1.00)'
        >>> hex_to_rgba('bad', 1)
        'rgba(0,0,0,0)'
    """
    match = _HEX_COLOR.fullmatch((color or '').strip()) if isinstance(color, str) else None
    if match is None:
        return TRANSPARENT

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(nibble * 2 for nibble in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = max(0.0, min(1.0, float(alpha)))
    return f'rgba({r},{g},{b},{alpha:.2f})'
