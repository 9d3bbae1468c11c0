"""
Validators for control surface inputs
"""

from typing import Optional, Union

from .schemas import RGBColor

NO_COLOR_VALUES = ("", "none")


def parse_hex_color(value: Union[str, RGBColor, None]) -> Optional[RGBColor]:
    """
    Parse '#RRGGBB', 'RRGGBB' or shorthand '#RGB' into an RGBColor
    
    Args:
        value: Hex string, an RGBColor, or None / "" / "none" for no color
        
    Returns:
        RGBColor, or None when no color is selected
    """
    if value is None or isinstance(value, RGBColor):
        return value
    
    h = value.strip().lower()
    if h in NO_COLOR_VALUES:
        return None
    
    h = h.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    
    try:
        return RGBColor(r=int(h[0:2], 16), g=int(h[2:4], 16), b=int(h[4:6], 16))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {value!r}") from e


def validate_weight(weight: int) -> int:
    """Validate a per-tileset sampling weight"""
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Weight must be an integer: {weight!r}")
    if not 0 <= weight <= 100:
        raise ValueError(f"Weight must be between 0 and 100: {weight}")
    return weight
