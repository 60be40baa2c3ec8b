# runwayroute/utils/naming.py
"""Deterministic fix names and runway designator helpers."""
import re
from typing import Optional

CONSONANTS = 'BCDFGHJKLMNPQRSTVWXYZ'
VOWELS = 'AEIOU'


def generate_waypoint_name(index: int) -> str:
    """Five-letter pronounceable fix name. The same index always gives the same name."""
    seed = (index * 7 + 3) % 100
    return (
        CONSONANTS[seed % len(CONSONANTS)]
        + VOWELS[(seed * 2) % len(VOWELS)]
        + CONSONANTS[(seed * 3) % len(CONSONANTS)]
        + VOWELS[(seed * 5) % len(VOWELS)]
        + CONSONANTS[(seed * 7) % len(CONSONANTS)]
    )


def heading_from_designator(designator: str) -> Optional[float]:
    """'25R' -> 250.0, '09' -> 90.0, '36' -> 360.0. None when there is no number."""
    match = re.match(r'^\s*(\d{1,2})', designator)
    if not match:
        return None
    return float(int(match.group(1)) * 10)


def reciprocal_designator(designator: str) -> str:
    """'25R' -> '07L', '09' -> '27', '18C' -> '36C'."""
    match = re.match(r'^\s*(\d{1,2})([LRC]?)\s*$', designator.upper())
    if not match:
        return designator
    number = int(match.group(1)) + 18
    if number > 36:
        number -= 36
    suffix = {'L': 'R', 'R': 'L'}.get(match.group(2), match.group(2))
    return f"{number:02d}{suffix}"


def runway_label(designator: Optional[str]) -> str:
    return f"RWY {designator}" if designator else "RWY"
