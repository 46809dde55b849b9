"""Material name to short code mapping."""

from __future__ import annotations

# CAD material database names and known short codes -> short code.
# Keys are matched case-insensitively.
MATERIAL_CODES: dict[str, str] = {
    # Stainless
    "AISI 304": "304L",
    "304 Stainless Steel": "304L",
    "304 Stainless Steel (SS)": "304L",
    "AISI 316": "316L",
    "316 Stainless Steel": "316L",
    "316 Stainless Steel (SS)": "316L",
    "AISI 309": "309",
    "AISI 321": "321",
    "AISI 430": "430",
    "AISI 201": "201",
    # Carbon steel
    "Plain Carbon Steel": "CS",
    "AISI 1018 Steel": "1018",
    "1018 Steel": "1018",
    "AISI 1020 Steel": "1020",
    "AISI 1045 Steel": "1045",
    "A36 Steel": "A36",
    "ASTM A36 Steel": "A36",
    # Aluminum
    "6061 Alloy": "6061",
    "6061-T6 (SS)": "6061",
    "5052 Alloy": "5052",
    "5052-H32": "5052",
    "3003 Alloy": "3003",
    "5083 Alloy": "5083",
}

# Short codes that pass through unchanged
SHORT_CODES: frozenset[str] = frozenset(
    {
        "304L", "316L", "309", "310", "321", "330", "409", "430", "2205", "2507",
        "C22", "C276", "AL6XN", "ALLOY31", "CS", "A36", "ALNZD", "1018", "6061", "5052",
    }
)

_LOOKUP: dict[str, str] = {name.upper(): code for name, code in MATERIAL_CODES.items()}
_LOOKUP.update({code: code for code in SHORT_CODES})

STAINLESS_CODES: frozenset[str] = frozenset(
    {
        "201", "304", "304L", "309", "310", "316", "316L", "321", "330", "409", "430",
        "2205", "2507", "C22", "C276", "AL6XN", "ALLOY31",
    }
)


def to_short_code(material: str | None) -> str | None:
    """Convert a material name to its short code.

    Unmapped names are upper-cased with any "AISI " prefix removed.

    Examples:
        >>> to_short_code("AISI 304")
        '304L'
        >>> to_short_code("Plain Carbon Steel")
        'CS'
        >>> to_short_code("aisi 4140")
        '4140'

    Returns:
        The short code, or None for a blank name.
    """
    if material is None or not material.strip():
        return None
    upper = material.strip().upper()
    if upper in _LOOKUP:
        return _LOOKUP[upper]
    if upper.startswith("AISI "):
        return upper[5:].strip()
    return upper


def is_stainless(code: str | None) -> bool:
    """True for stainless and nickel alloy short codes."""
    if not code:
        return False
    upper = code.strip().upper()
    return upper in STAINLESS_CODES or "SS" in upper
