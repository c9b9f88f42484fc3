"""Locale-aware string ordering.

Builds sort keys that follow the root-locale collation levels instead of raw
code point order: base letters first, then accents, then case (lowercase
before uppercase). Keys do not depend on the process locale, so results are
the same on every host.
"""

import unicodedata


def collation_key(text: str):
    """Return a sort key for `text`.

    Example:
        sorted(["b", "A", "a"], key=collation_key) -> ["a", "A", "b"]
    """
    primary = []
    secondary = []
    tertiary = []
    for char in unicodedata.normalize('NFD', text):
        if unicodedata.combining(char) and secondary:
            # Accent attaches to the preceding base character
            secondary[-1] += char
            continue
        primary.append(char.casefold())
        secondary.append('')
        tertiary.append(1 if char.isupper() else 0)
    # Raw text last so distinct strings never compare equal
    return (''.join(primary), tuple(secondary), tuple(tertiary), text)


def compare_text(a: str, b: str, case_sensitive: bool = True) -> int:
    """Three-way collation compare. Case-insensitive mode lower-cases both sides first."""
    if not case_sensitive:
        a, b = a.lower(), b.lower()
    key_a, key_b = collation_key(a), collation_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
