"""Display-name normalization for module identifiers."""

from __future__ import annotations

SEPARATORS = ("-", "_")


def normalize(identifier: str) -> str:
    """
    Convert a raw identifier into a title-cased display name.

    "-" and "_" become a space. The first character after a space (or at the
    start) is upper-cased and everything else is lower-cased.

    Examples:
        >>> normalize("basic-mathematics")
        'Basic Mathematics'
        >>> normalize("intro_to_sets")
        'Intro To Sets'
    """
    result = []
    capitalize_next = True

    for char in identifier:
        if char in SEPARATORS or char == " ":
            result.append(" ")
            capitalize_next = True
        elif capitalize_next:
            result.append(char.upper())
            capitalize_next = False
        else:
            result.append(char.lower())

    return "".join(result)
