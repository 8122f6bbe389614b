"""
Label similarity scoring used for command suggestions.
"""

from rapidfuzz.distance import Levenshtein


def get_difference(first: str, second: str) -> float:
    """
    Normalized edit distance between two labels, ignoring case.

    The Levenshtein distance is divided by the length of the longer string,
    so the score lies in [0, 1]: 0 for identical labels, 1 for labels that
    share nothing at any position.

    Params:
        first: A label, typically the token the user typed
        second: A known command label

    Returns:
        The normalized difference

    Examples:
        get_difference("register", "REGISTER") -> 0.0
        get_difference("abc", "xyz") -> 1.0
    """
    return Levenshtein.normalized_distance(first.lower(), second.lower())
