# src/nordum/core/distance.py
"""
Levenshtein edit distance.
"""


def levenshtein(a: str, b: str) -> int:
    """
    Classic Levenshtein distance over the full strings.

    Fills a (len(b)+1) x (len(a)+1) table. Insertion, deletion and
    substitution cost 1, equal characters cost 0.
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(a) + 1):
        matrix[0][i] = i
    for j in range(len(b) + 1):
        matrix[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,
                matrix[j - 1][i] + 1,
                matrix[j - 1][i - 1] + cost,
            )

    return matrix[len(b)][len(a)]


def length_gap_exceeds(a: str, b: str, max_distance: int) -> bool:
    """True when the length difference alone rules out distance <= max_distance."""
    return abs(len(a) - len(b)) > max_distance
