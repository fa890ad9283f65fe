"""Edit-distance matching used for typo correction."""

from collections.abc import Iterable


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit insert/delete/substitute costs.

    Case-sensitive: callers lowercase beforehand when they need to.
    """
    prev_row = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        curr_row = [i + 1]
        for j, cb in enumerate(b):
            insertions = prev_row[j + 1] + 1
            deletions = curr_row[j] + 1
            substitutions = prev_row[j] + (ca != cb)
            curr_row.append(min(insertions, deletions, substitutions))
        prev_row = curr_row

    return prev_row[-1]


def find_closest_match(word: str, dictionary: Iterable[str], max_distance: int = 2) -> str | None:
    """Return the dictionary term nearest to ``word``, or None if none is close enough.

    The whole dictionary is scanned; on ties the first term encountered wins,
    so results depend on the dictionary's iteration order.
    """
    best_match: str | None = None
    best_distance = max_distance + 1
    needle = word.lower()

    for term in dictionary:
        distance = levenshtein_distance(needle, term.lower())
        if distance < best_distance:
            best_distance = distance
            best_match = term

    return best_match if best_distance <= max_distance else None
