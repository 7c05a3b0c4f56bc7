from typing import Iterable

from index.normalizer import Normalizer
from index.occurrence import Occurrence


def compute_keyword_frequencies(tokens: Iterable[str], normalizer: Normalizer) -> dict[str, int]:
    """
    Calculates the frequency of each keyword in the given tokens. Tokens that are not keywords are
    skipped. Runs in O(n) time where n is the number of tokens.

    Args:
        tokens: Raw tokens of a document.
        normalizer: Normalizer turning raw tokens into keywords.

    Returns:
        Dictionary with the keyword as the index and the count as the value.
    """
    count_map = {}

    for token in tokens:
        keyword = normalizer.normalize(token)
        if keyword is None:
            continue

        count_map[keyword] = count_map.get(keyword, 0) + 1

    return count_map

def count_keywords(tokens: Iterable[str], document: str,
                   normalizer: Normalizer) -> dict[str, Occurrence]:
    """
    Count the keywords of a single document.

    Args:
        tokens: Raw tokens of the document.
        document: Name of the document.
        normalizer: Normalizer turning raw tokens into keywords.

    Returns:
        One Occurrence per distinct keyword in the document.
    """
    return {keyword: Occurrence(document = document, frequency = frequency)
            for keyword, frequency in compute_keyword_frequencies(tokens, normalizer).items()}
