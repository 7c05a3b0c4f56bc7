import logging
import string
from typing import Iterable

logger = logging.getLogger(__name__)

# Only ASCII letters are word characters.
_LETTERS = frozenset(string.ascii_letters)


class Normalizer:
    """
    Reduces raw tokens to canonical keywords.

    A keyword is a token that starts with a letter, consists only of letters once its trailing
    punctuation is stripped, and is not a noise word. Keywords are lower case.

    Args:
        noise_words: Words that are never keywords. Matched verbatim (case-sensitive) against the
        lower-cased candidate.
    """
    def __init__(self, noise_words: Iterable[str] = ()):
        self._noise_words = frozenset(noise_words)
        logger.debug(f'Normalizer configured with {len(self._noise_words)} noise words')

    @property
    def noise_words(self) -> frozenset[str]:
        """
        The noise word set.
        """
        return self._noise_words

    def is_noise_word(self, word: str) -> bool:
        return word in self._noise_words

    def normalize(self, token: str) -> str | None:
        """
        Get the keyword for a raw token.

        Leading non-letters are not stripped: they reject the token outright. Trailing non-letters
        are stripped. Anything other than a letter before the last letter, punctuation included,
        rejects the token.

        Args:
            token: Raw whitespace-delimited token.

        Returns:
            The lower case keyword, or None if the token is not a keyword.
        """
        if not token or token[0] not in _LETTERS:
            return None

        # Last letter of the token. Exists, since the first character is a letter.
        end = len(token) - 1
        while token[end] not in _LETTERS:
            end -= 1

        candidate = token[:end + 1]
        # Embedded punctuation (.,?:;!-) or any other non-letter before the last letter.
        if any(ch not in _LETTERS for ch in candidate):
            return None

        candidate = candidate.lower()
        if self.is_noise_word(candidate):
            return None

        return candidate

    def __repr__(self) -> str:
        return f'Normalizer(noise_words={sorted(self._noise_words)!r})'
