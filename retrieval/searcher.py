import logging
import time
from pathlib import Path
from typing import Iterable

from index.defs import MAX_RESULTS
from index.errors import UnknownKeyword
from index.keyword_index import KeywordIndex, build_index, make_index


logger = logging.getLogger(__name__)


def top5_search(index: KeywordIndex, kw1: str, kw2: str, *, limit: int = MAX_RESULTS) -> list[str]:
    """
    Search result for "kw1 or kw2". A document is in the result if kw1 or kw2 occurs in it.

    Documents are ranked by descending frequency, a document under both keywords ranking at the
    higher of its two frequencies. Frequency ties go to kw1's documents, then to whichever comes
    first in its keyword's occurrence list. Each document appears once.

    Both occurrence lists are already sorted by descending frequency, so they are merged with two
    pointers. O(N + M) time, N and M = occurrence counts of the keywords.

    Args:
        index: The keyword index to search.
        kw1: First keyword.
        kw2: Second keyword.
        limit: Maximum number of documents returned.

    Returns:
        Names of the matching documents, best first, at most limit of them. Empty if no document
        matches.

    Raises:
        UnknownKeyword: If either keyword is not in the index.
    """
    first, second = index[kw1], index[kw2]

    results = []
    seen = set()
    i = j = 0

    while len(results) < limit and (i < len(first) or j < len(second)):
        if j >= len(second) or (i < len(first) and first[i].frequency >= second[j].frequency):
            occurrence = first[i]
            i += 1
        else:
            occurrence = second[j]
            j += 1

        # The first time a document comes up is at its highest frequency.
        if occurrence.document not in seen:
            seen.add(occurrence.document)
            results.append(occurrence.document)

    return results

def parse_query(query: str) -> tuple[str, str]:
    """
    Split a query of the form `kw1 kw2` or `kw1 or kw2` into its two keywords. A single keyword is
    searched on its own.

    Args:
        query: String search query.

    Returns:
        The two query words, not yet normalized.

    Raises:
        ValueError: If the query has no words or more than two.
    """
    words = query.split()
    if len(words) == 3 and words[1].lower() == 'or':
        words = [words[0], words[2]]

    if len(words) == 1:
        return words[0], words[0]
    if len(words) == 2:
        return words[0], words[1]

    raise ValueError(f'Expected one or two search words, got {len(words)}: {query!r}')

class Searcher:
    """
    Wrapper around a keyword index used to retrieve the documents matching two keywords.

    Args:
        index: The keyword index to search. Frozen if it is not already.
    """
    def __init__(self, index: KeywordIndex):
        # The keyword index providing access to the documents.
        self._index = index
        if not index.frozen:
            index.freeze()

    @classmethod
    def build(cls, documents: Iterable[str], noise_words: Iterable[str], **kwargs) -> 'Searcher':
        """
        Index a set of documents and build a searcher over them.

        Args:
            documents: Names of the documents to index.
            noise_words: Words never indexed.
            **kwargs: Arguments passed to build_index.
        """
        return cls(build_index(documents, noise_words, **kwargs))

    @classmethod
    def from_files(cls, docs_file: str | Path, noise_words_file: str | Path) -> 'Searcher':
        """
        Build a searcher from a document manifest and a noise word file on disk.

        Args:
            docs_file: File listing the documents to index.
            noise_words_file: File listing the noise words.
        """
        return cls(make_index(docs_file, noise_words_file))

    @property
    def index(self) -> KeywordIndex:
        return self._index

    def _process_word(self, word: str) -> str:
        """
        Turn a raw query word into a keyword, the same way document tokens are.

        Raises:
            UnknownKeyword: If the word can never be a keyword (noise word, punctuation).
        """
        keyword = self._index.normalizer.normalize(word)
        if keyword is None:
            logger.debug(f'Query word {word!r} is not a keyword')
            raise UnknownKeyword(word.lower())
        return keyword

    def search(self, kw1: str, kw2: str) -> list[str]:
        """
        Retrieve the documents in which kw1 or kw2 occurs.

        Args:
            kw1: First query word.
            kw2: Second query word.

        Returns:
            Up to five document names ordered by relevance. Empty if nothing matches.

        Raises:
            UnknownKeyword: If either word was never indexed.
        """
        start_time = time.perf_counter()

        results = top5_search(self._index, self._process_word(kw1), self._process_word(kw2))

        end_time = time.perf_counter()
        logger.debug(f'Found {len(results)} results for {kw1!r} or {kw2!r} '
                     f'in {round(end_time - start_time, 6)} seconds')

        return results

    def search_query(self, query: str) -> list[str]:
        """
        Retrieve the documents matching a `kw1 [or] kw2` query string.

        Args:
            query: String search query.

        Returns:
            Up to five document names ordered by relevance.
        """
        return self.search(*parse_query(query))
