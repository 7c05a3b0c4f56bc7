import logging
import time
from pathlib import Path
from typing import Callable, Generator, Iterable

import psutil

from index.counter import count_keywords
from index.errors import DuplicateDocument, UnknownKeyword
from index.loader import read_manifest, read_noise_words, read_tokens, resolve_resource
from index.normalizer import Normalizer
from index.occurrence import Occurrence


logger = logging.getLogger(__name__)


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of a list to its place in descending frequency order. Elements
    0..n-2 must already be in descending order. The spot is found with a binary search over them;
    on a frequency tie the search keeps going right, so the new occurrence lands after existing
    occurrences of the same frequency. O(log N) comparisons, O(N) shift, N = list size.

    Args:
        occurrences: Occurrence list, modified in place.

    Returns:
        The midpoint indexes probed by the binary search, in probe order. None if the list has a
        single element (nothing to move).
    """
    if len(occurrences) == 1:
        return None

    probed = []
    last = occurrences[-1]
    left, right = 0, len(occurrences) - 2

    while left <= right:
        mid = (left + right) // 2
        probed.append(mid)

        if occurrences[mid].frequency < last.frequency:
            right = mid - 1
        else: # Greater or equal. Ties go after the existing occurrence.
            left = mid + 1

    occurrences.pop()
    occurrences.insert(left, last)
    return probed

class KeywordIndex:
    """
    An in-memory inverted index mapping each keyword to its occurrences across documents. A
    keyword's occurrences are kept in descending order of frequency at all times, ties ordered by
    the order in which documents were merged.

    The index is built once (merge each document, then freeze) and is read-only afterwards.

    Args:
        normalizer: Normalizer used to turn document tokens into keywords.
    """
    def __init__(self, normalizer: Normalizer | None = None):
        self._normalizer = normalizer or Normalizer()
        self._internal: dict[str, list[Occurrence]] = {} # Keyword -> sorted occurrences.
        self._documents: list[str] = [] # Merged documents, in merge order.
        self._frozen = False

    @property
    def normalizer(self) -> Normalizer:
        """
        The normalizer documents and queries go through.
        """
        return self._normalizer

    @property
    def noise_words(self) -> frozenset[str]:
        return self._normalizer.noise_words

    @property
    def documents(self) -> tuple[str, ...]:
        """
        Names of the indexed documents, in merge order.
        """
        return tuple(self._documents)

    @property
    def keyword_count(self) -> int:
        return len(self._internal)

    @property
    def frozen(self) -> bool:
        """
        Whether the index is read-only.
        """
        return self._frozen

    def freeze(self):
        """
        Mark the index read-only. Any later merge fails.
        """
        self._frozen = True
        logger.debug(f'Froze KeywordIndex with {self.keyword_count} keywords '
                     f'over {len(self._documents)} documents')

    def add_document(self, document: str, tokens: Iterable[str]):
        """
        Count the keywords of a document and merge them into the index.

        Args:
            document: Name of the document.
            tokens: Raw tokens of the document.
        """
        self.merge(document, count_keywords(tokens, document, self._normalizer))

    def merge(self, document: str, keywords: dict[str, Occurrence]):
        """
        Merge the keywords of a single document into the index. Each occurrence is inserted at its
        place (descending frequency) in its keyword's occurrence list.

        Args:
            document: Name of the document the keywords come from.
            keywords: Keyword -> Occurrence for that document.

        Raises:
            RuntimeError: If the index is frozen.
            DuplicateDocument: If the document was already merged.
            ValueError: If an occurrence belongs to another document.
        """
        if self._frozen:
            raise RuntimeError('Cannot merge into a frozen KeywordIndex.')
        if document in self._documents:
            raise DuplicateDocument(document)

        for keyword, occurrence in keywords.items():
            if occurrence.document != document:
                raise ValueError(f'Occurrence {occurrence} of {keyword!r} does not belong to '
                                 f'document {document!r}.')

        self._documents.append(document)

        for keyword, occurrence in keywords.items():
            occurrences = self._internal.get(keyword)
            if occurrences is None:
                self._internal[keyword] = [occurrence]
            else:
                occurrences.append(occurrence)
                insert_last_occurrence(occurrences)

        logger.debug(f'Merged {len(keywords)} keywords from {document}')

    def items(self) -> Generator[tuple[str, tuple[Occurrence, ...]], None, None]:
        """
        Get dict-style items for the keywords and occurrences of this index.

        Returns:
            Generator of (keyword, occurrences) pairs.
        """
        for keyword, occurrences in self._internal.items():
            yield keyword, tuple(occurrences)

    def __getitem__(self, keyword: str) -> tuple[Occurrence, ...]:
        """
        Get the occurrences of a keyword.

        Args:
            keyword: The keyword.

        Returns:
            Occurrences of the keyword, in descending frequency order.

        Raises:
            UnknownKeyword: If the keyword was never indexed.
        """
        if type(keyword) != str:
            raise TypeError('Indexing item must be a string.')

        if keyword not in self._internal:
            raise UnknownKeyword(keyword)
        return tuple(self._internal[keyword])

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._internal

    def __iter__(self):
        """
        Iterates over the keywords of this index.
        """
        return iter(self._internal)

    def __len__(self) -> int:
        return len(self._internal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeywordIndex):
            return NotImplemented
        return self._documents == other._documents and self._internal == other._internal

    def __str__(self) -> str:
        """
        One line per keyword in keyword order, e.g. `Key: round (a.txt,3)  (b.txt,2)` with a
        tab after the keyword.
        """
        return '\n'.join(f'Key: {keyword}\t' + '  '.join(str(o) for o in occurrences)
                         for keyword, occurrences in sorted(self._internal.items()))

def build_index(documents: Iterable[str], noise_words: Iterable[str], *,
                read_document: Callable[[str], Iterable[str]] = read_tokens) -> KeywordIndex:
    """
    Build a frozen keyword index over a set of documents.

    Args:
        documents: Names of the documents to index, in merge order.
        noise_words: Words never indexed.
        read_document: Maps a document name to its raw tokens. Defaults to reading the name as a
        file path.

    Returns:
        The frozen index.

    Raises:
        ResourceNotFound: If a document cannot be read. No index is returned in that case.
    """
    logger.debug('Starting construction of new KeywordIndex')
    start = time.time()

    index = KeywordIndex(Normalizer(noise_words))
    for document in documents:
        index.add_document(document, read_document(document))

    index.freeze()

    logger.debug(f'{psutil.virtual_memory().percent}% virtual memory currently used')
    logger.debug(f'Finished construction of KeywordIndex in {round(time.time() - start, 3)}s. '
                 f'It is now stable (read-access only)')

    return index

def make_index(docs_file: str | Path, noise_words_file: str | Path) -> KeywordIndex:
    """
    Build a keyword index from files on disk. Document names are resolved against the directory of
    the manifest.

    Args:
        docs_file: File listing the documents to index.
        noise_words_file: File listing the noise words.

    Returns:
        The frozen index.

    Raises:
        ResourceNotFound: If the manifest, the noise word list or a document cannot be found.
    """
    noise_words = read_noise_words(noise_words_file)
    docs_dir = resolve_resource(docs_file).parent
    documents = read_manifest(docs_file)

    return build_index(documents, noise_words,
                       read_document = lambda name: read_tokens(resolve_resource(name, docs_dir)))
