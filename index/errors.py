from pathlib import Path


class SearchEngineError(Exception):
    """
    Base class for all errors raised by the search engine.
    """
    pass

class ResourceNotFound(SearchEngineError, FileNotFoundError):
    """
    A document, the document manifest or the noise word list could not be located.

    Args:
        path: The path that was looked up.
    """
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'Resource not found: {self.path}')

class UnknownKeyword(SearchEngineError, LookupError):
    """
    A query keyword was never indexed.

    Args:
        keyword: The missing keyword.
    """
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f'Keyword not in index: {keyword!r}')

class DuplicateDocument(SearchEngineError, ValueError):
    """
    A document was listed for indexing more than once.

    Args:
        document: Name of the repeated document.
    """
    def __init__(self, document: str):
        self.document = document
        super().__init__(f'Document {document!r} is already indexed.')

class UnreadableResource(SearchEngineError, ValueError):
    """
    A corpus file exists but is not valid UTF-8 text.

    Args:
        path: The file that could not be decoded.
    """
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f'Resource is not valid UTF-8 text: {self.path}')
