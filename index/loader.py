import logging
from pathlib import Path
from typing import Generator

from index.defs import APP_DATA_DIR
from index.errors import ResourceNotFound, UnreadableResource


logger = logging.getLogger(__name__)


def resolve_resource(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """
    Locate a corpus file on disk.

    Absolute paths are used as-is. Relative paths are looked up against base_dir (the current
    directory by default), then against the application data dir.

    Args:
        path: Name or path of the file.
        base_dir: Directory relative paths are resolved against first.

    Returns:
        Path to an existing file.

    Raises:
        ResourceNotFound: If the file exists in none of the locations.
    """
    path = Path(path)
    if path.is_absolute():
        candidates = [path]
    else:
        candidates = [Path(base_dir) / path if base_dir else path, APP_DATA_DIR / path]

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    logger.debug(f'Could not find {path} in any of {[str(c) for c in candidates]}')
    raise ResourceNotFound(path)

def read_tokens(path: str | Path) -> Generator[str, None, None]:
    """
    Read the whitespace-delimited tokens of a text file.

    Args:
        path: Path to the text file.

    Returns:
        Generator of raw tokens, in file order.

    Raises:
        ResourceNotFound: If the file does not exist.
        UnreadableResource: If the file is not valid UTF-8.
    """
    try:
        f = open(path, 'r', encoding = 'utf-8')
    except FileNotFoundError as e:
        raise ResourceNotFound(path) from e

    with f:
        try:
            for line in f:
                yield from line.split()
        except UnicodeDecodeError as e:
            raise UnreadableResource(path) from e

def read_manifest(path: str | Path) -> list[str]:
    """
    Read the list of document names to index.

    Args:
        path: Path to the manifest file.

    Returns:
        Document names, in manifest order.
    """
    documents = list(read_tokens(resolve_resource(path)))
    logger.debug(f'Read {len(documents)} document names from {path}')
    return documents

def read_noise_words(path: str | Path) -> list[str]:
    """
    Read the noise word list. Words are kept verbatim.

    Args:
        path: Path to the noise word file.

    Returns:
        Noise words, in file order.
    """
    words = list(read_tokens(resolve_resource(path)))
    logger.debug(f'Read {len(words)} noise words from {path}')
    return words
