import argparse
import logging
import sys

import pyfiglet

from index import SearchEngineError, UnknownKeyword, generate_analysis
from index.defs import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE
from retrieval import CLIApp, Searcher, format_results


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description = 'Main entry point for the Little Search Engine')
    parser.add_argument('-d', '--debug', action = 'store_true', help = 'Enable debug mode')
    parser.add_argument('--docs', type = str, default = DEFAULT_DOCS_FILE,
                        help = f'File listing the documents to index (default: ./{DEFAULT_DOCS_FILE}).')
    parser.add_argument('--noise', type = str, default = DEFAULT_NOISE_WORDS_FILE,
                        help = f'File listing the noise words (default: ./{DEFAULT_NOISE_WORDS_FILE}).')
    parser.add_argument('-q', '--query', nargs = 2, metavar = ('KW1', 'KW2'),
                        help = 'Run a single "KW1 or KW2" search and exit.')
    parser.add_argument('-p', '--print-index', action = 'store_true',
                        help = 'Print every keyword with its occurrences and exit.')
    parser.add_argument('-a', '--analysis', action = 'store_true',
                        help = 'Print index statistics and exit.')
    return parser.parse_args(argv)

def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(level = logging.DEBUG if args.debug else logging.INFO,
                        format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logger.debug('Started Application in DEBUG mode')

    try:
        searcher = Searcher.from_files(args.docs, args.noise)
    except SearchEngineError as e:
        logger.error(f'Could not build the index: {e}')
        return 1

    if args.print_index:
        print(searcher.index)
        return 0

    if args.analysis:
        generate_analysis(searcher.index)
        return 0

    if args.query:
        try:
            results = searcher.search(*args.query)
        except UnknownKeyword as e:
            print(f'No results: {e.keyword!r} does not occur in any document.')
            return 0

        print(format_results(results))
        return 0

    print(pyfiglet.figlet_format('Little Search', font = 'slant'))
    CLIApp(searcher).start()

    return 0

if __name__ == '__main__':
    sys.exit(main())
