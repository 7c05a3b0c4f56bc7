import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import main
from index import UnknownKeyword, build_index
from retrieval import CLIApp, Searcher, format_results, parse_query, top5_search
from retrieval.CLIApp import State


CORPUS = {
    'A': 'round round round small',
    'B': 'round round small small small',
    'C': 'round round in',
    'D': 'hat hat hat hat round',
    'E': 'Small!',
}

def read_corpus(name: str) -> list[str]:
    return CORPUS[name].split()

class TopFiveSearchTests(unittest.TestCase):
    def setUp(self):
        self.index = build_index(['A', 'B', 'C'], [], read_document = read_corpus)

    def test_scenario(self):
        """
        B (small 3) and A (round 3) rank ahead of C. A wins the tie as kw1's document.
        """
        self.assertEqual(['A', 'B', 'C'], top5_search(self.index, 'round', 'small'))

    def test_swapped_keywords_break_ties_the_other_way(self):
        self.assertEqual(['B', 'A', 'C'], top5_search(self.index, 'small', 'round'))

    def test_union_includes_documents_with_only_one_keyword(self):
        self.assertEqual(['B', 'C', 'A'], top5_search(self.index, 'in', 'small'))

    def test_document_ranks_at_higher_frequency(self):
        index = build_index(['A', 'D'], [], read_document = read_corpus)

        # D has round once but hat four times; A has round three times.
        self.assertEqual(['D', 'A'], top5_search(index, 'round', 'hat'))

    def test_same_keyword_twice(self):
        self.assertEqual(['A', 'B', 'C'], top5_search(self.index, 'round', 'round'))

    def test_unknown_keyword(self):
        with self.assertRaises(UnknownKeyword) as cm:
            top5_search(self.index, 'round', 'zebra')
        self.assertEqual('zebra', cm.exception.keyword)

        with self.assertRaises(UnknownKeyword):
            top5_search(self.index, 'zebra', 'round')

    def test_at_most_five_distinct_results(self):
        corpus = {f'doc{i}': ' '.join(['alpha'] * (i % 4 + 1) + ['beta'] * (i % 3 + 1))
                  for i in range(12)}
        index = build_index(corpus, [], read_document = lambda name: corpus[name].split())

        results = top5_search(index, 'alpha', 'beta')

        self.assertEqual(5, len(results))
        self.assertEqual(len(results), len(set(results)))
        # Highest alpha frequency is 4 (doc3, doc7, doc11), ties in merge order.
        self.assertEqual(['doc3', 'doc7', 'doc11'], results[:3])

    def test_custom_limit(self):
        self.assertEqual(['A'], top5_search(self.index, 'round', 'small', limit = 1))
        self.assertEqual([], top5_search(self.index, 'round', 'small', limit = 0))

class ParseQueryTests(unittest.TestCase):
    def test_two_words(self):
        self.assertEqual(('round', 'small'), parse_query('round small'))

    def test_or(self):
        self.assertEqual(('round', 'small'), parse_query('round or small'))
        self.assertEqual(('round', 'small'), parse_query('  round OR small '))

    def test_single_word(self):
        self.assertEqual(('round', 'round'), parse_query('round'))

    def test_invalid(self):
        for query in ['', '   ', 'a b c', 'a and b', 'a or b or c']:
            with self.assertRaises(ValueError, msg = query):
                parse_query(query)

class SearcherTests(unittest.TestCase):
    def setUp(self):
        self.searcher = Searcher.build(['A', 'B', 'C', 'E'], ['in'], read_document = read_corpus)

    def test_query_words_are_normalized(self):
        self.assertEqual(['A', 'B', 'C', 'E'], self.searcher.search('Round,', 'SMALL'))

    def test_noise_word_query(self):
        with self.assertRaises(UnknownKeyword) as cm:
            self.searcher.search('in', 'round')
        self.assertEqual('in', cm.exception.keyword)

    def test_malformed_query_word(self):
        with self.assertRaises(UnknownKeyword):
            self.searcher.search("don't", 'round')

    def test_search_query(self):
        self.assertEqual(['B', 'A', 'E'], self.searcher.search_query('small'))
        self.assertEqual(['A', 'B', 'C', 'E'], self.searcher.search_query('round or small'))

    def test_index_is_frozen(self):
        self.assertTrue(self.searcher.index.frozen)

    def test_from_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ['A', 'B', 'C']:
                (root / f'{name}.txt').write_text(CORPUS[name])
            (root / 'docs.txt').write_text('A.txt B.txt C.txt')
            (root / 'noise.txt').write_text('in')

            searcher = Searcher.from_files(root / 'docs.txt', root / 'noise.txt')

        self.assertEqual(['A.txt', 'B.txt', 'C.txt'], searcher.search('round', 'small'))

class CLIAppTests(unittest.TestCase):
    def test_format_results(self):
        self.assertEqual('A, B', format_results(['A', 'B']))
        self.assertEqual('No matching documents.', format_results([]))

    @patch('builtins.input', side_effect = ['round or small', 'zebra round', 'a b c', 'exit'])
    def test_session(self, _):
        searcher = Searcher.build(['A', 'B', 'C'], ['in'], read_document = read_corpus)
        out = io.StringIO()

        app = CLIApp(searcher)
        with contextlib.redirect_stdout(out):
            app.start()

        self.assertEqual(State.EXIT, app.state)

        output = out.getvalue()
        self.assertIn('Indexed 3 documents, 2 keywords.', output)
        self.assertIn('A, B, C', output)
        self.assertIn("No results: 'zebra'", output)
        self.assertIn('Expected one or two search words', output)

class MainTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        for name in ['A', 'B', 'C']:
            (self.root / name).write_text(CORPUS[name])
        (self.root / 'docs.txt').write_text('A\nB\nC\n')
        (self.root / 'noisewords.txt').write_text('in\n')
        self.files = ['--docs', str(self.root / 'docs.txt'),
                      '--noise', str(self.root / 'noisewords.txt')]

    def tearDown(self):
        self._tmp.cleanup()

    def run_main(self, *args: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main.main([*self.files, *args])
        return code, out.getvalue()

    def test_query(self):
        self.assertEqual((0, 'A, B, C\n'), self.run_main('-q', 'round', 'small'))

    def test_unknown_keyword_query(self):
        code, output = self.run_main('-q', 'round', 'in')

        self.assertEqual(0, code)
        self.assertIn("No results: 'in'", output)

    def test_print_index(self):
        code, output = self.run_main('-p')

        self.assertEqual(0, code)
        self.assertIn('Key: round\t(A,3)  (B,2)  (C,2)', output)

    def test_analysis(self):
        code, output = self.run_main('-a')

        self.assertEqual(0, code)
        self.assertIn('# of indexed documents: 3', output)
        self.assertIn('# of unique keywords: 2', output)

    def test_missing_resource(self):
        (self.root / 'docs.txt').write_text('A\nMissing\n')

        code, _ = self.run_main('-q', 'round', 'small')

        self.assertEqual(1, code)

    def test_duplicate_document(self):
        (self.root / 'docs.txt').write_text('A\nA\n')

        code, output = self.run_main('-q', 'round', 'small')

        self.assertEqual(1, code)
        self.assertEqual('', output)

    def test_undecodable_document(self):
        (self.root / 'B').write_bytes(b'round \xff\xfe small')

        code, _ = self.run_main('-q', 'round', 'small')

        self.assertEqual(1, code)

    @patch('builtins.input', side_effect = ['round small', 'exit'])
    def test_interactive_exit_returns(self, _):
        code, output = self.run_main()

        self.assertEqual(0, code)
        self.assertIn('A, B, C', output)

if __name__ == '__main__':
    unittest.main()
