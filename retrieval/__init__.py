from .searcher import Searcher, parse_query, top5_search
from .CLIApp import CLIApp, format_results

__all__ = ['CLIApp', 'Searcher', 'format_results', 'parse_query', 'top5_search']
