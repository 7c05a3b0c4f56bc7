from .analysis import generate_analysis
from .errors import DuplicateDocument, ResourceNotFound, SearchEngineError, UnknownKeyword, \
    UnreadableResource
from .keyword_index import KeywordIndex, build_index, insert_last_occurrence, make_index
from .normalizer import Normalizer
from .occurrence import Occurrence

__all__ = ['DuplicateDocument', 'KeywordIndex', 'Normalizer', 'Occurrence', 'ResourceNotFound',
           'SearchEngineError', 'UnknownKeyword', 'UnreadableResource', 'build_index',
           'generate_analysis', 'insert_last_occurrence', 'make_index']
