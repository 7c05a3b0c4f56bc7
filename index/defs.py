from pathlib import Path

import platformdirs


# The name of the entire search engine application.
APP_NAME = 'LittleSearchEngine'
# Local data dir for this application. Fallback location for corpus files.
APP_DATA_DIR = Path(platformdirs.user_data_dir(APP_NAME))

# Default file listing the documents to index, one name per token.
DEFAULT_DOCS_FILE = 'docs.txt'
# Default file listing the noise words, one word per token.
DEFAULT_NOISE_WORDS_FILE = 'noisewords.txt'

# Max number of documents returned by a search.
MAX_RESULTS = 5
