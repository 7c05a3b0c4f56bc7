from index.keyword_index import KeywordIndex


def generate_analysis(index: KeywordIndex) -> None:
    print('Analysis of KeywordIndex')
    print('-' * 40)
    print(f'# of indexed documents: {len(index.documents)}')
    print(f'# of unique keywords: {index.keyword_count}')
    print(f'# of noise words: {len(index.noise_words)}')
    print(f'# of occurrences: {sum(len(occurrences) for _, occurrences in index.items())}')
