"""Word and quote corpora."""

from cryptograms.services.corpus.quotes import Quote, QuoteCorpus, shared_quote_corpus
from cryptograms.services.corpus.words import WordCorpus, shared_word_corpus

__all__ = [
    "Quote",
    "QuoteCorpus",
    "WordCorpus",
    "shared_quote_corpus",
    "shared_word_corpus",
]
