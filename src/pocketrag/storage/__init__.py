"""Corpus storage for pre-computed vectors"""

from .corpus import VectorRecord, read_corpus, write_corpus, corpus_dimension

__all__ = ["VectorRecord", "read_corpus", "write_corpus", "corpus_dimension"]
