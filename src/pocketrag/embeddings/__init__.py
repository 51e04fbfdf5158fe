"""Embedding generation and vector search over a pre-computed corpus"""

from .generator import EmbeddingProvider, EmbeddingGenerator
from .vectorstore import VectorStore, SearchResult, cosine_similarity

__all__ = ['EmbeddingProvider', 'EmbeddingGenerator', 'VectorStore', 'SearchResult', 'cosine_similarity']
