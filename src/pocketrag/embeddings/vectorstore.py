"""In-memory vector store over a pre-computed corpus"""

import math
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import DimensionMismatch, VectorizationFailed
from ..storage import VectorRecord, read_corpus, corpus_dimension
from ..storage.corpus import Source
from .generator import EmbeddingProvider, EmbeddingGenerator


@dataclass(frozen=True)
class SearchResult:
    """A scored match from the corpus"""
    content: str
    score: float
    id: str


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity between two vectors of equal length

    A zero-magnitude vector has no direction, so its similarity to
    anything is 0.0.

    Raises:
        DimensionMismatch: if the vectors differ in length
        ValueError: if either vector holds NaN or infinite values
    """
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(b))):
        raise ValueError("Vectors must contain only finite values")

    scale_a = np.max(np.abs(a)) if a.size else 0.0
    scale_b = np.max(np.abs(b)) if b.size else 0.0
    if scale_a == 0.0 or scale_b == 0.0:
        return 0.0

    # Largest component becomes 1, so squaring neither overflows nor underflows
    a = a / scale_a
    b = b / scale_b

    similarity = float(np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b)))
    if math.isnan(similarity):
        raise ValueError("Cosine similarity is undefined for these vectors")

    # Rounding can push |similarity| slightly past 1
    return max(-1.0, min(1.0, similarity))


class VectorStore:
    """Search a pre-computed corpus by cosine similarity"""
    
    def __init__(self, embedding_generator: Optional[EmbeddingProvider] = None):
        """Initialize vector store
        
        Args:
            embedding_generator: Provider used to embed queries
        """
        self.embedding_generator = embedding_generator or EmbeddingGenerator()
        self.documents: List[VectorRecord] = []
        self.dimension: Optional[int] = None
        self._loaded = False
    
    @property
    def is_loaded(self) -> bool:
        return self._loaded
    
    @property
    def records(self) -> Tuple[VectorRecord, ...]:
        return tuple(self.documents)
    
    def load(self, source: Source) -> List[VectorRecord]:
        """Load the corpus, replacing whatever was loaded before
        
        Args:
            source: Path to the vector file, or a readable text stream
            
        Returns:
            The loaded records
            
        Raises:
            LoadError: if the source is unreadable or malformed. The current
                corpus is kept as it was.
        """
        label = getattr(source, 'name', None) if hasattr(source, 'read') else os.fspath(source)
        print(f"📦 Loading vectors from: {label or '<stream>'}")
        
        records = read_corpus(source)
        
        self.documents = records
        self.dimension = corpus_dimension(records)
        self._loaded = True
        
        print(f"✅ Loaded {len(records)} pre-computed vectors")
        return list(records)
    
    def search(self, query: str, top_k: int = 3) -> List[SearchResult]:
        """Search for the documents closest to a query
        
        Args:
            query: Natural language query
            top_k: Number of results to return
            
        Returns:
            Up to top_k results, best first. Equal scores keep corpus order.
        """
        query_vector = self.embedding_generator.embed(query)
        
        if top_k <= 0 or not self.documents:
            return []
        
        if len(query_vector) != self.dimension:
            raise DimensionMismatch(self.dimension, len(query_vector))
        if not np.all(np.isfinite(query_vector)):
            raise VectorizationFailed("Query embedding contains non-finite values")

        scored = [(doc, cosine_similarity(query_vector, doc.embedding)) for doc in self.documents]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        
        return [
            SearchResult(content=doc.content, score=score, id=doc.id)
            for doc, score in scored[:top_k]
        ]
    
    def count(self) -> int:
        """Get total number of vectors in the store"""
        return len(self.documents)
