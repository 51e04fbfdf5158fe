"""Retrieval-augmented question answering"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..embeddings import VectorStore, SearchResult
from ..storage.corpus import Source
from .synthesizer import ResponseSynthesizer


@dataclass
class RAGResponse:
    """An answer and the context it was built from"""
    answer: str
    sources: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)


class RAGPipeline:
    """Search the corpus, then let the chat model answer"""
    
    def __init__(self, vector_store: Optional[VectorStore] = None,
                 synthesizer: Optional[ResponseSynthesizer] = None):
        """Initialize pipeline"""
        self.vector_store = vector_store or VectorStore()
        self.synthesizer = synthesizer or ResponseSynthesizer()
    
    def initialize(self, source: Source):
        """Load the pre-computed corpus"""
        return self.vector_store.load(source)
    
    def retrieve(self, question: str, top_k: int = 3) -> List[SearchResult]:
        results = self.vector_store.search(question, top_k=top_k)
        
        print("🔍 Documents found:")
        for i, result in enumerate(results, 1):
            print(f"  [{i}] Score: {result.score:.3f}")
            print(f"      {result.content}")
        
        return results
    
    def query(self, question: str, top_k: int = 3) -> RAGResponse:
        """Answer a question from the top_k closest documents
        
        Raises:
            EmbeddingUnavailable, VectorizationFailed, DimensionMismatch:
                from the vector search
            ApiError: from the chat completion request
        """
        results = self.retrieve(question, top_k=top_k)
        sources = [r.content for r in results]
        
        answer = self.synthesizer.answer(question, sources)
        
        return RAGResponse(
            answer=answer,
            sources=sources,
            scores=[r.score for r in results],
        )
