"""Query module: answer synthesis on top of vector search"""

from .synthesizer import ResponseSynthesizer
from .rag import RAGPipeline, RAGResponse

__all__ = ["ResponseSynthesizer", "RAGPipeline", "RAGResponse"]
