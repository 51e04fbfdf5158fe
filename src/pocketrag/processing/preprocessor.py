"""Embed raw documents into a corpus and write it out"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from pydantic import ValidationError

from ..embeddings import EmbeddingProvider, EmbeddingGenerator
from ..errors import VectorizationFailed
from ..storage import VectorRecord, write_corpus
from ..storage.corpus import Source


@dataclass
class SkippedDocument:
    """A document left out of the corpus and why"""
    index: int
    content: str
    reason: str


@dataclass
class PreprocessResult:
    """Outcome of a best-effort batch: what made it in, what was skipped"""
    records: List[VectorRecord] = field(default_factory=list)
    skipped: List[SkippedDocument] = field(default_factory=list)
    
    @property
    def processed(self) -> int:
        return len(self.records)
    
    @property
    def failed(self) -> int:
        return len(self.skipped)


class VectorPreprocessor:
    """Pre-compute embeddings for a fixed document set"""
    
    def __init__(self, embedding_generator: Optional[EmbeddingProvider] = None):
        """Initialize preprocessor"""
        self.embedding_generator = embedding_generator or EmbeddingGenerator()
    
    def generate(self, documents: Sequence[str]) -> PreprocessResult:
        """Embed every document, skipping the ones that fail
        
        A document is skipped when the provider cannot vectorize it or when
        its vector length differs from the first successful one. An
        unavailable provider aborts the whole batch.
        
        Args:
            documents: Raw document texts
            
        Returns:
            PreprocessResult with the surviving records and skipped documents
            
        Raises:
            EmbeddingUnavailable: if the embedding provider is not initialized
        """
        result = PreprocessResult()
        dimension = None
        total = len(documents)
        
        print(f"🔄 Pre-processing {total} documents...")
        
        for index, doc in enumerate(documents):
            try:
                vector = self.embedding_generator.embed(doc)
            except VectorizationFailed as e:
                self._skip(result, index, doc, str(e))
                continue
            
            if dimension is not None and len(vector) != dimension:
                self._skip(result, index, doc,
                           f"Embedding dimension {len(vector)} differs from corpus dimension {dimension}")
                continue
            
            try:
                record = VectorRecord(id=str(uuid.uuid4()), content=doc, embedding=vector)
            except ValidationError as e:
                self._skip(result, index, doc, f"Invalid embedding: {e.errors()[0]['msg']}")
                continue
            
            dimension = record.dimension
            result.records.append(record)
            print(f"✅ [{index + 1}/{total}] Processed")
        
        return result
    
    def _skip(self, result: PreprocessResult, index: int, doc: str, reason: str):
        result.skipped.append(SkippedDocument(index=index, content=doc, reason=reason))
        print(f"⚠️  Could not vectorize document {index}: {reason}")
    
    def save(self, records: Union[PreprocessResult, Sequence[VectorRecord]], target: Source) -> int:
        """Serialize records to a path or stream
        
        Returns:
            Number of bytes written
        """
        if isinstance(records, PreprocessResult):
            records = records.records
        return write_corpus(records, target)
    
    def generate_bundle(self, documents: Sequence[str], output_path: Source) -> PreprocessResult:
        """Generate the corpus for documents and write it to output_path
        
        Raises:
            EmbeddingUnavailable: if the embedding provider is not initialized
            VectorizationFailed: if no document could be embedded. Nothing
                is written in that case.
        """
        result = self.generate(documents)
        
        if documents and not result.records:
            raise VectorizationFailed(f"None of the {len(documents)} documents could be vectorized")
        
        size = self.save(result, output_path)
        
        label = getattr(output_path, 'name', '<stream>') if hasattr(output_path, 'write') else output_path
        print(f"💾 Saved to: {label}")
        print(f"📊 Total vectors: {result.processed}")
        print(f"📦 Size: {size / 1024.0 / 1024.0:.3f} MB")
        
        return result
