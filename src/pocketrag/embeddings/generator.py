"""Generate embeddings using Ollama"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
import ollama
from ollama import ResponseError

from ..errors import EmbeddingUnavailable, VectorizationFailed


class EmbeddingProvider(ABC):
    """Anything that maps text to a fixed-length vector"""

    @abstractmethod
    def embed(self, text: str) -> List[float]:
        """Embed a single text

        Raises:
            EmbeddingUnavailable: if the provider is not initialized
            VectorizationFailed: if this text cannot be embedded
        """


def _model_names(response) -> List[str]:
    """Pull model names out of an ollama.list() response"""
    if hasattr(response, 'models'):
        models = response.models
    else:
        models = response.get('models', [])

    names = []
    for m in models:
        if isinstance(m, dict):
            names.append(m.get('model') or m.get('name') or '')
        else:
            name = getattr(m, 'model', None) or getattr(m, 'name', None)
            if isinstance(name, str):
                names.append(name)
    return names


class EmbeddingGenerator(EmbeddingProvider):
    """Generate sentence embeddings with an Ollama model"""
    
    def __init__(self, model_name: Optional[str] = None, auto_pull: bool = True):
        """Initialize embedding generator
        
        Args:
            model_name: Ollama model to use for embeddings (default: nomic-embed-text)
            auto_pull: Pull the model if the server does not have it yet
        """
        self.model_name = model_name or os.getenv("EMBEDDING_MODEL", "nomic-embed-text")
        self.available = False
        self._ensure_model(auto_pull)
    
    def _ensure_model(self, auto_pull: bool):
        """Check the embedding model is present, pulling it if allowed"""
        try:
            model_names = _model_names(ollama.list())
            
            if not any(self.model_name in name for name in model_names):
                if not auto_pull:
                    print(f"⚠️  Embedding model '{self.model_name}' not found. Run: ollama pull {self.model_name}")
                    return
                print(f"📥 Pulling embedding model: {self.model_name}")
                ollama.pull(self.model_name)
                print(f"✅ Model {self.model_name} ready")
            
            self.available = True
        except Exception as e:
            print(f"⚠️  Could not initialize embedding model: {e}")
    
    def embed(self, text: str) -> List[float]:
        """Generate embedding for a single text
        
        Args:
            text: Text to embed
            
        Returns:
            Embedding vector as list of floats
        """
        if not self.available:
            raise EmbeddingUnavailable(f"Embedding model '{self.model_name}' is not available")
        
        if not text or not text.strip():
            raise VectorizationFailed("Cannot vectorize empty text")
        
        try:
            response = ollama.embeddings(model=self.model_name, prompt=text)
        except ResponseError as e:
            raise VectorizationFailed(f"Ollama could not embed text: {e.error}") from e
        except (ConnectionError, httpx.ConnectError) as e:
            raise EmbeddingUnavailable(f"Ollama is not reachable: {e}") from e
        except httpx.HTTPError as e:
            raise VectorizationFailed(f"Ollama request failed: {e!r}") from e
        
        try:
            embedding = [float(x) for x in response['embedding']]
        except (KeyError, TypeError, ValueError) as e:
            raise VectorizationFailed(f"Model '{self.model_name}' returned a malformed embedding") from e
        
        if not embedding:
            raise VectorizationFailed(f"Model '{self.model_name}' returned an empty embedding")
        
        return embedding
