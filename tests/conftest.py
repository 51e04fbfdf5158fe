"""Shared test fixtures and configuration"""

import os
import sys
import json
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import httpx
import pytest
from openai import OpenAI

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.pocketrag.embeddings import VectorStore
from src.pocketrag.processing import VectorPreprocessor
from src.pocketrag.storage import write_corpus
from tests.fixtures.data import KeywordEmbedder, SAMPLE_DOCUMENTS, completion_payload


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests across modules")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_dir = tempfile.mkdtemp(prefix="pocketrag_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def embedder():
    """Deterministic embedder, no model needed"""
    return KeywordEmbedder()


@pytest.fixture
def sample_records(embedder):
    """Records for SAMPLE_DOCUMENTS with stable ids"""
    preprocessor = VectorPreprocessor(embedding_generator=embedder)
    records = preprocessor.generate(SAMPLE_DOCUMENTS).records
    return [
        record.model_copy(update={'id': f"doc-{i}"})
        for i, record in enumerate(records)
    ]


@pytest.fixture
def corpus_file(temp_dir, sample_records):
    """Vector file on disk holding sample_records"""
    path = temp_dir / "precomputed_vectors.json"
    write_corpus(sample_records, path)
    return path


@pytest.fixture
def test_store(embedder, corpus_file):
    """Vector store loaded with the sample corpus"""
    store = VectorStore(embedding_generator=embedder)
    store.load(corpus_file)
    return store


@pytest.fixture
def mock_ollama():
    """Mock Ollama API calls made by the embedding generator"""
    with patch('src.pocketrag.embeddings.generator.ollama') as mock_ollama:
        mock_ollama.list.return_value = SimpleNamespace(
            models=[SimpleNamespace(model='nomic-embed-text:latest')]
        )
        mock_ollama.embeddings.return_value = {'embedding': [0.1, 0.2, 0.3]}
        yield mock_ollama


@pytest.fixture
def openai_requests():
    """Requests captured by openai_client, as parsed JSON bodies"""
    return []


@pytest.fixture
def openai_client(openai_requests):
    """Build an OpenAI client over a mock transport
    
    Usage: openai_client(status=200, body=completion_payload("hola"))
    """
    def factory(status: int = 200, body=None, error: Exception = None):
        def handler(request: httpx.Request) -> httpx.Response:
            openai_requests.append({
                'url': str(request.url),
                'headers': dict(request.headers),
                'json': json.loads(request.content),
            })
            if error is not None:
                raise error
            return httpx.Response(status, json=body if body is not None else completion_payload())
        
        return OpenAI(
            api_key="test-key",
            base_url="https://llm.test/v1",
            max_retries=0,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
    return factory


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables for each test"""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
