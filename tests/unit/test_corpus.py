"""Unit tests for vector records and corpus serialization"""

import io
import json

import pytest
from pydantic import ValidationError

from src.pocketrag.storage import VectorRecord, read_corpus, write_corpus, corpus_dimension
from src.pocketrag.errors import LoadError
from tests.fixtures.data import axis_records, make_record


class TestVectorRecord:
    """Test record validation"""
    
    def test_embedding_stored_as_tuple(self):
        record = VectorRecord(id="a", content="text", embedding=[0.1, 0.2])
        assert record.embedding == (0.1, 0.2)
        assert record.dimension == 2
    
    def test_record_is_immutable(self):
        record = make_record("a", [1.0])
        with pytest.raises(ValidationError):
            record.content = "changed"
    
    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            VectorRecord(id="", content="text", embedding=[1.0])
    
    def test_empty_embedding_rejected(self):
        with pytest.raises(ValidationError):
            VectorRecord(id="a", content="text", embedding=[])
    
    @pytest.mark.parametrize("bad", [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_embedding_rejected(self, bad):
        with pytest.raises(ValidationError):
            VectorRecord(id="a", content="text", embedding=[0.5, bad])
    
    def test_integer_components_become_floats(self):
        record = VectorRecord(id="a", content="text", embedding=[1, 0, -2])
        assert record.embedding == (1.0, 0.0, -2.0)
        assert all(type(x) is float for x in record.embedding)
    
    @pytest.mark.parametrize("bad", [True, False, "0.5", "1", None])
    def test_non_numeric_components_rejected(self, bad):
        with pytest.raises(ValidationError):
            VectorRecord(id="a", content="text", embedding=[0.5, bad])
    
    def test_integer_too_large_for_float_rejected(self):
        with pytest.raises(ValidationError):
            VectorRecord(id="a", content="text", embedding=[10 ** 400])
    
    def test_to_dict(self):
        record = make_record("a", [1.0, 2.0], "hola")
        assert record.to_dict() == {'id': 'a', 'content': 'hola', 'embedding': [1.0, 2.0]}


class TestCorpusSerialization:
    """Test writing and reading vector files"""
    
    def test_round_trip_through_file(self, temp_dir, sample_records):
        path = temp_dir / "vectors.json"
        
        write_corpus(sample_records, path)
        loaded = read_corpus(path)
        
        assert [r.id for r in loaded] == [r.id for r in sample_records]
        assert [r.content for r in loaded] == [r.content for r in sample_records]
        for original, restored in zip(sample_records, loaded):
            assert restored.embedding == pytest.approx(original.embedding)
    
    def test_round_trip_keeps_unicode(self):
        records = [make_record("ñ", [0.25, -0.5], "¿Qué es TuristAgent? Más información aquí")]
        buffer = io.StringIO()
        
        write_corpus(records, buffer)
        buffer.seek(0)
        
        assert read_corpus(buffer) == records
    
    def test_file_is_pretty_printed_list(self, temp_dir):
        path = temp_dir / "vectors.json"
        write_corpus(axis_records(), path)
        
        text = path.read_text(encoding='utf-8')
        data = json.loads(text)
        
        assert "\n  " in text
        assert isinstance(data, list)
        assert set(data[0]) == {"id", "content", "embedding"}
    
    def test_write_returns_byte_count(self, temp_dir):
        path = temp_dir / "vectors.json"
        size = write_corpus([make_record("a", [1.0], "México")], path)
        assert size == path.stat().st_size
    
    def test_write_creates_parent_directories(self, temp_dir):
        path = temp_dir / "nested" / "dir" / "vectors.json"
        write_corpus(axis_records(), path)
        assert path.exists()
    
    def test_field_order_is_not_significant(self):
        buffer = io.StringIO(json.dumps([
            {"embedding": [1.0, 0.0], "content": "x", "id": "a"}
        ]))
        records = read_corpus(buffer)
        assert records[0].id == "a"


class TestCorpusDimension:
    """Test dimension consistency check"""
    
    def test_empty_corpus_has_no_dimension(self):
        assert corpus_dimension([]) is None
    
    def test_consistent_dimension(self):
        assert corpus_dimension(axis_records()) == 3
    
    def test_mixed_dimensions_raise(self):
        records = [make_record("a", [1.0, 0.0]), make_record("b", [1.0, 0.0, 0.0])]
        with pytest.raises(LoadError, match="dimension"):
            corpus_dimension(records)
