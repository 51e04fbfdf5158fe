"""JSON persistence for pre-computed vector records"""

import json
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple, Union

from pydantic import (
    BaseModel, ConfigDict, Field, StrictFloat, StrictInt, ValidationError, field_validator
)

from ..errors import LoadError

Source = Union[str, os.PathLike, TextIO]


class VectorRecord(BaseModel):
    """A document together with its embedding"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    content: str
    # JSON numbers only; booleans and numeric strings are rejected
    embedding: Tuple[Union[StrictFloat, StrictInt], ...] = Field(..., min_length=1)

    @field_validator('embedding')
    @classmethod
    def values_are_finite(cls, v):
        try:
            values = tuple(float(x) for x in v)
        except OverflowError:
            raise ValueError('Embedding value is too large for a float')
        if not all(math.isfinite(x) for x in values):
            raise ValueError('Embedding contains NaN or infinite values')
        return values

    @property
    def dimension(self) -> int:
        return len(self.embedding)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary"""
        return {
            'id': self.id,
            'content': self.content,
            'embedding': list(self.embedding),
        }


def corpus_dimension(records: Sequence[VectorRecord]) -> Optional[int]:
    """Return the shared embedding dimension, or None for an empty corpus

    Raises:
        LoadError: if records disagree on dimension
    """
    if not records:
        return None

    dimension = records[0].dimension
    for index, record in enumerate(records):
        if record.dimension != dimension:
            raise LoadError(
                f"Record {index} ({record.id}) has dimension {record.dimension}, "
                f"expected {dimension}"
            )
    return dimension


def read_corpus(source: Source) -> List[VectorRecord]:
    """Read a corpus from a JSON file path or an open text stream

    Args:
        source: Path to the vector file, or a readable text stream

    Returns:
        Records in file order

    Raises:
        LoadError: if the source is missing, unreadable or malformed
    """
    try:
        if hasattr(source, 'read'):
            raw = json.load(source)
        else:
            with open(source, 'r', encoding='utf-8') as f:
                raw = json.load(f)
    except FileNotFoundError as e:
        raise LoadError(f"Vector file not found: {source}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Vector file is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not read vector file: {e}") from e

    if not isinstance(raw, list):
        raise LoadError(f"Expected a list of records, got {type(raw).__name__}")

    records = []
    for index, item in enumerate(raw):
        try:
            records.append(VectorRecord.model_validate(item))
        except ValidationError as e:
            raise LoadError(f"Record {index} is malformed: {e}") from e

    corpus_dimension(records)
    return records


def write_corpus(records: Sequence[VectorRecord], target: Source) -> int:
    """Write records as pretty-printed JSON

    Args:
        records: Records to serialize
        target: Output path, or a writable text stream

    Returns:
        Number of bytes written (UTF-8)
    """
    data = json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)

    if hasattr(target, 'write'):
        target.write(data)
    else:
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(data)

    return len(data.encode('utf-8'))
