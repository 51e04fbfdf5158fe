"""Offline pre-processing of documents into a vector corpus"""

from .preprocessor import VectorPreprocessor, PreprocessResult, SkippedDocument

__all__ = ["VectorPreprocessor", "PreprocessResult", "SkippedDocument"]
