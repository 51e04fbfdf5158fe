"""Built-in document set and demo queries"""

from .documents import DOCUMENTS, DEMO_QUERIES, DEMO_QUESTIONS

__all__ = ["DOCUMENTS", "DEMO_QUERIES", "DEMO_QUESTIONS"]
