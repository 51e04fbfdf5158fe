"""pocketrag - retrieval over pre-computed sentence embeddings"""

__version__ = "0.1.0"
