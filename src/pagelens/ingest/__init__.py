"""Loading document batches from disk."""

from .loader import load_documents

__all__ = ["load_documents"]
