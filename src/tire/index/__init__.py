"""Index – index administration and document storage."""
from tire.index.bulk import bulk_body
from tire.index.index import Index, index

__all__ = ["Index", "bulk_body", "index"]
