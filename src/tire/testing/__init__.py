"""Testing support – in-memory transport for tests and examples."""
from tire.testing.fakes import InMemoryTransport, RecordedRequest

__all__ = ["InMemoryTransport", "RecordedRequest"]
