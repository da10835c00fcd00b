"""Transport – JSON over HTTP to the search engine."""
from tire.transport.client import HttpxTransport, request_label
from tire.transport.protocol import Transport

__all__ = ["HttpxTransport", "Transport", "request_label"]
