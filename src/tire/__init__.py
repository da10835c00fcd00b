"""
tire – client and query DSL for a JSON-over-HTTP full-text search engine.

Import path convention::

    import tire

    tire.configure(url="http://localhost:9200")
    s = tire.search("articles").query(lambda q: q.string("title:T*"))
    for article in s.results:
        print(article.title)
"""

from tire.config import Configuration, configure, reset
from tire.errors import (
    ConfigurationError,
    MalformedResponseError,
    TireError,
    TransportError,
)
from tire.index import Index, index
from tire.search import Facet, Item, Query, Results, Search, Sort, search

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "ConfigurationError",
    "Facet",
    "Index",
    "Item",
    "MalformedResponseError",
    "Query",
    "Results",
    "Search",
    "Sort",
    "TireError",
    "TransportError",
    "__version__",
    "configure",
    "index",
    "reset",
    "search",
]
