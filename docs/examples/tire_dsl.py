"""Walkthrough: indexing, searching, faceting, sorting and highlighting.

Requires a search engine listening on ``http://localhost:9200``.

Run with::

    pip install -e .
    python docs/examples/tire_dsl.py
"""
from __future__ import annotations

import sys

import httpx

import tire
from tire import Facet, Query, Sort

URL = "http://localhost:9200"

try:
    httpx.get(URL, timeout=2.0)
except httpx.HTTPError:
    sys.exit(f"[ERROR] No search engine is reachable at {URL}. Start one and try again.")


def show(results, extra=lambda d: f"tags: {', '.join(d.tags)}") -> None:
    for document in results:
        print(f"* {document.title} [{extra(document)}]")


def show_terms(results, facet: str) -> None:
    for entry in results.facets[facet]["terms"]:
        print(f"{entry['term'].ljust(10)} {entry['count']}")


# Storing documents one by one. Documents without an id get one from the engine.
articles = tire.index("articles")
articles.delete()
articles.create()
articles.store({"title": "One", "tags": ["ruby"], "published_on": "2011-01-01"})
articles.store({"title": "Two", "tags": ["ruby", "python"], "published_on": "2011-01-02"})
articles.store({"title": "Three", "tags": ["java"], "published_on": "2011-01-02"})
articles.store({"title": "Four", "tags": ["ruby", "php"], "published_on": "2011-01-03"})
articles.refresh()

# Creating the index with an explicit mapping.
articles.delete()
articles.create(
    mappings={
        "article": {
            "properties": {
                "id": {"type": "string", "index": "not_analyzed", "include_in_all": False},
                "title": {"type": "string", "analyzer": "snowball", "boost": 2.0},
                "tags": {"type": "string", "analyzer": "keyword"},
                "content": {"type": "string", "analyzer": "czech"},
            }
        }
    }
)

documents = [
    {"id": "1", "title": "one", "tags": ["ruby"], "published_on": "2011-01-01"},
    {"id": "2", "title": "two", "tags": ["ruby", "python"], "published_on": "2011-01-02"},
    {"id": "3", "title": "three", "tags": ["java"], "published_on": "2011-01-02"},
    {"id": "4", "title": "four", "tags": ["ruby", "php"], "published_on": "2011-01-03"},
]

# Bulk import, with a transform applied to every batch before it is sent.
articles.delete()
articles.import_(
    documents,
    transform=lambda batch: [{**d, "title": d["title"].capitalize()} for d in batch],
)
articles.refresh()

# Query-string searches. A query can be given as a callable filling a builder...
s = tire.search("articles").query(lambda q: q.string("title:One"))
show(s.results)

s = tire.search("articles").query(lambda q: q.string("published_on:[2011-01-01 TO 2011-01-02]"))
show(s.results, lambda d: f"published: {d.published_on}")

# ...or as a finished builder.
s = tire.search("articles").query(Query().string("title:T*"))
show(s.results)

print("", "Query:", "-" * 80, s.to_json(), sep="\n")
print("", "Try the query in Curl:", "-" * 80, s.to_curl(), sep="\n")

# Request logging in curl form, to a file or a stream.
tire.configure(logger=sys.stderr, log_level="debug")

# Terms queries: any of the values, or at least `minimum_match` of them.
s = tire.search("articles").query(lambda q: q.terms("tags", ["ruby", "python"]))
show(s.results)

s = tire.search("articles").query(lambda q: q.terms("tags", ["ruby", "python"], minimum_match=2))
show(s.results)

# Facets.
s = (
    tire.search("articles")
    .query(lambda q: q.string("title:T*"))
    .facet("tags", lambda f: f.terms("tags"))
)
print(f"Found {s.results.count()} articles: {', '.join(d.title for d in s.results)}")
print("Counts by tag:", "-" * 25, sep="\n")
show_terms(s.results, "tags")

# A global facet counts over the whole index, ignoring the query.
s = (
    tire.search("articles")
    .query(lambda q: q.string("title:T*"))
    .facet("global-tags", Facet().terms("tags", global_=True))
    .facet("current-tags", Facet().terms("tags"))
)
print("Current query facets:", "-" * 25, sep="\n")
show_terms(s.results, "current-tags")
print("Global facets:", "-" * 25, sep="\n")
show_terms(s.results, "global-tags")

# Filters restrict the hits but leave facet counts alone.
s = (
    tire.search("articles")
    .query(lambda q: q.string("title:T*"))
    .filter("terms", tags=["ruby"])
    .facet("tags", lambda f: f.terms("tags"))
)
show(s.results)
print("Counts by tag:", "-" * 25, sep="\n")
show_terms(s.results, "tags")

s = tire.search("articles").query(lambda q: q.string("tags:ruby"))
show(s.results, lambda d: f"tags: {', '.join(d.tags)}; score: {d._score}")

# Sorting.
s = tire.search("articles").query(lambda q: q.string("tags:ruby")).sort("title", "desc")
for document in s.results:
    print(f"* {document.title}")

s = (
    tire.search("articles")
    .query(lambda q: q.all())
    .sort(Sort().by("published_on").by("title", "desc"))
)
for document in s.results:
    print(f"* {document.title.ljust(10)}  (Published on: {document.published_on})")

# Highlighting.
s = tire.search("articles").query(lambda q: q.string("title:Two")).highlight("title")
for document in s.results:
    print(f"Title: {document.title}; Highlighted: {document.highlight.title}")

s = (
    tire.search("articles")
    .query(lambda q: q.string("title:Two"))
    .highlight("title", options={"tag": '<strong class="highlight">'})
)
for document in s.results:
    print(f"Title: {document.title}; Highlighted: {document.highlight.title}")

tire.reset()
