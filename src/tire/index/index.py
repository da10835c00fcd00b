"""Index – lifecycle and document operations for a single index.

These are thin pass-through calls to the engine's REST API::

    articles = Index("articles")
    articles.delete()
    articles.create(mappings={"article": {"properties": {...}}})
    articles.import_(documents, transform=lambda batch: [...])
    articles.refresh()
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from tire.config import Configuration
from tire.errors import TransportError
from tire.index.bulk import batches, bulk_body, document_id, document_to_dict, document_type
from tire.logging import get_logger
from tire.search.results import Item
from tire.transport import Transport

_log = get_logger(__name__)

Transform = Callable[[list[Any]], Iterable[Any]]


class Index:
    """Administrative handle on the index called *name*."""

    def __init__(self, name: str, *, transport: Transport | None = None) -> None:
        self.name = name
        self._transport = transport

    def __repr__(self) -> str:
        return f"Index({self.name!r})"

    @property
    def transport(self) -> Transport:
        """The transport given at construction, else the shared one from :class:`Configuration`."""
        if self._transport is not None:
            return self._transport
        return Configuration.transport()

    @property
    def url(self) -> str:
        return f"{self.transport.url}/{self.name}"

    # -- lifecycle -----------------------------------------------------------

    def exists(self) -> bool:
        try:
            self.transport.execute("HEAD", f"/{self.name}")
        except TransportError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True

    def create(
        self,
        mappings: dict[str, Any] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if settings:
            body["settings"] = settings
        if mappings:
            body["mappings"] = mappings
        return self.transport.execute("PUT", f"/{self.name}", body or None)

    def delete(self) -> bool:
        """Delete the index; ``False`` when it did not exist."""
        try:
            self.transport.execute("DELETE", f"/{self.name}")
        except TransportError as exc:
            if exc.status_code == 404:
                _log.info("index_missing", index=self.name)
                return False
            raise
        return True

    def refresh(self) -> dict[str, Any]:
        return self.transport.execute("POST", f"/{self.name}/_refresh")

    def mapping(self) -> dict[str, Any]:
        response = self.transport.execute("GET", f"/{self.name}/_mapping")
        return response.get(self.name, response)

    # -- documents -----------------------------------------------------------

    def store(self, document: Any, type: str | None = None, id: str | None = None) -> dict[str, Any]:  # noqa: A002
        """Index one document; PUT when an id is known, POST otherwise."""
        body = document_to_dict(document)
        doc_type = type or document_type(body)
        doc_id = id or document_id(body)
        if doc_id is None:
            return self.transport.execute("POST", f"/{self.name}/{doc_type}", body)
        return self.transport.execute("PUT", f"/{self.name}/{doc_type}/{doc_id}", body)

    def retrieve(self, type: str, id: str) -> Item | None:  # noqa: A002
        """Fetch a document by type and id; ``None`` when missing."""
        try:
            response = self.transport.execute("GET", f"/{self.name}/{type}/{id}")
        except TransportError as exc:
            if exc.status_code == 404:
                return None
            raise
        if response.get("exists") is False or response.get("found") is False:
            return None
        attributes = dict(response.get("_source") or {})
        attributes["id"] = response.get("_id", id)
        attributes["_type"] = response.get("_type", type)
        return Item(attributes)

    def remove(self, type: str, id: str) -> dict[str, Any]:  # noqa: A002
        return self.transport.execute("DELETE", f"/{self.name}/{type}/{id}")

    def bulk_store(self, documents: Iterable[Any]) -> dict[str, Any]:
        body = bulk_body(self.name, documents)
        if not body:
            return {"items": []}
        response = self.transport.execute("POST", "/_bulk", body)
        failed = [
            item for item in response.get("items", [])
            if any(isinstance(v, dict) and v.get("error") for v in item.values())
        ]
        if failed:
            _log.warning("bulk_items_failed", index=self.name, failed=len(failed))
        return response

    def import_(
        self,
        documents: Iterable[Any],
        transform: Transform | None = None,
        per_page: int = 1000,
    ) -> int:
        """Bulk-store *documents* in batches of *per_page*.

        *transform* receives each batch and returns the documents to store.
        Returns the number of documents sent.
        """
        sent = 0
        for batch in batches(documents, per_page):
            prepared = list(transform(batch)) if transform is not None else batch
            self.bulk_store(prepared)
            sent += len(prepared)
        _log.info("import_finished", index=self.name, documents=sent)
        return sent


def index(name: str, *, transport: Transport | None = None) -> Index:
    return Index(name, transport=transport)


__all__ = ["Index", "index"]
