"""Unit tests for the result materializer."""

from __future__ import annotations

import pytest

from tire.errors import MalformedResponseError
from tire.search import Item, Results, materialize


def _response() -> dict:
    return {
        "took": 3,
        "hits": {
            "total": 2,
            "max_score": 1.0,
            "hits": [
                {
                    "_index": "articles",
                    "_type": "article",
                    "_id": "2",
                    "_score": 1.0,
                    "_source": {"title": "Two", "tags": ["ruby", "python"]},
                    "highlight": {"title": ["<em>Two</em>"]},
                },
                {
                    "_index": "articles",
                    "_type": "article",
                    "_id": "3",
                    "_score": 0.5,
                    "_source": {"title": "Three", "tags": ["java"]},
                },
            ],
        },
        "facets": {
            "tags": {
                "_type": "terms",
                "terms": [
                    {"term": "ruby", "count": 1},
                    {"term": "python", "count": 1},
                    {"term": "java", "count": 1},
                ],
            }
        },
    }


HIGHLIGHT_REQUEST = {"query": {"query_string": {"query": "title:T*"}}, "highlight": {"fields": {"title": {}}}}


class TestItem:
    def test_attribute_and_key_access(self) -> None:
        item = Item({"title": "One", "tags": ["ruby"]})
        assert item.title == "One"
        assert item["tags"] == ("ruby",)

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            Item({"title": "One"}).body

    def test_immutable(self) -> None:
        item = Item(title="One")
        with pytest.raises(AttributeError):
            item.title = "Two"  # type: ignore[misc]

    def test_nested_mappings_wrapped(self) -> None:
        item = Item({"author": {"name": "Karel"}, "comments": [{"body": "hi"}, "plain"]})
        assert item.author.name == "Karel"
        assert item.comments[0].body == "hi"
        assert item.comments[1] == "plain"

    def test_to_dict_unwraps(self) -> None:
        data = {"author": {"name": "Karel"}, "comments": [{"body": "hi"}]}
        assert Item(data).to_dict() == data

    def test_equality_with_mapping(self) -> None:
        assert Item(title="One") == {"title": "One"}


class TestMaterialize:
    def test_count_and_order(self) -> None:
        results = materialize(_response())
        assert results.count() == 2
        assert len(results) == 2
        assert [r.title for r in results] == ["Two", "Three"]

    def test_score_and_metadata(self) -> None:
        first = materialize(_response())[0]
        assert first._score == 1.0
        assert first.id == "2"
        assert first._type == "article"
        assert first._index == "articles"

    def test_totals(self) -> None:
        results = materialize(_response())
        assert results.total == 2
        assert results.max_score == 1.0
        assert results.took == 3

    def test_total_object_form(self) -> None:
        response = _response()
        response["hits"]["total"] = {"value": 42, "relation": "eq"}
        assert materialize(response).total == 42

    def test_facets_copied_verbatim(self) -> None:
        results = materialize(_response())
        assert results.facets["tags"]["terms"] == [
            {"term": "ruby", "count": 1},
            {"term": "python", "count": 1},
            {"term": "java", "count": 1},
        ]

    def test_no_facets(self) -> None:
        response = _response()
        del response["facets"]
        assert materialize(response).facets == {}

    def test_highlight_attached_when_requested(self) -> None:
        results = materialize(_response(), HIGHLIGHT_REQUEST)
        assert results[0].highlight.title == ("<em>Two</em>",)
        assert results[1].get("highlight") is None

    def test_absent_highlight_field_is_not_an_error(self) -> None:
        results = materialize(_response(), HIGHLIGHT_REQUEST)
        assert results[0].highlight.get("body") is None

    def test_highlight_ignored_when_not_requested(self) -> None:
        results = materialize(_response(), {"query": {"match_all": {}}})
        assert "highlight" not in results[0]

    def test_fields_used_without_source(self) -> None:
        response = {"hits": {"total": 1, "hits": [{"_id": "1", "_score": 1.0, "fields": {"title": "One"}}]}}
        assert materialize(response)[0].title == "One"

    def test_zero_hits_is_empty_results(self) -> None:
        results = materialize({"hits": {"total": 0, "hits": []}})
        assert isinstance(results, Results)
        assert results.count() == 0
        assert not results
        assert list(results) == []

    def test_missing_hits_section(self) -> None:
        with pytest.raises(MalformedResponseError):
            materialize({"took": 1})

    def test_hits_not_a_list(self) -> None:
        with pytest.raises(MalformedResponseError):
            materialize({"hits": {"total": 1, "hits": {"_id": "1"}}})

    def test_custom_wrapper(self) -> None:
        results = materialize(_response(), wrapper=dict)
        assert type(results[0]) is dict
        assert results[0]["title"] == "Two"
        assert results[0]["_score"] == 1.0


class TestDocumentAttributesWin:
    def test_fields_named_like_mapping_methods(self) -> None:
        results = materialize(
            {"hits": {"total": 1, "hits": [{"_id": "1", "_source": {"items": ["a", "b"], "values": [1], "get": "x"}}]}}
        )
        item = results[0]
        assert item.items == ("a", "b")
        assert item.values == (1,)
        assert item.get == "x"

    def test_mapping_methods_without_clash(self) -> None:
        item = Item(title="One")
        assert item.get("title") == "One"
        assert list(item.keys()) == ["title"]

    def test_to_dict_via_class_when_shadowed(self) -> None:
        item = Item({"to_dict": "field", "title": "One"})
        assert item.to_dict == "field"
        assert Item.to_dict(item) == {"to_dict": "field", "title": "One"}

    def test_equality_when_shadowed(self) -> None:
        assert Item({"items": [1]}) == {"items": [1]}


class TestImmutability:
    def test_lists_become_tuples(self) -> None:
        item = Item({"tags": ["ruby"]})
        with pytest.raises(AttributeError):
            item.tags.append("java")  # type: ignore[attr-defined]
        assert item.to_dict() == {"tags": ["ruby"]}

    def test_item_independent_of_response(self) -> None:
        response = _response()
        results = materialize(response)
        response["hits"]["hits"][0]["_source"]["tags"].append("php")
        assert results[0].tags == ("ruby", "python")

    def test_facets_are_read_only(self) -> None:
        results = materialize(_response())
        with pytest.raises(TypeError):
            results.facets["extra"] = {}  # type: ignore[index]

    def test_facets_independent_of_response(self) -> None:
        response = _response()
        results = materialize(response)
        response["facets"]["tags"]["terms"].clear()
        assert len(results.facets["tags"]["terms"]) == 3


class TestTotals:
    def test_null_total_falls_back_to_hit_count(self) -> None:
        response = _response()
        response["hits"]["total"] = None
        assert materialize(response).total == 2

    def test_null_total_value_falls_back(self) -> None:
        response = _response()
        response["hits"]["total"] = {"value": None}
        assert materialize(response).total == 2

    def test_unusable_total(self) -> None:
        response = _response()
        response["hits"]["total"] = "many"
        with pytest.raises(MalformedResponseError):
            materialize(response)
