"""Search – request assembly and result materialization."""
from tire.search.facet import DateHistogramFacet, Facet, FacetDefinition, TermsFacet
from tire.search.filter import Filter, combine_filters
from tire.search.highlight import Highlight
from tire.search.query import (
    IdsQuery,
    MatchAllQuery,
    Query,
    QueryClause,
    StringQuery,
    TermQuery,
    TermsQuery,
)
from tire.search.request import Search, search
from tire.search.results import Item, Results, materialize
from tire.search.sort import Sort, SortClause

__all__ = [
    "DateHistogramFacet",
    "Facet",
    "FacetDefinition",
    "Filter",
    "Highlight",
    "IdsQuery",
    "Item",
    "MatchAllQuery",
    "Query",
    "QueryClause",
    "Results",
    "Search",
    "Sort",
    "SortClause",
    "StringQuery",
    "TermQuery",
    "TermsFacet",
    "TermsQuery",
    "combine_filters",
    "materialize",
    "search",
]
