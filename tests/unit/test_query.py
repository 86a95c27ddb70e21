"""Query builder tests."""

import httpx

from flowdeck.contracts import FilterSet, SortSpec
from flowdeck.query import (
    build_filter_clauses,
    build_orderby,
    build_query_params,
    build_request_url,
    escape_literal,
)


def test_search_quotes_are_doubled():
    filters = FilterSet(search_text="O'Brien's flow")
    clauses = build_filter_clauses(filters)

    assert clauses == [
        "(contains(name, 'O''Brien''s flow') or contains(uniquename, 'O''Brien''s flow'))"
    ]
    # Every quote inside the literal is paired, so the clause stays a single
    # literal per contains() call.
    literal = clauses[0].split("contains(name, ")[1].split(") or")[0]
    assert literal.startswith("'") and literal.endswith("'")
    assert "'" not in literal[1:-1].replace("''", "")


def test_injection_attempt_stays_inside_literal():
    term = "x') or (statecode eq 0"
    params = build_query_params(SortSpec(), FilterSet(search_text=term))

    assert params["$filter"].count("contains(name, 'x'') or (statecode eq 0')") == 1
    assert " and " not in params["$filter"]


def test_escape_literal_without_quotes_is_identity():
    assert escape_literal("plain") == "plain"


def test_category_omitted_when_none_or_negative():
    assert build_filter_clauses(FilterSet(category=None)) == []
    assert build_filter_clauses(FilterSet(category=-1)) == []
    assert "category eq" not in build_query_params(
        SortSpec(), FilterSet(category=-1, status=1)
    )["$filter"]


def test_category_zero_is_kept():
    assert build_filter_clauses(FilterSet(category=0)) == ["category eq 0"]


def test_clauses_joined_in_order():
    filters = FilterSet(search_text="inv", category=5, status=1)
    params = build_query_params(SortSpec(), filters)

    assert params["$filter"] == (
        "statecode eq 1 and "
        "(contains(name, 'inv') or contains(uniquename, 'inv')) and "
        "category eq 5"
    )


def test_empty_filters_send_no_filter_parameter():
    params = build_query_params(SortSpec(), FilterSet(), page_size=25)

    assert params == {"$top": "25", "$count": "true", "$orderby": "modifiedon desc"}


def test_orderby_defaults_when_field_unset():
    assert build_orderby(SortSpec(field=None)) == "modifiedon desc"
    assert build_orderby(SortSpec(field=None, direction="ascending")) == "modifiedon desc"


def test_orderby_uses_field_and_direction():
    assert build_orderby(SortSpec(field="name", direction="ascending")) == "name asc"
    assert build_orderby(SortSpec(field="createdon")) == "createdon desc"


def test_request_url_round_trips_parameters():
    url = build_request_url(
        "https://org.crm.dynamics.com/api/data/v9.2/workflows",
        SortSpec(field="name", direction="ascending"),
        FilterSet(search_text="a b", status=0),
    )
    parsed = httpx.URL(url)

    assert parsed.host == "org.crm.dynamics.com"
    assert parsed.path == "/api/data/v9.2/workflows"
    assert parsed.params["$top"] == "50"
    assert parsed.params["$count"] == "true"
    assert parsed.params["$orderby"] == "name asc"
    assert parsed.params["$filter"].startswith("statecode eq 0 and (contains(name, 'a b')")
