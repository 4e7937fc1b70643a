from urllib.parse import unquote

import pytest
from pydantic import ValidationError

from rbs_client import Filter, FilterOperator, QueryBuilder


def _as_strings(search_filter):
    rendered = []
    for v in search_filter.operands:
        rendered.append(("true" if v else "false") if isinstance(v, bool) else str(v))
    return rendered


def test_empty_filter_list_encodes_to_empty_string():
    assert QueryBuilder.filters_to_query_string([]) == ""
    assert QueryBuilder.query_string_to_filters("") == []


def test_encoding_is_deterministic():
    filters = [
        Filter(field="brand", operator=FilterOperator.IN, value=["nike", "adidas"]),
        Filter(field="price", operator=FilterOperator.RANGE, value=[10, 99.5]),
    ]
    first = QueryBuilder.filters_to_query_string(filters)
    assert all(QueryBuilder.filters_to_query_string(filters) == first for _ in range(5))


def test_encoded_form_is_percent_encoded():
    filters = [
        Filter(field="color", operator=FilterOperator.EQUAL, value="red"),
        Filter(field="size", operator=FilterOperator.IN, value=["M", "L"]),
    ]
    encoded = QueryBuilder.filters_to_query_string(filters)

    assert unquote(encoded) == "color:red;size~M,L"
    assert ";" not in encoded and ":" not in encoded and "," not in encoded


@pytest.mark.parametrize(
    "operator,value,wire",
    [
        (FilterOperator.EQUAL, "red", "f:red"),
        (FilterOperator.NOT_EQUAL, "red", "f!:red"),
        (FilterOperator.GREATER_THAN, 5, "f>5"),
        (FilterOperator.GREATER_THAN_OR_EQUAL, 5, "f>:5"),
        (FilterOperator.LESS_THAN, 2.5, "f<2.5"),
        (FilterOperator.LESS_THAN_OR_EQUAL, 2.5, "f<:2.5"),
        (FilterOperator.IN, ["a", "b", "c"], "f~a,b,c"),
        (FilterOperator.RANGE, [1, 10], "f<>1,10"),
    ],
)
def test_every_operator_round_trips(operator, value, wire):
    original = Filter(field="f", operator=operator, value=value)
    encoded = QueryBuilder.filters_to_query_string([original])

    assert unquote(encoded) == wire

    [decoded] = QueryBuilder.query_string_to_filters(encoded)
    assert decoded.field == original.field
    assert decoded.operator is original.operator
    assert list(decoded.operands) == _as_strings(original)


def test_booleans_render_lowercase():
    f = Filter(field="inStock", operator=FilterOperator.EQUAL, value=True)
    assert unquote(QueryBuilder.filters_to_query_string([f])) == "inStock:true"


def test_reserved_characters_do_not_corrupt_adjacent_filters():
    filters = [
        Filter(field="title", operator=FilterOperator.EQUAL, value="a;b,c:d"),
        Filter(field="tags", operator=FilterOperator.IN, value=["x,y", "<z>", "back\\slash", "~!"]),
        Filter(field="we:ird;field", operator=FilterOperator.NOT_EQUAL, value=""),
        Filter(field="price", operator=FilterOperator.GREATER_THAN, value=":5"),
    ]
    decoded = QueryBuilder.query_string_to_filters(QueryBuilder.filters_to_query_string(filters))

    assert [(f.field, f.operator, f.value) for f in decoded] == [
        ("title", FilterOperator.EQUAL, "a;b,c:d"),
        ("tags", FilterOperator.IN, ("x,y", "<z>", "back\\slash", "~!")),
        ("we:ird;field", FilterOperator.NOT_EQUAL, ""),
        ("price", FilterOperator.GREATER_THAN, ":5"),
    ]


def test_order_is_preserved():
    filters = [Filter(field=name, operator=FilterOperator.EQUAL, value=1) for name in "zyx"]
    decoded = QueryBuilder.query_string_to_filters(QueryBuilder.filters_to_query_string(filters))
    assert [f.field for f in decoded] == ["z", "y", "x"]


def test_unknown_operator_fails_fast():
    bogus = Filter.model_construct(field="f", operator="LIKE", value="x")
    with pytest.raises(ValueError, match="Unsupported filter operator"):
        QueryBuilder.filters_to_query_string([bogus])


def test_unknown_operator_symbol_is_rejected_when_parsing():
    with pytest.raises(ValueError, match="Unknown filter operator symbol"):
        QueryBuilder.query_string_to_filters("f%3E%3Ex")


def test_filter_is_immutable():
    f = Filter(field="f", operator=FilterOperator.EQUAL, value="x")
    with pytest.raises(ValidationError):
        f.value = "y"


@pytest.mark.parametrize(
    "operator,value",
    [
        (FilterOperator.EQUAL, ["a", "b"]),
        (FilterOperator.IN, "a"),
        (FilterOperator.IN, []),
        (FilterOperator.RANGE, [1]),
        (FilterOperator.RANGE, [1, 2, 3]),
    ],
)
def test_operator_arity_is_validated(operator, value):
    with pytest.raises(ValidationError):
        Filter(field="f", operator=operator, value=value)


def test_operator_outside_enum_is_rejected_at_construction():
    with pytest.raises(ValidationError):
        Filter(field="f", operator="LIKE", value="x")
