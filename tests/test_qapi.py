import pytest

from sincap.qapi import (
    Direction,
    Filter,
    InvalidOperatorError,
    MissingNameValueError,
    Operation,
    ParamLengthError,
    Query,
    QueryNotFoundError,
    Sort,
    SortError,
)


@pytest.mark.parametrize(
    "text, name, operation, value",
    [
        ("name=seray", "name", Operation.EQ, "seray"),
        ("name!=seray", "name", Operation.NEQ, "seray"),
        ("age<35", "age", Operation.LT, "35"),
        ("age<=35", "age", Operation.LTE, "35"),
        ("age>35", "age", Operation.GT, "35"),
        ("age>=35", "age", Operation.GTE, "35"),
        ("hobbies~=chess", "hobbies", Operation.LK, "chess"),
        ("hobbies|=chess", "hobbies", Operation.IN, "chess"),
        ("hobbies|=chess|go", "hobbies", Operation.IN, "chess|go"),
        ("hobbies*=chess*go", "hobbies", Operation.IN_ALT, "chess*go"),
    ],
)
def test_filter_parse(text, name, operation, value):
    parsed = Filter.parse(text)
    assert str(parsed.operation) == str(operation)
    assert parsed.name == name
    assert parsed.value == value


@pytest.mark.parametrize(
    "text, error",
    [
        ("", ParamLengthError),
        ("asdsds", InvalidOperatorError),
        ("abc=", MissingNameValueError),
        ("=abc", MissingNameValueError),
    ],
)
def test_filter_parse_errors(text, error):
    with pytest.raises(error):
        Filter.parse(text)


def test_filter_error_messages():
    with pytest.raises(ParamLengthError, match="shorter than 3"):
        Filter.parse("a")
    with pytest.raises(InvalidOperatorError, match="Invalid operator"):
        Filter.parse("a==b")


def test_filter_trims_spaces():
    assert Filter.parse("  age >= 35 ") == Filter("age", Operation.GTE, "35")


def test_missing_value_keeps_partial():
    with pytest.raises(MissingNameValueError) as info:
        Filter.parse("abc=")
    assert info.value.partial == Filter("abc", Operation.EQ, "")


def test_operation_names():
    assert str(Filter().operation) == "Unknown"
    assert str(Filter.parse("a*=b").operation) == "IN_ALT"


@pytest.mark.parametrize("text", ["", "   ", "1", "1   ", "_sample"])
def test_sort_parse_errors(text):
    with pytest.raises(SortError):
        Sort.parse(text)


@pytest.mark.parametrize(
    "text, direction",
    [("-sample", Direction.DSC), ("+sample", Direction.ASC), (" sample", Direction.ASC)],
)
def test_sort_parse(text, direction):
    parsed = Sort.parse(text)
    assert parsed.direction == direction
    assert parsed.name == "sample"


def test_sort_str():
    assert str(Sort.parse("-manufacturer")) == "manufacturer desc"
    assert str(Sort()) == " Unknown"


def test_query():
    params = {
        "_q": "nissan",
        "_fields": "manufacturer,model,id,color",
        "_offset": "10",
        "_limit": "5",
        "_sort": "-manufacturer,+model",
        "_filter": "name=seray,active!=true,order|=1|2,orderAlt*=1*2",
    }
    query = Query.parse(params)
    assert query.q == "nissan"
    assert query.fields == ["manufacturer", "model", "id", "color"]
    assert query.offset == 10
    assert query.limit == 5
    assert query.sort == ["manufacturer desc", "model asc"]
    assert query.filter == [
        Filter(name="name", operation=Operation.EQ, value="seray"),
        Filter(name="active", operation=Operation.NEQ, value="true"),
        Filter(name="order", operation=Operation.IN, value="1|2"),
        Filter(name="orderAlt", operation=Operation.IN_ALT, value="1*2"),
    ]


def test_query_just_limit():
    query = Query.parse({"_offset": "10", "_limit": "5"})
    assert query.q == ""
    assert query.fields == []
    assert query.offset == 10
    assert query.limit == 5
    assert query.sort == []
    assert query.filter == []


def test_query_not_found():
    with pytest.raises(QueryNotFoundError):
        Query.parse({"_q": "", "_offset": "abc"})


def test_from_params_defaults():
    query = Query.from_params({"_offset": "abc"})
    assert query.offset == -1
    assert query.limit == -1
    assert query.preloads == []


def test_query_preloads_and_bad_parts():
    query = Query.parse({"_preloads": "a,b", "_sort": "x", "_filter": "abc=,zz"})
    assert query.preloads == ["a", "b"]
    assert query.sort == [" Unknown"]
    assert query.filter == [Filter("abc", Operation.EQ, ""), Filter()]