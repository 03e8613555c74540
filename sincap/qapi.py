"""Parsing of list-query parameters: free text, fields, paging, sorting and filters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping, Optional

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_OPERATOR_CHARS = frozenset("=!<>~|*")


class Operation(IntEnum):
    """Comparison operation of a filter."""

    UNKNOWN = 0
    EQ = 1
    NEQ = 2
    LT = 3
    LTE = 4
    GT = 5
    GTE = 6
    LK = 7
    IN = 8
    IN_ALT = 9

    def __str__(self) -> str:
        return "Unknown" if self is Operation.UNKNOWN else self.name


_OPERATORS = {
    "=": Operation.EQ,
    "!=": Operation.NEQ,
    "<": Operation.LT,
    "<=": Operation.LTE,
    ">": Operation.GT,
    ">=": Operation.GTE,
    "~=": Operation.LK,
    "|=": Operation.IN,
    "*=": Operation.IN_ALT,
}


class Direction(IntEnum):
    """Direction of a sort."""

    UNKNOWN = 0
    ASC = 1
    DSC = 2

    def __str__(self) -> str:
        return _DIRECTION_LABELS[self]


_DIRECTION_LABELS = {
    Direction.UNKNOWN: "Unknown",
    Direction.ASC: "asc",
    Direction.DSC: "desc",
}


class QueryError(ValueError):
    """Base error of query parsing."""


class FilterError(QueryError):
    """A filter parameter could not be parsed."""


class InvalidOperatorError(FilterError):
    """The filter holds no known operator."""

    def __init__(self, message: str = "Invalid operator") -> None:
        super().__init__(message)


class ParamLengthError(FilterError):
    """The filter parameter is too short."""

    def __init__(self, message: str = "Filter param can't be shorter than 3") -> None:
        super().__init__(message)


class MissingNameValueError(FilterError):
    """The filter has an empty name or value.

    ``partial`` holds what was parsed before the check failed.
    """

    def __init__(
        self,
        partial: Optional["Filter"] = None,
        message: str = "Filter name or value can't be empty",
    ) -> None:
        super().__init__(message)
        self.partial = partial


class SortError(QueryError):
    """A sort parameter could not be parsed."""


class QueryNotFoundError(QueryError):
    """None of the query parameters held a usable value."""

    def __init__(self, message: str = "Query not found") -> None:
        super().__init__(message)


@dataclass
class Filter:
    """A single ``name<op>value`` filter."""

    name: str = ""
    operation: Operation = Operation.UNKNOWN
    value: str = ""

    @classmethod
    def parse(cls, param: str) -> "Filter":
        """Parse a filter such as ``age>=35`` or ``hobbies|=chess|go``."""
        param = param.strip()
        if len(param) < 3:
            raise ParamLengthError()
        op = ""
        for ch in param:
            if ch in _OPERATOR_CHARS:
                op += ch
                if len(op) == 2:
                    break
            elif len(op) == 1:
                break
        operation = _OPERATORS.get(op)
        if operation is None:
            raise InvalidOperatorError()
        parts = param.split(op)
        result = cls(name=parts[0].strip(), operation=operation, value=parts[1].strip())
        if not result.name or not result.value:
            raise MissingNameValueError(partial=result)
        return result


@dataclass
class Sort:
    """A sort on one field; ``-name`` sorts descending, ``+name`` ascending."""

    direction: Direction = Direction.UNKNOWN
    name: str = ""

    @classmethod
    def parse(cls, param: str) -> "Sort":
        """Parse a sort parameter."""
        param = param.rstrip(" ")
        if len(param) < 2:
            raise SortError("Sort param can't be shorter than 2")
        first = param[0]
        if first == "-":
            direction = Direction.DSC
        elif first in "+ ":
            direction = Direction.ASC
        else:
            raise SortError("Sort param can only start with - or +")
        return cls(direction=direction, name=param[1:])

    def __str__(self) -> str:
        return f"{self.name} {self.direction}"


def _parse_int(text: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(text):
        return None
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return None
    return number


def _lenient_sort(param: str) -> Sort:
    try:
        return Sort.parse(param)
    except SortError:
        return Sort()


def _lenient_filter(param: str) -> Filter:
    try:
        return Filter.parse(param)
    except MissingNameValueError as err:
        return err.partial if err.partial is not None else Filter()
    except FilterError:
        return Filter()


@dataclass
class Query:
    """Parsed query parameters of a list request."""

    q: str = ""
    fields: list[str] = field(default_factory=list)
    preloads: list[str] = field(default_factory=list)
    offset: int = -1
    limit: int = -1
    sort: list[str] = field(default_factory=list)
    filter: list[Filter] = field(default_factory=list)
    total_count: int = 0

    @classmethod
    def _build(cls, params: Mapping[str, str]) -> tuple["Query", bool]:
        query = cls()
        found = False

        if q := params.get("_q", ""):
            query.q = q
            found = True
        if fields := params.get("_fields", ""):
            query.fields = fields.split(",")
            found = True
        if preloads := params.get("_preloads", ""):
            query.preloads = preloads.split(",")
            found = True
        offset = _parse_int(params.get("_offset", ""))
        if offset is not None:
            query.offset = offset
            found = True
        limit = _parse_int(params.get("_limit", ""))
        if limit is not None:
            query.limit = limit
            found = True
        if sort_param := params.get("_sort", ""):
            query.sort = [str(_lenient_sort(item)) for item in sort_param.split(",")]
            found = True
        if filter_param := params.get("_filter", ""):
            query.filter = [_lenient_filter(item) for item in filter_param.split(",")]
            found = True
        return query, found

    @classmethod
    def parse(cls, params: Mapping[str, str]) -> "Query":
        """Parse the parameters; raise QueryNotFoundError if none held a value."""
        query, found = cls._build(params)
        if not found:
            raise QueryNotFoundError()
        return query

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "Query":
        """Parse the parameters, returning defaults when none held a value."""
        query, _ = cls._build(params)
        return query