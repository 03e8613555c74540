"""Request helpers for list queries and body field checks."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from sincap.qapi import Query

QUERY_KEYS = ("_q", "_fields", "_preloads", "_offset", "_limit", "_sort", "_filter")

_M = TypeVar("_M", bound=Mapping)


class ForbiddenFieldError(ValueError):
    """A request body holds a field that may not be updated."""

    status = 422

    def __init__(self, field: str) -> None:
        super().__init__(f"You cannot update {field} Field")
        self.field = field


def parse_qapi(query_params: Mapping[str, str]) -> Query:
    """Build a Query from request parameters; missing parameters give defaults."""
    params = {key: query_params.get(key, "") for key in QUERY_KEYS}
    return Query.from_params(params)


def check_forbidden_fields(record: _M, forbidden_fields: Iterable[str]) -> _M:
    """Return ``record`` or raise ForbiddenFieldError for the first forbidden field in it."""
    for field in forbidden_fields:
        if field in record:
            raise ForbiddenFieldError(field)
    return record


__all__: list[Any] = ["ForbiddenFieldError", "parse_qapi", "check_forbidden_fields"]