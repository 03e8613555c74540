"""Resource context keys and request payload helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union
from xml.parsers.expat import ExpatError

import xmltodict

from sincap.randomstr import get_string

_JSON_TYPES = frozenset({"application/json", "application/vnd.api+json"})
_XML_TYPES = frozenset({"application/xml", "text/xml"})


def new_context_key() -> str:
    """Return a new random 32-character context key."""
    return get_string()


@dataclass(frozen=True)
class Resource:
    """A service resource with its path-parameter and body context keys."""

    path_param_ctx_key: str = field(default_factory=new_context_key)
    body_ctx_key: str = field(default_factory=new_context_key)

    @classmethod
    def new(cls) -> "Resource":
        """Return a resource with freshly generated context keys."""
        return cls()


def query_to_map(values: Mapping[str, Sequence[str]]) -> dict[str, str]:
    """Reduce multi-valued query parameters to their first value."""
    return {key: items[0] for key, items in values.items()}


def body_to_map(body: Union[bytes, str], content_type: str) -> dict[str, Any]:
    """Decode a JSON or XML request body into a dictionary.

    XML documents lose their root element. Other content types give an empty dict.
    """
    if content_type in _JSON_TYPES:
        decoded = json.loads(body)
        if not isinstance(decoded, dict):
            raise ValueError("JSON body is not an object")
        return decoded
    if content_type in _XML_TYPES:
        try:
            decoded = xmltodict.parse(body, attr_prefix="-")
        except ExpatError as err:
            raise ValueError(f"invalid XML body: {err}") from err
        for root in decoded.values():
            if not isinstance(root, dict):
                raise ValueError("XML root element holds no child elements")
            return dict(root)
        return {}
    return {}