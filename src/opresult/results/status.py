"""HTTP status handling for envelopes.

Status codes travel as :class:`http.HTTPStatus` members and serialize as
their symbolic name. Parsing accepts the member name (``BAD_REQUEST``),
its PascalCase spelling (``BadRequest``) or the integer value.
"""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def parse_status(value: Any) -> HTTPStatus:
    """Coerce *value* into an :class:`HTTPStatus`.

    Raises:
        ValueError: If *value* names no known status.
    """
    if isinstance(value, HTTPStatus):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return HTTPStatus(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return HTTPStatus(int(text))
        name = _CAMEL_BOUNDARY.sub("_", text).upper()
        try:
            return HTTPStatus[name]
        except KeyError:
            pass
    msg = f"Unknown HTTP status: {value!r}"
    raise ValueError(msg)


StatusCode = Annotated[
    HTTPStatus,
    BeforeValidator(parse_status),
    PlainSerializer(lambda s: s.name, return_type=str, when_used="json"),
]
