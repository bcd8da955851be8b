"""Response decoding shared by the dispatcher and the upload service."""

import json
from typing import Any, Optional

from smugwrap.core.exceptions import RemoteError
from smugwrap.core.protocols import TransportResponse


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def check_failure_status(data: Any, response: TransportResponse) -> None:
    """Raise if a decoded JSON body carries an embedded failure status.

    The service reports some failures inside a 2xx body as
    ``{"stat": "fail", "code": 5, "message": "..."}``.

    Raises:
        RemoteError: With the embedded code and message.
    """
    if not isinstance(data, dict) or str(data.get("stat", "")).lower() != "fail":
        return
    code = data.get("code", data.get("Code"))
    message = data.get("message", data.get("Message")) or "Unknown error"
    raise RemoteError(
        f"SmugMug API error: {message}",
        status_code=response.status_code,
        code=_as_int(code),
        body=response.text,
    )


def decode_response(response: TransportResponse, json_content_type: str) -> Any:
    """Decode a successful response based on its content type.

    JSON bodies (primary content-type token equal to ``json_content_type``)
    are parsed and checked for an embedded failure status; anything else is
    returned as text, unparsed.

    Raises:
        RemoteError: If the JSON is malformed or reports failure.
    """
    if response.content_type != json_content_type.lower():
        return response.text

    if not response.body.strip():
        return None

    try:
        data = json.loads(response.body)
    except ValueError as e:
        raise RemoteError(
            "Malformed JSON in response",
            status_code=response.status_code,
            body=response.text,
        ) from e

    check_failure_status(data, response)
    return data
