# core/data_uri.py
import base64
import binascii
import re

from core.errors import InvalidInputFormat

_DATA_URI_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[^;,]+)*?;base64,(?P<payload>.*)$",
    re.DOTALL,
)


def encode_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as ``data:<mime>;base64,<payload>``."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded bytes.

    Raises InvalidInputFormat if the URI is malformed, the payload is not
    valid base64, or the payload is empty.
    """
    if not isinstance(uri, str):
        raise InvalidInputFormat("Document must be a data URI string.")

    match = _DATA_URI_RE.match(uri.strip())
    if not match:
        raise InvalidInputFormat("Expected format: 'data:<mimetype>;base64,<encoded_data>'.")

    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputFormat(f"Invalid base64 payload: {e}") from e

    if not data:
        raise InvalidInputFormat("Data URI payload is empty.")
    return match.group("mime").lower(), data
