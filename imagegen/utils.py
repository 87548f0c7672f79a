import base64
import binascii
import re

DEFAULT_IMAGE_MIME_TYPE = "image/png"

_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


def to_data_url(data: bytes | str, mime_type: str | None = None) -> str:
    """
    Encode image data as a ``data:`` URL.

    Args:
        data: Raw image bytes, or a string that is already base64 encoded.
        mime_type: Declared media type. Falls back to ``image/png`` when empty.

    Returns:
        str: ``data:<mime>;base64,<payload>``
    """
    if isinstance(data, (bytes, bytearray)):
        payload = base64.b64encode(bytes(data)).decode("ascii")
    else:
        payload = data
    return f"data:{mime_type or DEFAULT_IMAGE_MIME_TYPE};base64,{payload}"


def parse_data_url(url: str) -> tuple[str, bytes]:
    """Split a base64 ``data:`` URL into its media type and decoded bytes."""
    match = _DATA_URL_PATTERN.match(url)
    if not match:
        raise ValueError("Not a base64 data URL.")
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc
    return match.group("mime"), payload
