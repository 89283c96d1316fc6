"""Data URL helpers for image attachments."""

import base64

# Images are always sent to the model as JPEG regardless of the upload type.
MODEL_IMAGE_MIME = "image/jpeg"


def encode_data_url(content: bytes, mime_type: str | None) -> str:
    """Encode raw image bytes as a base64 data URL for display and sending."""
    mime = mime_type or "application/octet-stream"
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def decode_data_url(data_url: str) -> bytes:
    """Return the raw bytes carried by a data URL.

    Raises:
        ValueError: If the payload is not valid base64.
    """
    _, _, payload = data_url.partition(",")
    return base64.b64decode(payload, validate=True)
