"""JSON encoding and decoding backed by msgspec."""

from typing import Any

import msgspec

__all__ = ("decode_json", "encode_json")

_encoder = msgspec.json.Encoder(enc_hook=str)
_decoder = msgspec.json.Decoder()


def encode_json(data: Any, *, as_bytes: bool = False) -> "str | bytes":
    """Encode data to JSON.

    Values msgspec cannot natively encode fall back to their ``str()`` form.

    Args:
        data: Data to encode.
        as_bytes: Whether to return bytes instead of a string.

    Returns:
        JSON string or bytes.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: "str | bytes") -> Any:
    """Decode a JSON document into python objects."""
    return _decoder.decode(data)
