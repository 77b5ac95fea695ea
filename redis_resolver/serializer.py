"""
Encodes resolved locations for storage. A location is stored as a JSON string
and the absence marker as JSON null, so an entry cached as "not found" can
never be confused with a key that was never written.
"""

import json
import os
from typing import Any, Optional, Union


class JSONEncoder(json.JSONEncoder):
    """
    JSON encoder that also accepts path-like objects.

    Supports:
    - str
    - None
    - os.PathLike (pathlib.Path and friends), stored as its string path
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, os.PathLike):
            return os.fspath(obj)

        return super().default(obj)


def serialize(value: Any) -> bytes:
    """
    Serialize a location (or the absence marker) to bytes.

    :param value: A string path, a path-like object, or None
    :return: Serialized bytes
    :raises ValueError: If the value is not a location
    """
    if value is not None and not isinstance(value, (str, os.PathLike)):
        raise ValueError(
            f"Cannot serialize {type(value).__name__!s}; expected a path or None"
        )

    try:
        json_str = json.dumps(value, cls=JSONEncoder, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Failed to serialize location: {str(e)}") from e
    return json_str.encode('utf-8')


def deserialize(data: Union[bytes, str]) -> Optional[str]:
    """
    Deserialize stored bytes back to a location.

    Accepts str as well, for clients created with decode_responses=True.

    :param data: Serialized bytes
    :return: The stored path, or None for a cached "not found"
    :raises ValueError: If the data is not a stored location
    """
    if isinstance(data, bytes):
        try:
            data = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ValueError(f"Failed to deserialize location: {str(e)}") from e

    try:
        value = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to deserialize location: {str(e)}") from e

    if value is not None and not isinstance(value, str):
        raise ValueError(
            f"Stored value is a {type(value).__name__}, not a location"
        )
    return value


__all__ = [
    "JSONEncoder",
    "serialize",
    "deserialize",
]
