"""
Response Documents

Decoding of raw response bodies. Object mode yields JsonObject mappings that
also allow attribute access; array mode yields plain dicts.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

logger = logging.getLogger(__name__)


class JsonObject(dict):
    """Decoded JSON object readable as `doc.key` as well as `doc["key"]`"""

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None


def decode(payload: Any, as_object: bool = True) -> Any:
    """
    Parse a response body

    Args:
        payload: Raw response body
        as_object: Decode JSON objects as JsonObject instead of dict

    Returns:
        Decoded document, or None for non-string or malformed payloads
    """
    if not isinstance(payload, str):
        return None

    try:
        if as_object:
            return json.loads(payload, object_hook=JsonObject)
        return json.loads(payload)
    except json.JSONDecodeError as e:
        logger.debug(f"Response is not valid JSON: {e}")
        return None


def is_blank(value: Any) -> bool:
    """Emptiness as upstream APIs mean it: null, false, 0, "", "0", [] and {}"""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) == 0
    return False


def has_errors(document: Any) -> bool:
    """True when the document carries a non-empty `errors` field"""
    return isinstance(document, Mapping) and not is_blank(document.get("errors"))


def unwrap(document: Any, data_key: str) -> Any:
    """Return the envelope value at data_key, or None when it is empty"""
    if document is None or not data_key:
        return document
    if not isinstance(document, Mapping):
        return None

    value = document.get(data_key)
    return None if is_blank(value) else value


def value_present(document: Any, key: str) -> bool:
    """True when a mapping document holds a non-null value at key"""
    return isinstance(document, Mapping) and document.get(key) is not None


def missing_fields(document: Any, *keys: str) -> list:
    """Names among keys that are absent or null in the document"""
    return [key for key in keys if not value_present(document, key)]


def as_list(value: Optional[Any]) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]
