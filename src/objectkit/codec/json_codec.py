"""JSON codec: serialise plain values and rebuild typed instances from text."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objectkit.config import ObjectKitConfig
from objectkit.errors import ParseError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_CONFIG = ObjectKitConfig()


def _encode_object(value: Any) -> Any:
    """``json.dumps`` fallback for dataclasses and attribute-bearing objects."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    attrs = getattr(value, "__dict__", None)
    if attrs is not None and not isinstance(value, type):
        return {k: v for k, v in attrs.items() if not k.startswith("_") and not callable(v)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, config: ObjectKitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Mapping keys keep their insertion order. Output is compact unless
    ``config.json_indent`` is set. Non-finite floats raise ``ValueError``
    since NaN and Infinity are not valid JSON.
    """
    cfg = config or _DEFAULT_CONFIG
    separators = (",", ":") if cfg.json_indent is None else (",", ": ")
    text = json.dumps(
        value,
        default=_encode_object,
        indent=cfg.json_indent,
        separators=separators,
        ensure_ascii=cfg.json_ensure_ascii,
        allow_nan=False,
    )
    logger.debug("Serialised %s to %d chars", type(value).__name__, len(text))
    return text


def from_json(cls: type[T] | None, text: str) -> T | Any:
    """Parse *text* and bind the decoded fields onto a new instance of *cls*.

    ``cls.__init__`` is not called: the instance is allocated with
    ``cls.__new__`` and every decoded key becomes an attribute, so the result
    carries whatever methods *cls* defines. With ``cls=None`` the plain
    decoded value is returned.

    Raises:
        ParseError: *text* is not well-formed JSON, or is not a JSON object
            when a target class is given.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except TypeError as exc:
        raise ParseError(f"Cannot decode {type(text).__name__}", cause=exc) from exc

    if cls is None:
        return data
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object to build {cls.__name__}, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    # object.__setattr__ also works for frozen dataclasses
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    logger.debug("Rebuilt %s with fields %s", cls.__name__, list(data))
    return instance
