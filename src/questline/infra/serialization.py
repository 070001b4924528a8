# questline/infra/serialization.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import fields, is_dataclass
from enum import Enum
from types import UnionType
from typing import Any, Tuple, Union, cast, get_args, get_origin, get_type_hints
from typing import Iterable as TypingIterable

from questline.domain.models.AddressModel import Address

# ---------- Encoding (Python -> BSON-friendly) ----------


def to_bson(x: Any) -> Any:
    # Addresses are stored as their normalized string
    if isinstance(x, Address):
        return x.value

    # Enums -> their .value so PyMongo can encode them
    if isinstance(x, Enum):
        return x.value

    # dataclasses -> dict (recurse)
    if is_dataclass(x) and not isinstance(x, type):
        return {f.name: to_bson(getattr(x, f.name)) for f in fields(x)}

    if isinstance(x, dict):
        items: Iterable[Tuple[Any, Any]] = cast(Iterable[Tuple[Any, Any]], x.items())
        return {k: to_bson(v) for k, v in items}

    if isinstance(x, (list, tuple, set)):
        seq: Iterable[Any] = cast(Iterable[Any], x)
        return [to_bson(v) for v in seq]

    # int, str, bool, None
    return x


# ---------- Decoding (BSON -> Python/dataclasses) ----------


def from_bson(cls: type, doc: Any) -> Any:
    """
    Reconstruct a dataclass instance of type `cls` from a plain dict `doc`.
    Ignores extra fields like Mongo's internal `_id`.
    """
    if doc is None:
        return None

    if is_dataclass(cls) and cls is not Address:
        kwargs = {}
        type_hints = get_type_hints(cls)
        for f in fields(cls):
            if f.name not in doc:
                continue
            expected_type = type_hints.get(f.name, f.type)
            kwargs[f.name] = _from_bson_value(expected_type, doc[f.name])
        return cls(**kwargs)

    return _from_bson_value(cls, doc)


def _from_bson_value(expected_type: Any, value: Any) -> Any:
    if value is None:
        return None

    # typing.Optional[...] / Union[..., None]
    origin = get_origin(expected_type)
    args = get_args(expected_type)
    if origin in (Union, UnionType):
        inner = next((a for a in args if a is not type(None)), Any)
        return _from_bson_value(inner, value)

    if origin in (list, set, tuple):
        inner = args[0] if args else Any
        raw_iter: TypingIterable[Any] = cast(TypingIterable[Any], value or [])
        seq = [_from_bson_value(inner, v) for v in raw_iter]
        if origin is list:
            return list(seq)
        if origin is set:
            return set(seq)
        return tuple(seq)

    if expected_type is Address:
        return Address.parse(value)

    if isinstance(expected_type, type) and is_dataclass(expected_type):
        return from_bson(expected_type, value)

    if isinstance(expected_type, type) and issubclass(expected_type, Enum):
        return expected_type(value)

    return value
