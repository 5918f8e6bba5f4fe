"""
Flattens request models into form-encoded key/value pairs.

Nested objects and mappings use `parent[child]` keys, sequences use
`parent[index]` keys starting at 0 in input order:

    automatic_tax[enabled]=true
    line_items[0][price]=price_123
    line_items[0][quantity]=1

A field set to None is absent and produces no key at all.
"""

from decimal import Decimal
from enum import Enum
from typing import Any
from typing import List
from typing import Mapping
from typing import Sequence
from typing import Tuple
from urllib.parse import urlencode

from pydantic import BaseModel

from paymentsessions.domain.errors import SerializationError

FormPairs = List[Tuple[str, str]]


def to_form_pairs(params: BaseModel) -> FormPairs:
    pairs: FormPairs = []
    for name, value in _iter_fields(params):
        _flatten(name, value, pairs)
    return pairs


def to_form_body(params: BaseModel) -> str:
    return urlencode(to_form_pairs(params))


def _iter_fields(model: BaseModel):
    for name in type(model).model_fields:
        yield name, getattr(model, name)


def _flatten(key: str, value: Any, pairs: FormPairs) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        for name, child in _iter_fields(value):
            _flatten(f"{key}[{name}]", child, pairs)
    elif isinstance(value, Mapping):
        for name, child in value.items():
            _flatten(f"{key}[{name}]", child, pairs)
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, pairs)
    else:
        pairs.append((key, _to_wire_string(key, value)))


def _to_wire_string(key: str, value: Any) -> str:
    # bool before int, enum before str: both are subclasses
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        return repr(value)
    raise SerializationError(key, value)
