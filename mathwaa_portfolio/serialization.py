"""Serialization helpers that turn portfolio dataclasses into JSON-ready dicts."""

from dataclasses import asdict, fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {serialize_value(k): serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def to_dict_fast(obj: Any) -> dict:
    """Convert a flat dataclass without the deep copy ``asdict`` performs.

    Used for ``ApartmentRecord`` rows, which hold no nested dataclasses.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, Decimal):
        return str(value)
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {serialize_value(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def branch_to_dict(branch: Any) -> dict:
    """Serialize a branch, converting its apartment rows with ``to_dict_fast``."""
    return {
        "id": branch.id,
        "name": branch.name,
        "target_yearly_revenue": dataclass_to_dict(branch.target_yearly_revenue),
        "apartments": [to_dict_fast(apartment) for apartment in branch.apartments],
    }
