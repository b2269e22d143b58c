"""Field accessor resolution for searchable items."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, Optional, Union

from ..core.exceptions import FieldAccessError

logger = logging.getLogger(__name__)

FieldAccessor = Callable[[Any], Any]
FieldSpec = Union[str, FieldAccessor, Sequence[Union[str, FieldAccessor]], None]

# Each group yields the first truthy value among its keys
DEFAULT_FIELD_GROUPS = (
    ("name", "title", "companyName", "businessName"),
    ("description",),
    ("email",),
    ("phone",),
    ("code", "sku", "poNumber", "orderNumber"),
)


def get_nested_value(obj: Any, path: str) -> Any:
    """
    Get a nested value using dot notation (e.g. ``"supplier.contact.email"``).

    Mappings are read by key, sequences by integer index and anything else by
    attribute. Any missing step yields an empty string.
    """
    if obj is None or not path:
        return ""

    value = obj
    for key in path.split("."):
        if value is None:
            return ""
        value = _lookup(value, key)

    return "" if value is None else value


def _lookup(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    if isinstance(value, Sequence) and not isinstance(value, str):
        try:
            return value[int(key)]
        except (ValueError, IndexError):
            return None
    return getattr(value, key, None)


def _path_accessor(path: str) -> FieldAccessor:
    def accessor(item: Any) -> Any:
        return get_nested_value(item, path)
    accessor.__name__ = f"field<{path}>"
    return accessor


def _first_truthy_accessor(keys) -> FieldAccessor:
    def accessor(item: Any) -> Any:
        for key in keys:
            value = get_nested_value(item, key)
            if value:
                return value
        return ""
    accessor.__name__ = f"field<{'|'.join(keys)}>"
    return accessor


def default_accessors() -> List[FieldAccessor]:
    """Accessors for the common identity fields of business records."""
    return [_first_truthy_accessor(group) for group in DEFAULT_FIELD_GROUPS]


def resolve_fields(fields: FieldSpec) -> List[FieldAccessor]:
    """
    Resolve a field spec into a uniform list of accessors.

    Args:
        fields: A dot path, an accessor callable, a sequence mixing both,
            or None for the default identity fields

    Returns:
        List of callables mapping an item to its raw field value
    """
    if fields is None:
        return default_accessors()
    if isinstance(fields, str):
        return [_path_accessor(fields)]
    if callable(fields):
        return [fields]
    if isinstance(fields, Sequence):
        return [f if callable(f) else _path_accessor(str(f)) for f in fields]

    logger.warning(f"Unsupported field spec {type(fields).__name__}, using defaults")
    return default_accessors()


def to_text(value: Any) -> Optional[str]:
    """Convert a raw field value to searchable text, None meaning 'no value'."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def extract_text(item: Any, accessor: FieldAccessor, strict: bool = False) -> Optional[str]:
    """
    Extract searchable text for one field of one item.

    A failing accessor counts as 'no value' unless ``strict`` is set, in which
    case the failure is raised as FieldAccessError.
    """
    try:
        return to_text(accessor(item))
    except Exception as e:
        name = getattr(accessor, "__name__", repr(accessor))
        if strict:
            raise FieldAccessError(f"Field accessor {name} failed: {str(e)}", field=name) from e
        logger.debug(f"Field accessor {name} failed, treating as empty: {str(e)}")
        return None
