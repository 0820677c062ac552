"""
Common utility functions shared across fhir_x_props modules.
"""

from collections.abc import Iterable, Mapping
from typing import Any


def put(target: dict, path: str, value: Any) -> dict:
    """Set value at a dotted path, creating intermediate dicts.

    Args:
        target: Dict to modify in place
        path: Dot-separated path (e.g., "address.city")
        value: Value to store

    Returns:
        The modified target
    """
    *parents, leaf = path.split(".")
    current = target
    for part in parents:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[leaf] = value
    return target


def unflatten(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a nested dict from (dotted path, value) pairs.

    Pairs are applied in order, so a later path wins over an earlier one.

    Example:
        unflatten([("name.family", "Doe"), ("active", True)])
        # {"name": {"family": "Doe"}, "active": True}
    """
    result: dict[str, Any] = {}
    for path, value in items:
        put(result, path, value)
    return result


def flatten(tree: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested dicts into dotted paths, dropping None leaves.

    Lists and scalars are leaves; only mappings are descended into.

    Example:
        flatten({"name": {"family": "Doe", "given": None}})
        # {"name.family": "Doe"}
    """
    result: dict[str, Any] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            result.update(flatten(value, path))
        elif value is not None:
            result[path] = value
    return result
