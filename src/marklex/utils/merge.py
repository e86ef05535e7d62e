"""Generic in-place deep merge for plain dict/list structures.

Rules, per key in the union of both mappings:

- only in ``target``: left untouched
- only in ``source``: lists are shallow-copied; dicts are shallow-copied when
  ``create_new_object`` is set; anything else is assigned by reference
- in both: two dicts merge recursively, two lists concatenate
  (``target`` is extended), otherwise ``source`` wins

Only ``dict`` and ``list`` are treated structurally. Tuples, dataclasses
and other objects are opaque values.

Example:
    >>> target = {"a": [1], "b": {"x": 1}}
    >>> merge(target, {"a": [2], "b": {"y": 2}, "c": 3})
    >>> target
    {'a': [1, 2], 'b': {'x': 1, 'y': 2}, 'c': 3}

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge(
    target: dict[str, Any],
    source: Mapping[str, Any],
    *,
    create_new_object: bool = False,
) -> None:
    """Merge ``source`` into ``target`` in place.

    Args:
        target: Mapping that receives the merged values (mutated)
        source: Mapping to merge from (never mutated)
        create_new_object: Copy dicts coming from ``source`` instead of
            sharing them, so later changes to ``target`` can't leak back

    Returns:
        None
    """
    for key, incoming in source.items():
        if key not in target:
            if isinstance(incoming, list):
                target[key] = list(incoming)
            elif create_new_object and isinstance(incoming, dict):
                target[key] = dict(incoming)
            else:
                target[key] = incoming
            continue

        current = target[key]
        if isinstance(current, list) and isinstance(incoming, list):
            current.extend(incoming)
        elif isinstance(current, dict) and isinstance(incoming, dict):
            merge(current, incoming, create_new_object=create_new_object)
        else:
            target[key] = incoming
