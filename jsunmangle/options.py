"""Configuration record for :func:`jsunmangle.unmangle`."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping, Union

RenamePredicate = Callable[[str], bool]

# camelCase spellings accepted by :meth:`UnmangleOptions.from_mapping`.
_ALIASES = {
    "shouldRename": "should_rename",
    "renamePrefix": "rename_prefix",
    "distinguishFunctionExpressionScope": "distinguish_function_expression_scope",
}


def always_rename(name: str) -> bool:
    return True


@dataclass(frozen=True)
class UnmangleOptions:
    """Options controlling a single unmangle call.

    ``destructive`` mutates the given tree in place; when false the tree is
    cloned first and the input is left untouched.  ``should_rename`` is
    consulted with the original name of every declaration and reference site
    and may veto the rename of that site.  ``rename_prefix`` is prepended to
    every newly generated name (descriptive names that are kept as they are
    never receive it).
    """

    destructive: bool = True
    should_rename: RenamePredicate = field(default=always_rename)
    rename_prefix: str = ""
    distinguish_function_expression_scope: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "UnmangleOptions":
        known = {item.name for item in fields(cls)}
        values = {}
        for key, value in mapping.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise TypeError(f"unknown unmangle option: {key!r}")
            if value is None:
                continue
            values[name] = value
        return cls(**values)

    @classmethod
    def coerce(cls, options: Union["UnmangleOptions", Mapping[str, Any], None]) -> "UnmangleOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)


def keep_names(*names: str) -> RenamePredicate:
    """Return a predicate that refuses to rename any of *names*."""

    kept = frozenset(names)

    def _predicate(name: str) -> bool:
        return name not in kept

    return _predicate


__all__ = ["UnmangleOptions", "RenamePredicate", "always_rename", "keep_names"]
