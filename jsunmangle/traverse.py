"""Generic walking, cloning and serialisation helpers for esprima trees."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from esprima import nodes
from esprima.objects import Object

Visitor = Callable[[Any, Optional[Any]], None]


def is_node(value: Any) -> bool:
    return isinstance(value, nodes.Node) and isinstance(getattr(value, "type", None), str)


def _coerce_children(value: Any) -> Iterator[Any]:
    if is_node(value):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _coerce_children(item)


def iter_child_nodes(node: Any) -> Iterator[Any]:
    """Yield the direct child nodes of *node* in field order."""

    for key, value in vars(node).items():
        if key.startswith("_") or key in ("type", "loc", "range"):
            continue
        yield from _coerce_children(value)


def traverse(
    tree: Any,
    enter: Optional[Visitor] = None,
    leave: Optional[Visitor] = None,
) -> None:
    """Depth-first walk calling ``enter(node, parent)`` and ``leave(node, parent)``.

    The walk keeps an explicit stack so that deeply nested expressions do not
    run into the interpreter recursion limit.
    """

    # (node, parent, leaving)
    stack: List[Tuple[Any, Optional[Any], bool]] = [(tree, None, False)]
    while stack:
        node, parent, leaving = stack.pop()
        if leaving:
            if leave is not None:
                leave(node, parent)
            continue
        if enter is not None:
            enter(node, parent)
        stack.append((node, parent, True))
        children = list(iter_child_nodes(node))
        for child in reversed(children):
            stack.append((child, node, False))


def clone_tree(value: Any) -> Any:
    """Return an independent structural copy of *value*.

    ``copy.deepcopy`` cannot be used on esprima objects: they answer every
    unknown attribute with ``None``, which confuses the pickle protocol.
    Nodes shared between two fields, such as the ``local`` and ``imported``
    names of an import specifier, stay shared in the copy.
    """

    memo: Dict[int, Any] = {}

    def _clone(item: Any) -> Any:
        if isinstance(item, Object):
            existing = memo.get(id(item))
            if existing is not None:
                return existing
            copy = item.__class__.__new__(item.__class__)
            memo[id(item)] = copy
            for key, field in vars(item).items():
                setattr(copy, key, _clone(field))
            return copy
        if isinstance(item, list):
            return item.__class__(_clone(entry) for entry in item)
        if isinstance(item, tuple):
            return tuple(_clone(entry) for entry in item)
        if isinstance(item, dict):
            return {key: _clone(entry) for key, entry in item.items()}
        return item

    return _clone(value)


def to_dict(value: Any) -> Any:
    """Convert an esprima tree into plain ``dict``/``list`` values."""

    if isinstance(value, Object):
        return {key: to_dict(field) for key, field in vars(value).items()}
    if isinstance(value, (list, tuple)):
        return [to_dict(entry) for entry in value]
    if isinstance(value, dict):
        return {key: to_dict(entry) for key, entry in value.items()}
    return value


def from_dict(value: Any) -> Any:
    """Build esprima objects from an ESTree document such as JSON input."""

    if isinstance(value, dict):
        target: Object = nodes.Node() if isinstance(value.get("type"), str) else Object()
        for key, field in value.items():
            setattr(target, key, from_dict(field))
        return target
    if isinstance(value, list):
        return [from_dict(entry) for entry in value]
    return value


__all__ = [
    "is_node",
    "iter_child_nodes",
    "traverse",
    "clone_tree",
    "to_dict",
    "from_dict",
]
