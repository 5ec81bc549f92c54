"""Renaming of statement labels and their ``break``/``continue`` users.

Labels live in their own namespace and never cross a function boundary, so
one :class:`LabelScope` is opened per program and per function.  Inside a
boundary the currently open labels form an explicit stack; every label keeps
a snapshot of that stack (its ancestors) so that allocation can exclude the
names of all enclosing labels without walking back-references.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from esprima import Syntax

from .exceptions import DuplicateLabelError, UnresolvedLabelError
from .name_pool import NamePool, is_short_name
from .report import LABEL, RenameReport
from .traverse import traverse

LOG = logging.getLogger(__name__)

_BOUNDARIES = {
    Syntax.Program,
    Syntax.FunctionDeclaration,
    Syntax.FunctionExpression,
    Syntax.ArrowFunctionExpression,
}


class Label:
    def __init__(self, node: Any, ancestors: Sequence["Label"]) -> None:
        self.node = node
        self.ancestors = tuple(ancestors)
        self.original_name: str = node.label.name
        self.users: List[Any] = []
        self.claimed: Set[str] = set()
        self.name: Optional[str] = None

    def __repr__(self) -> str:
        return f"<Label {self.original_name!r} -> {self.name!r} users={len(self.users)}>"

    def exclusions(self) -> Set[str]:
        excluded = set(self.claimed)
        for ancestor in self.ancestors:
            if ancestor.name is not None:
                excluded.add(ancestor.name)
        return excluded

    def assign(self, name: str) -> None:
        self.name = name
        for ancestor in self.ancestors:
            ancestor.claimed.add(name)
        self.node.label.name = name
        for user in self.users:
            user.label.name = name


class LabelScope:
    """Labels of one function or program body."""

    def __init__(self, upper: Optional["LabelScope"] = None) -> None:
        self.upper = upper
        self.labels_by_name: Dict[str, Label] = {}
        self.open_labels: List[Label] = []
        self.labels: List[Label] = []

    def register(self, node: Any) -> Label:
        name = node.label.name
        if name in self.labels_by_name:
            raise DuplicateLabelError(f"duplicate label {name!r}", label=name)
        label = Label(node, self.open_labels)
        self.labels_by_name[name] = label
        self.open_labels.append(label)
        self.labels.append(label)
        return label

    def unregister(self, node: Any) -> None:
        if node.type != Syntax.LabeledStatement:
            return
        label = self.labels_by_name.pop(node.label.name)
        popped = self.open_labels.pop()
        if popped is not label:
            raise RuntimeError("label stack out of order")

    def resolve(self, node: Any) -> None:
        if node.label is None:
            return
        name = node.label.name
        label = self.labels_by_name.get(name)
        if label is None:
            raise UnresolvedLabelError(f"unresolved label {name!r}", label=name)
        label.users.append(node)

    def close(
        self,
        pool: NamePool,
        report: Optional[RenameReport] = None,
        max_attempts: Optional[int] = None,
    ) -> Optional["LabelScope"]:
        # Descriptive labels keep their names and reserve them first.
        for label in self.labels:
            if not is_short_name(label.original_name):
                label.assign(label.original_name)

        pending = sorted(
            (label for label in self.labels if label.name is None),
            key=lambda label: -len(label.users),
        )
        for label in pending:
            excluded = label.exclusions()
            name = pool.draw(lambda word: word not in excluded, max_attempts)
            label.assign(name)
            LOG.debug("label %r -> %r (%d users)", label.original_name, name, len(label.users))
            if report is not None:
                report.record(LABEL, "label", label.original_name, name, len(label.users) + 1)
        return self.upper


class _LabelPass:
    def __init__(self, pool: NamePool, report: Optional[RenameReport], max_attempts: Optional[int]) -> None:
        self._pool = pool
        self._report = report
        self._max_attempts = max_attempts
        self._scope: Optional[LabelScope] = None

    @property
    def scope(self) -> LabelScope:
        if self._scope is None:
            raise RuntimeError("label scope stack is empty")
        return self._scope

    def enter(self, node: Any, parent: Any) -> None:
        kind = node.type
        if kind in _BOUNDARIES:
            self._scope = LabelScope(self._scope)
        elif kind == Syntax.LabeledStatement:
            self.scope.register(node)
        elif kind in (Syntax.BreakStatement, Syntax.ContinueStatement):
            self.scope.resolve(node)

    def leave(self, node: Any, parent: Any) -> None:
        self.scope.unregister(node)
        if node.type in _BOUNDARIES:
            self._scope = self.scope.close(self._pool, self._report, self._max_attempts)


def unmangle_labels(
    tree: Any,
    pool: NamePool,
    report: Optional[RenameReport] = None,
    max_attempts: Optional[int] = None,
) -> Any:
    """Rename every label of *tree* in place and return the tree."""

    label_pass = _LabelPass(pool, report, max_attempts)
    traverse(tree, enter=label_pass.enter, leave=label_pass.leave)
    return tree


__all__ = ["Label", "LabelScope", "unmangle_labels"]
