"""Renaming of the variables of a single scope."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from esprima import Syntax

from .allocator import NameAllocator
from .name_pool import NamePool
from .options import UnmangleOptions
from .report import VARIABLE, RenameReport
from .scope import Scope, Variable

LOG = logging.getLogger(__name__)


def _priority(variable: Variable) -> Tuple[bool, int]:
    return (variable.tainted, -(len(variable.identifiers) + len(variable.references)))


def _sites(variable: Variable) -> List[Any]:
    seen = set()
    sites = []
    for node in [*variable.identifiers, *(reference.identifier for reference in variable.references)]:
        if id(node) in seen:
            continue
        seen.add(id(node))
        sites.append(node)
    return sites


def rename_scope(
    scope: Scope,
    options: UnmangleOptions,
    pool: NamePool,
    report: Optional[RenameReport] = None,
) -> int:
    """Rename the variables of *scope* in place and return how many changed."""

    if not scope.is_static():
        LOG.debug("skipping dynamic %s scope", scope.type)
        return 0

    allocator = NameAllocator(
        scope,
        pool,
        distinguish_function_expression_scope=options.distinguish_function_expression_scope,
    )
    # Names that survive (tainted, implicit, vetoed or already descriptive)
    # must stay unique as well.
    for variable in scope.variables:
        allocator.claim(variable.name)

    renamed = 0
    for variable in sorted(scope.variables, key=_priority):
        if variable.tainted or not variable.identifiers:
            continue
        accepted = [site for site in _sites(variable) if options.should_rename(site.name)]
        if not accepted:
            LOG.debug("keeping %r: rejected by rename predicate", variable.name)
            continue
        name = allocator.generate_name(variable.name, options.rename_prefix, variable.name)
        if name == variable.name:
            continue
        for site in accepted:
            site.name = name
        renamed += 1
        if report is not None:
            report.record(VARIABLE, scope.type, variable.name, name, len(accepted))
    return renamed


def restore_shorthand_properties(properties: Iterable[Any]) -> None:
    """Expand shorthand properties whose value no longer matches the key."""

    for prop in properties:
        value = prop.value
        if value.type == Syntax.AssignmentPattern:
            value = value.left
        if value.type == Syntax.Identifier and value.name != prop.key.name:
            prop.shorthand = False


__all__ = ["rename_scope", "restore_shorthand_properties"]
