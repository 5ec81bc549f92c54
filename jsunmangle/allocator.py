"""Per-scope name allocation."""

from __future__ import annotations

import logging
from typing import Optional, Set

from .keywords import is_unusable
from .name_pool import NamePool, is_short_name
from .scope import Scope

LOG = logging.getLogger(__name__)


def _descendant_names(scope: Scope) -> Set[str]:
    names: Set[str] = set()
    pending = list(scope.child_scopes)
    while pending:
        child = pending.pop()
        names.update(variable.name for variable in child.variables)
        pending.extend(child.child_scopes)
    return names


class NameAllocator:
    """Decides which candidate names are safe inside one scope.

    A name is rejected when it is reserved, tainted, used by a reference that
    passes through the scope, equal to the self-name of an enclosing named
    function expression, or already claimed.  Claimed names are the ones
    handed out earlier in this scope plus every name declared in this scope
    or below it, so that a renamed binding can never be captured by a nested
    declaration.
    """

    def __init__(
        self,
        scope: Scope,
        pool: NamePool,
        *,
        distinguish_function_expression_scope: bool = False,
        max_attempts: Optional[int] = None,
    ) -> None:
        self._scope = scope
        self._pool = pool
        self._max_attempts = max_attempts
        self._function_name = ""
        upper = scope.upper
        if not distinguish_function_expression_scope and upper is not None and upper.function_expression_scope:
            self._function_name = upper.block.id.name
        self._through_names = {reference.identifier.name for reference in scope.through}
        self._claimed: Set[str] = _descendant_names(scope)

    def claim(self, name: str) -> None:
        self._claimed.add(name)

    def pass_as_unique(self, name: str) -> bool:
        if name == self._function_name:
            return False
        if is_unusable(name, strict=self._scope.is_strict):
            return False
        if name in self._scope.taints:
            return False
        if name in self._through_names:
            return False
        return name not in self._claimed

    def generate_name(self, seed: str, prefix: Optional[str], current_name: Optional[str]) -> str:
        """Return a safe replacement for the binding originally called *seed*."""

        prefix = prefix or ""
        candidate = self._pool.next_candidate(current_name)
        if not is_short_name(current_name) and candidate == current_name:
            self.claim(candidate)
            return candidate

        if not self.pass_as_unique(prefix + candidate):
            candidate = self._pool.draw(lambda word: self.pass_as_unique(prefix + word), self._max_attempts)
        name = prefix + candidate
        self.claim(name)
        LOG.debug("allocated %r for %r in %s scope", name, seed, self._scope.type)
        return name


__all__ = ["NameAllocator"]
