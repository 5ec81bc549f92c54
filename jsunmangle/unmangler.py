"""Entry point tying scope analysis, variable and label renaming together."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .labels import unmangle_labels
from .name_pool import NamePool
from .options import UnmangleOptions
from .renamer import rename_scope, restore_shorthand_properties
from .report import LABEL, VARIABLE, RenameReport
from .scope import analyze
from .traverse import clone_tree

LOG = logging.getLogger(__name__)

OptionsLike = Union[UnmangleOptions, Mapping[str, Any], None]


class Unmangler:
    """Replaces short identifiers and labels with dictionary words.

    One instance may process several trees; the name pool and the rename
    report are shared between runs.
    """

    def __init__(self, options: OptionsLike = None, *, pool: Optional[NamePool] = None) -> None:
        self.options = UnmangleOptions.coerce(options)
        self.pool = pool if pool is not None else NamePool()
        self.report = RenameReport()

    def run(self, tree: Any) -> Any:
        """Return *tree* (or a renamed copy of it) with readable names."""

        working = tree if self.options.destructive else clone_tree(tree)
        manager = analyze(working, directive=True)

        before = len(self.report)
        for scope in manager.scopes:
            rename_scope(scope, self.options, self.pool, self.report)
        restore_shorthand_properties(manager.shorthand_properties)

        unmangle_labels(working, self.pool, self.report)

        records = self.report.records[before:]
        LOG.debug(
            "renamed %d variables and %d labels across %d scopes",
            sum(1 for entry in records if entry.kind == VARIABLE),
            sum(1 for entry in records if entry.kind == LABEL),
            len(manager.scopes),
        )
        return working

    def get_mapping_report(self) -> str:
        return self.report.render()


def unmangle(tree: Any, options: OptionsLike = None, *, pool: Optional[NamePool] = None) -> Any:
    """Rename mangled identifiers and labels of *tree*.

    With ``destructive`` (the default) *tree* itself is mutated and returned;
    otherwise an independent copy is renamed and returned.
    """

    return Unmangler(options, pool=pool).run(tree)


__all__ = ["Unmangler", "unmangle"]
