"""Book-keeping of performed renames."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, Dict, List, Set

VARIABLE = "variable"
LABEL = "label"


@dataclass(frozen=True)
class RenameRecord:
    kind: str
    scope: str
    original: str
    renamed: str
    sites: int


@dataclass
class RenameReport:
    """Collects every rename applied during a run."""

    records: List[RenameRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def record(self, kind: str, scope: str, original: str, renamed: str, sites: int) -> None:
        self.records.append(RenameRecord(kind=kind, scope=scope, original=original, renamed=renamed, sites=sites))

    def mapping(self, kind: str = VARIABLE) -> Dict[str, Set[str]]:
        result: DefaultDict[str, Set[str]] = defaultdict(set)
        for entry in self.records:
            if entry.kind == kind:
                result[entry.original].add(entry.renamed)
        return dict(result)

    def render(self) -> str:
        """Generate a human-readable report for performed renames."""

        report = ["Identifier and Label Renaming Report", "=" * 40]
        for kind, title in ((VARIABLE, "Variables"), (LABEL, "Labels")):
            mapping = self.mapping(kind)
            if not mapping:
                continue
            report.append(f"\n{title}:")
            for original, replacements in sorted(mapping.items()):
                for replacement in sorted(replacements):
                    report.append(f"  {original} -> {replacement}")
        return "\n".join(report)


__all__ = ["RenameRecord", "RenameReport", "VARIABLE", "LABEL"]
