"""Consistency checks over a parsed board.

The builder is lenient and never rejects a board for semantic
problems. These checks are an optional post-pass for callers
that want to know what was silently defaulted:

- Net ids used by pads, tracks, vias and zones that are not declared
- Float fields holding NaN because the source atom was not a number
- Duplicate layer ordinals and net ids
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any

from .schema import KiCadPCB


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a board."""

    code: str
    message: str
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "path": self.path}


@dataclass
class ValidationReport:
    """Result of validating a board."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "issue_count": len(self.issues),
            "issues": [i.to_dict() for i in self.issues],
        }


def _net_users(pcb: KiCadPCB) -> Iterator[tuple[str, int]]:
    for fi, fp in enumerate(pcb.footprints):
        for pi, pad in enumerate(fp.pads):
            if pad.net is not None:
                yield f"footprints[{fi}].pads[{pi}].net", pad.net.id
    for collection in ("segments", "arcs", "vias", "zones"):
        for i, item in enumerate(getattr(pcb, collection)):
            yield f"{collection}[{i}].net", item.net


def check_net_references(pcb: KiCadPCB) -> list[ValidationIssue]:
    """Report every net id that is referenced but not declared in ``pcb.nets``."""
    declared = {net.id for net in pcb.nets}
    return [
        ValidationIssue(
            code="UNDECLARED_NET",
            message=f"Net {net_id} is not declared",
            path=path,
        )
        for path, net_id in _net_users(pcb)
        if net_id not in declared
    ]


def _walk_floats(value: Any, path: str) -> Iterator[tuple[str, float]]:
    if isinstance(value, float):
        yield path, value
    elif is_dataclass(value) and not isinstance(value, type):
        for f in fields(value):
            child_path = f"{path}.{f.name}" if path else f.name
            yield from _walk_floats(getattr(value, f.name), child_path)
    elif isinstance(value, tuple):
        for i, item in enumerate(value):
            yield from _walk_floats(item, f"{path}[{i}]")


def check_numeric_fields(pcb: KiCadPCB) -> list[ValidationIssue]:
    """Report float fields that hold NaN (unparseable numbers in the source)."""
    return [
        ValidationIssue(
            code="INVALID_NUMBER",
            message="Value is not a number",
            path=path,
        )
        for path, value in _walk_floats(pcb, "")
        if math.isnan(value)
    ]


def check_duplicates(pcb: KiCadPCB) -> list[ValidationIssue]:
    """Report layer ordinals and net ids declared more than once."""
    issues: list[ValidationIssue] = []

    ordinals = Counter(layer.ordinal for layer in pcb.layers)
    for ordinal, count in ordinals.items():
        if count > 1:
            issues.append(
                ValidationIssue(
                    code="DUPLICATE_LAYER",
                    message=f"Layer ordinal {ordinal} declared {count} times",
                    path="layers",
                )
            )

    net_ids = Counter(net.id for net in pcb.nets)
    for net_id, count in net_ids.items():
        if count > 1:
            issues.append(
                ValidationIssue(
                    code="DUPLICATE_NET",
                    message=f"Net {net_id} declared {count} times",
                    path="nets",
                )
            )

    return issues


def validate_board(pcb: KiCadPCB) -> ValidationReport:
    """Run every check and collect the issues."""
    return ValidationReport(
        issues=[
            *check_duplicates(pcb),
            *check_net_references(pcb),
            *check_numeric_fields(pcb),
        ]
    )
