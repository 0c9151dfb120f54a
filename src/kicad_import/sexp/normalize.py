"""Named-node view over the generic S-expression tree.

A list ``(pad "1" smd rect (at 0 0) (size 1 1))`` becomes a node named
``pad`` with values ``("1", "smd", "rect")`` and two children. This is the
shape every domain builder dispatches on.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .parser import SExpr, is_atom


@dataclass(frozen=True)
class ParsedSExpr:
    """A normalized S-expression node.

    Attributes:
        name: Head atom of the list, or the atom text itself for a bare atom.
            Empty for an empty list or a list headed by another list.
        values: Atoms following the head, in order.
        children: Nested lists following the head, in order, normalized.
        raw: The tree this node was built from.

    Values and children are split into separate buckets, so the
    interleaving between them is not kept. KiCad grammar puts all scalar
    parameters before nested sub-lists, with a few legacy flags (``locked``,
    ``hide``) trailing; builders that care about those look in ``values``.
    """

    name: str
    values: tuple[str, ...] = ()
    children: tuple[ParsedSExpr, ...] = field(default=(), repr=False)
    raw: SExpr = field(default="", repr=False, compare=False)

    def value(self, index: int, default: str | None = None) -> str | None:
        """Return ``values[index]`` or ``default`` when out of range."""
        if index < len(self.values):
            return self.values[index]
        return default

    @property
    def first_value(self) -> str | None:
        """The first value, e.g. ``(version 20221018)`` -> ``"20221018"``."""
        return self.values[0] if self.values else None

    def get(self, name: str) -> ParsedSExpr | None:
        """Get the first direct child with the given name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_all(self, name: str) -> list[ParsedSExpr]:
        """Find all direct children with the given name."""
        return [child for child in self.children if child.name == name]

    def has_flag(self, flag: str) -> bool:
        """True if ``flag`` appears as a bare value, e.g. legacy ``locked``."""
        return flag in self.values


def to_parsed_sexpr(expr: SExpr) -> ParsedSExpr:
    """Normalize a generic tree into :class:`ParsedSExpr` nodes."""
    if is_atom(expr):
        return ParsedSExpr(name=expr, raw=expr)

    if not expr:
        return ParsedSExpr(name="", raw=expr)

    head = expr[0]
    values: list[str] = []
    children: list[ParsedSExpr] = []
    for item in expr[1:]:
        if is_atom(item):
            values.append(item)
        else:
            children.append(to_parsed_sexpr(item))

    # A list headed by another list gets an empty name; that head is dropped.
    return ParsedSExpr(
        name=head if is_atom(head) else "",
        values=tuple(values),
        children=tuple(children),
        raw=expr,
    )
