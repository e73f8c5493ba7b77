"""
Declaration table and final output assembly.
"""

from typing import Dict, Iterator, Optional, Tuple

from .descriptors import Declaration
from .options import ExportType


class DeclarationTable:
    """
    Insertion-ordered declarations keyed by name.

    A name is reserved on first visit, before its body is known; the
    finished declaration replaces the placeholder in one step. Every name
    remembers the record fingerprint it was claimed for so differently
    shaped records never share a declaration.
    """

    def __init__(self):
        self._entries: Dict[str, Optional[Declaration]] = {}
        self._fingerprints: Dict[str, Optional[Tuple]] = {}

    def reserve(self, name: str, fingerprint: Optional[Tuple] = None):
        self._entries[name] = None
        self._fingerprints[name] = fingerprint

    def claim(self, base: str, fingerprint: Tuple) -> Tuple[str, bool]:
        """
        Returns the name to use for a record and whether it was newly reserved.
        A taken name with the same fingerprint is reused; otherwise numbered
        variants (``Name2``, ``Name3``, ...) are tried.
        """
        name = base
        counter = 1
        while name in self._entries:
            if self._fingerprints[name] == fingerprint:
                return name, False
            counter += 1
            name = f"{base}{counter}"
        self.reserve(name, fingerprint)
        return name, True

    def complete(self, declaration: Declaration):
        if declaration.name not in self._entries:
            self._fingerprints[declaration.name] = None
        self._entries[declaration.name] = declaration

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[Declaration]:
        for declaration in self._entries.values():
            if declaration is not None:
                yield declaration

    def __len__(self) -> int:
        return sum(1 for _ in self)


def assemble(declarations: DeclarationTable, root_name: str, export_type: ExportType = "root") -> str:
    """
    Joins declarations dependency-first, i.e. in reverse registration order.

    ``all`` keeps the export flag set on each declaration at creation,
    ``root`` exports only ``root_name`` and ``none`` exports nothing.
    """
    blocks = []
    for declaration in reversed(list(declarations)):
        if export_type == "none":
            exported = False
        elif export_type == "root":
            exported = declaration.name == root_name
        else:
            exported = declaration.exported
        blocks.append(declaration.render(exported))
    return "\n\n".join(blocks)
