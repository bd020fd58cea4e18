"""Reading merger-tree files and walking their main branches."""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class MergerTreeNode:
    """A halo and the ids of its progenitors, most important first."""

    haloid: int
    progids: tuple[int, ...] = ()

    @property
    def nprog(self) -> int:
        return len(self.progids)


@dataclass
class MergerTree:
    """Tree nodes kept sorted by halo id."""

    nodes: list[MergerTreeNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.nodes = sorted(self.nodes, key=lambda node: node.haloid)
        self._ids = [node.haloid for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def find(self, haloid: int) -> MergerTreeNode | None:
        """Return the node with ``haloid``, or None if the tree lacks it."""
        i = bisect_left(self._ids, haloid)
        if i < len(self._ids) and self._ids[i] == haloid:
            return self.nodes[i]
        return None

    def main_branch(self, haloid: int) -> list[MergerTreeNode]:
        """Follow first progenitors from ``haloid`` until one is missing.

        The starting node is not included.
        """
        node = self.find(haloid)
        if node is None:
            raise KeyError(haloid)
        branch = []
        seen = {node.haloid}
        while node.nprog > 0:
            node = self.find(node.progids[0])
            if node is None or node.haloid in seen:
                break
            seen.add(node.haloid)
            branch.append(node)
        return branch


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError(f"merger tree ended while reading {what}") from None


def _int_field(line: str, index: int, what: str) -> int:
    try:
        return int(line.split()[index])
    except (IndexError, ValueError):
        raise ValueError(f"could not read {what} from {line.strip()!r}") from None


def read_mtree(path: str | Path) -> MergerTree:
    """Read a merger-tree file: version, header, count, nodes, then ``END``."""
    with open(path, encoding="ascii") as handle:
        lines = iter(handle)
        _next_line(lines, "version")
        _next_line(lines, "header")
        nhalos = _int_field(_next_line(lines, "halo count"), 0, "halo count")
        nodes = []
        for _ in range(nhalos):
            line = _next_line(lines, "halo")
            haloid = _int_field(line, 0, "haloid")
            nprog = _int_field(line, 1, "nprog")
            progids = tuple(
                _int_field(_next_line(lines, "progenitor"), 0, "progenitor id")
                for _ in range(nprog)
            )
            nodes.append(MergerTreeNode(haloid, progids))
        end = next(lines, "")
        if not end.startswith("END"):
            print(f"read_mtree: Could not find END in {path}!?", file=sys.stderr)
    return MergerTree(nodes)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a tree and print the progenitors and main branch of one halo."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("usage: mtree MergerTreeFile haloid", file=sys.stderr)
        return 1
    try:
        haloid = int(args[1])
    except ValueError:
        print("usage: mtree MergerTreeFile haloid", file=sys.stderr)
        return 1

    print(f"o read_mtree: reading merger tree from file {args[0]} ... ", end="", file=sys.stderr)
    tree = read_mtree(args[0])
    print("done", file=sys.stderr)

    print(f"o main: searching for {haloid} ... ", end="", file=sys.stderr)
    node = tree.find(haloid)
    if node is None:
        print("not found", file=sys.stderr)
        return 0
    print("found", file=sys.stderr)
    print(
        f"o main: halo with id={node.haloid} (=={node.haloid}) has {node.nprog} progenitors",
        file=sys.stderr,
    )
    for progid in node.progids:
        print(progid, file=sys.stderr)
    for member in tree.main_branch(haloid):
        print(f"  {member.haloid}  {member.nprog}", file=sys.stderr)
    return 0