"""Pretty-printing and Graphviz export utilities for LLRB trees.

Everything here is read-only and touches nothing but ``tree.root`` and the
``key`` / ``value`` / ``left`` / ``right`` / ``color`` fields of nodes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from llrb_tree.base import RED, LLRBNode

if TYPE_CHECKING:
    from llrb_tree.llrb_tree_base import LLRBTree


# ANSI colour codes
PRIMARY = '\033[31m'    # red
RESET = '\033[0m'


# ── Graphviz DOT ───────────────────────────────────────────────────

def _quote(s: str) -> str:
    return '"' + s.replace('\\', '\\\\').replace('"', '\\"') + '"'


def _node_id(key) -> str:
    # str() of a key may be shortened for display; ids must stay unique
    value = getattr(key, "value", key)
    if isinstance(value, bytes):
        return value.hex()
    return str(value)


def dot_name(n: LLRBNode, suffix: str = "") -> str:
    """DOT node identifier; *suffix* keeps several snapshots apart in one graph."""
    return _quote(_node_id(n.key) + suffix)


def link_color(n: Optional[LLRBNode]) -> str:
    return "red" if n is not None and n.color == RED else "black"


def dot_node(n: LLRBNode, suffix: str = "") -> str:
    c = "red" if n.color == RED else "gray"
    label = _quote(f"{n.key}:{n.value}")
    return f'{dot_name(n, suffix)} [shape=circle,color={c},label={label}];'


def dot_nodes(n: Optional[LLRBNode], suffix: str = "") -> str:
    if n is None:
        return ""
    return dot_node(n, suffix) + dot_nodes(n.left, suffix) + dot_nodes(n.right, suffix)


def dot_edges(n: Optional[LLRBNode], suffix: str = "") -> str:
    if n is None:
        return ""

    s = ""
    for child in (n.left, n.right):
        if child is not None:
            s += f"{dot_name(n, suffix)}->{dot_name(child, suffix)}[color={link_color(child)}];"

    s += dot_edges(n.left, suffix)
    s += dot_edges(n.right, suffix)
    return s


def dot_body(tree: 'LLRBTree', suffix: str = "") -> str:
    """Node and edge statements of *tree* without the surrounding digraph."""
    return dot_nodes(tree.root, suffix) + dot_edges(tree.root, suffix)


def to_dot(tree: 'LLRBTree', suffix: str = "") -> str:
    """Render *tree* as a Graphviz ``digraph``."""
    return "digraph G {" + dot_body(tree, suffix) + "}"


def write_dot(path: str, *bodies: str) -> None:
    """
    Write one ``digraph`` holding every body in *bodies* to *path*.

    Use distinct suffixes with :func:`dot_body` to put several snapshots
    of the same tree side by side.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write("digraph G {" + "".join(bodies) + "}\n")


# ── Text ───────────────────────────────────────────────────────────

def print_structure(tree: 'LLRBTree', indent: int = 0) -> str:
    """Return a debugging-oriented indented dump of *tree*."""
    prefix = ' ' * indent
    if tree is None or tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    result = []

    def walk(n: Optional[LLRBNode], depth: int, side: str) -> None:
        pad = prefix + "    " * depth
        if n is None:
            result.append(f"{pad}{side}: Empty")
            return
        color = "RED" if n.color == RED else "BLACK"
        result.append(f"{pad}{side}: {n.key}={n.value!r} ({color})")
        if n.left is None and n.right is None:
            return
        walk(n.left, depth + 1, "L")
        walk(n.right, depth + 1, "R")

    walk(tree.root, 0, "Root")
    return "\n".join(result)


def print_pretty(tree: 'LLRBTree') -> str:
    """
    Prints an LLRB tree rotated by 90 degrees:
      • The right subtree is above its parent, the left one below.
      • Depth is shown by indentation.
      • RED nodes are highlighted.
    """
    if tree is None or tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    lines = []

    def collect(n: Optional[LLRBNode], depth: int) -> None:
        if n is None:
            return
        collect(n.right, depth + 1)
        text = str(n.key)
        if n.color == RED:
            text = f"{PRIMARY}{text}{RESET}"
        lines.append("    " * depth + text)
        collect(n.left, depth + 1)

    collect(tree.root, 0)
    return type(tree).__name__ + "\n" + "\n".join(lines) + "\n"
