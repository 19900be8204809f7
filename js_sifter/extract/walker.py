# File: js_sifter/extract/walker.py
"""js_sifter.extract.walker: drives the classifier over a whole script."""

from __future__ import annotations

from typing import Any, Dict, List

from js_sifter.extract.reachability import classify, field, node_children, node_type

__all__ = ["walk", "collect_all"]


def _roots(tree: Any) -> List[Any]:
    # a bare statement list (a function body) is accepted as well as a Program
    if isinstance(tree, (list, tuple)):
        return [n for n in tree if n is not None]
    return [tree]


def walk(tree: Any) -> List[str]:
    """Return every reachable string literal of *tree* in source order.

    Pre-order, left to right. Nested function bodies are flattened into the
    same list. Uses an explicit stack so nesting depth is bounded by memory,
    not by the interpreter's recursion limit.
    """
    found: List[str] = []
    stack = _roots(tree)[::-1]
    while stack:
        node = stack.pop()
        literal, children = classify(node)
        if literal is not None:
            found.append(literal)
        stack.extend(reversed(children))
    return found


def collect_all(tree: Any) -> List[str]:
    """Coarse mode: every name and string token in *tree*, reachable or not.

    Identifiers, private names, plain string literals and cooked template
    parts are gathered in first-occurrence order and de-duplicated, the way an
    interned string table would hold them.
    """
    seen: Dict[str, None] = {}
    stack = _roots(tree)[::-1]
    while stack:
        node = stack.pop()
        kind = node_type(node)
        value: Any = None
        if kind in ("Identifier", "PrivateIdentifier"):
            value = field(node, "name")
        elif kind == "Literal" and field(node, "regex") is None:
            value = field(node, "value")
        elif kind == "TemplateElement":
            value = field(field(node, "value"), "cooked")
        if isinstance(value, str):
            seen.setdefault(value, None)
        stack.extend(reversed(node_children(node)))
    return list(seen)
