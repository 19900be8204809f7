# File: js_sifter/extract/reachability.py
"""js_sifter.extract.reachability: per-node reachability rules.

:func:`classify` looks at one ESTree node and answers two questions:

* is the node itself a plain string literal that may be extracted?
* which of its immediate children are *live* and must be walked further?

Every node kind the parser can produce is listed here, either as a container
with an explicit child rule in :data:`_RULES` or as a member of
:data:`OPAQUE`. Object/array literals, untagged templates, member access,
``var`` declarations and the non-linear control constructs (``for-in``,
``for-of``, ``switch``, ``try``, ``throw``, ``with``, labels) are opaque.

Nodes are either ``esprima`` node objects or plain mappings with a ``"type"``
key (``tree.toDict()`` output, or trees built by other ESTree front-ends).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, FrozenSet, List, NamedTuple, Optional

__all__ = ["Reach", "classify", "field", "node_type", "node_children", "OPAQUE", "CONTAINERS"]

logger = logging.getLogger("JsSifter")


class Reach(NamedTuple):
    """Verdict for a single node."""

    literal: Optional[str]
    children: List[Any]


_NOTHING = Reach(None, [])


def field(node: Any, name: str) -> Any:
    """Read an ESTree field from a node object or a mapping."""
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def node_type(node: Any) -> Optional[str]:
    kind = field(node, "type")
    return kind if isinstance(kind, str) else None


def _is_node(value: Any) -> bool:
    return not isinstance(value, str) and node_type(value) is not None


def node_children(node: Any) -> List[Any]:
    """Every child node of *node* in field order, with no reachability rule applied."""
    fields = node.values() if isinstance(node, Mapping) else vars(node).values()
    out: List[Any] = []
    for value in fields:
        if isinstance(value, (list, tuple)):
            out.extend(v for v in value if _is_node(v))
        elif _is_node(value):
            out.append(value)
    return out


def _live(*nodes: Any) -> List[Any]:
    """Flatten single nodes and node lists, dropping absent (None) slots."""
    out: List[Any] = []
    for item in nodes:
        if item is None:
            continue
        if isinstance(item, (list, tuple)):
            out.extend(n for n in item if n is not None)
        else:
            out.append(item)
    return out


# --------------------------------------------------------------------------- #
# Literals                                                                    #
# --------------------------------------------------------------------------- #


def _literal(node: Any) -> Reach:
    # regex literals carry a ``regex`` record; their value is never a str
    # in esprima but may be in other front-ends
    if field(node, "regex") is not None:
        return _NOTHING
    value = field(node, "value")
    if isinstance(value, str):
        return Reach(value, [])
    return _NOTHING


# --------------------------------------------------------------------------- #
# Statements                                                                  #
# --------------------------------------------------------------------------- #


def _body(node: Any) -> Reach:
    return Reach(None, _live(field(node, "body")))


def _expression(node: Any) -> Reach:
    return Reach(None, _live(field(node, "expression")))


def _argument(node: Any) -> Reach:
    return Reach(None, _live(field(node, "argument")))


def _if(node: Any) -> Reach:
    return Reach(
        None, _live(field(node, "test"), field(node, "consequent"), field(node, "alternate"))
    )


def _while(node: Any) -> Reach:
    return Reach(None, _live(field(node, "test"), field(node, "body")))


def _do_while(node: Any) -> Reach:
    return Reach(None, _live(field(node, "body"), field(node, "test")))


def _for(node: Any) -> Reach:
    # the initializer is skipped, test and update run on every iteration
    return Reach(None, _live(field(node, "test"), field(node, "update"), field(node, "body")))


def _variable_declaration(node: Any) -> Reach:
    if field(node, "kind") == "var":
        return _NOTHING
    return Reach(None, _live(field(node, "declarations")))


def _declarator(node: Any) -> Reach:
    return Reach(None, _live(field(node, "init")))


def _class_declaration(node: Any) -> Reach:
    return Reach(None, _live(field(node, "superClass")))


def _function(node: Any) -> Reach:
    # parameters (and their defaults) are not walked, only the body.
    # Expression-bodied arrows have an expression here instead of a block.
    return Reach(None, _live(field(node, "body")))


def _export(node: Any) -> Reach:
    return Reach(None, _live(field(node, "declaration")))


# --------------------------------------------------------------------------- #
# Expressions                                                                 #
# --------------------------------------------------------------------------- #


def _call(node: Any) -> Reach:
    # ``super(...)`` and esprima's ``import(...)`` put a Super / Import node in
    # callee position; both are opaque, so only the arguments contribute.
    return Reach(None, _live(field(node, "callee"), field(node, "arguments")))


def _import_expression(node: Any) -> Reach:
    return Reach(None, _live(field(node, "source")))


def _binary(node: Any) -> Reach:
    return Reach(None, _live(field(node, "left"), field(node, "right")))


def _assignment(node: Any) -> Reach:
    return Reach(None, _live(field(node, "right")))


def _conditional(node: Any) -> Reach:
    return _if(node)


def _sequence(node: Any) -> Reach:
    return Reach(None, _live(field(node, "expressions")))


def _tagged_template(node: Any) -> Reach:
    quasi = field(node, "quasi")
    substitutions = field(quasi, "expressions") if quasi is not None else None
    return Reach(None, _live(field(node, "tag"), substitutions))


_Rule = Callable[[Any], Reach]

_RULES: Dict[str, _Rule] = {
    # programs & statements
    "Program": _body,
    "ExpressionStatement": _expression,
    "BlockStatement": _body,
    "StaticBlock": _body,
    "IfStatement": _if,
    "WhileStatement": _while,
    "DoWhileStatement": _do_while,
    "ForStatement": _for,
    "ReturnStatement": _argument,
    "VariableDeclaration": _variable_declaration,
    "VariableDeclarator": _declarator,
    "ExportNamedDeclaration": _export,
    "ExportDefaultDeclaration": _export,
    # declarations
    "FunctionDeclaration": _function,
    "ClassDeclaration": _class_declaration,
    # expressions
    "Literal": _literal,
    "FunctionExpression": _function,
    "ArrowFunctionExpression": _function,
    "CallExpression": _call,
    "NewExpression": _call,
    "ImportExpression": _import_expression,
    "SpreadElement": _argument,
    "ChainExpression": _expression,
    "AwaitExpression": _argument,
    "YieldExpression": _argument,
    "UnaryExpression": _argument,
    "ParenthesizedExpression": _expression,
    "BinaryExpression": _binary,
    "LogicalExpression": _binary,
    "AssignmentExpression": _assignment,
    "ConditionalExpression": _conditional,
    "SequenceExpression": _sequence,
    "TaggedTemplateExpression": _tagged_template,
}

OPAQUE: FrozenSet[str] = frozenset(
    {
        # names and atoms
        "Identifier",
        "PrivateIdentifier",
        "ThisExpression",
        "Super",
        "Import",
        "MetaProperty",
        # structural literals
        "ArrayExpression",
        "ObjectExpression",
        "Property",
        "TemplateLiteral",
        "TemplateElement",
        # access & mutation
        "MemberExpression",
        "UpdateExpression",
        # classes
        "ClassExpression",
        "ClassBody",
        "MethodDefinition",
        "PropertyDefinition",
        "FieldDefinition",
        # control constructs kept out of the output
        "ForInStatement",
        "ForOfStatement",
        "SwitchStatement",
        "SwitchCase",
        "ThrowStatement",
        "TryStatement",
        "CatchClause",
        "WithStatement",
        "LabeledStatement",
        "ContinueStatement",
        "BreakStatement",
        "EmptyStatement",
        "DebuggerStatement",
        # modules
        "ImportDeclaration",
        "ImportSpecifier",
        "ImportDefaultSpecifier",
        "ImportNamespaceSpecifier",
        "ExportAllDeclaration",
        "ExportSpecifier",
        # binding patterns
        "ArrayPattern",
        "ObjectPattern",
        "AssignmentPattern",
        "RestElement",
    }
)

CONTAINERS: FrozenSet[str] = frozenset(_RULES)


def classify(node: Any) -> Reach:
    """Return the literal carried by *node* (if any) and its live children."""
    kind = node_type(node)
    rule = _RULES.get(kind) if kind is not None else None
    if rule is not None:
        return rule(node)
    if kind not in OPAQUE:
        logger.debug("Unknown syntax node %r treated as opaque", kind)
    return _NOTHING
