"""
Immutable syntax tree of TypeScript class and interface declarations.

The tree-sitter CST is reduced to a flat, pre-ordered table of named
declarations. Each entry records the index of its nearest enclosing named
declaration, so nesting is preserved without keeping tree-sitter nodes alive.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
from tree_sitter import Node

from extraction.config import (
    CLASS_DECLARATION_TYPES,
    INTERFACE_DECLARATION_TYPES,
    METHOD_MEMBER_TYPES,
    CONSTRUCTOR_NAMES,
    ACCESSOR_KEYWORDS,
    COMMENT_NODE,
    DECORATOR_NODE,
    SIGNATURE_TERMINATORS,
    INLINE_WHITESPACE,
    SOURCE_ENCODING,
)

logger = logging.getLogger(__name__)


class DeclarationKind(Enum):
    CLASS = "class"
    INTERFACE = "interface"


class MemberKind(Enum):
    METHOD = "method"
    OTHER = "other"


@dataclass(frozen=True)
class Span:
    """Half-open byte range ``[start, end)`` into the source bytes."""

    start: int
    end: int

    def text(self, source: bytes) -> str:
        return source[self.start:self.end].decode(SOURCE_ENCODING)


@dataclass(frozen=True)
class MemberNode:
    """A member of a class or interface body.

    Attributes:
        kind: METHOD for method signatures/declarations, OTHER for everything else
        name: Verbatim name text, or None for unnamed members (index signatures)
        span: First token (decorators included) through the terminating separator
        trivia: Whitespace/comment span ending exactly at ``span.start``
        comments: Comment spans inside ``trivia``, in source order
        start_line: 1-indexed line of the first token
    """

    kind: MemberKind
    name: Optional[str]
    span: Span
    trivia: Span
    comments: Tuple[Span, ...]
    start_line: int


@dataclass(frozen=True)
class DeclarationNode:
    """A named class or interface declaration.

    Attributes:
        kind: CLASS or INTERFACE
        name: Declared name
        parent: Index of the nearest enclosing named declaration, or None
        members: Body members in source order
        span: Source range of the whole declaration
        start_line: 1-indexed start line
    """

    kind: DeclarationKind
    name: str
    parent: Optional[int]
    members: Tuple[MemberNode, ...]
    span: Span
    start_line: int


@dataclass(frozen=True)
class SourceTree:
    """Parsed declaration file: source bytes plus the pre-ordered declaration table."""

    path: Optional[str]
    source: bytes
    declarations: Tuple[DeclarationNode, ...]

    def declaration_names(self) -> List[str]:
        return [declaration.name for declaration in self.declarations]


def declaration_kind(node: Node) -> Optional[DeclarationKind]:
    """Map a tree-sitter node type to a declaration kind, or None."""
    if node.type in CLASS_DECLARATION_TYPES:
        return DeclarationKind.CLASS
    if node.type in INTERFACE_DECLARATION_TYPES:
        return DeclarationKind.INTERFACE
    return None


def _is_accessor(node: Node, name_node: Node) -> bool:
    """Check for a ``get``/``set`` keyword ahead of the member name."""
    for child in node.children:
        if child.start_byte >= name_node.start_byte:
            break
        if not child.is_named and child.type in ACCESSOR_KEYWORDS:
            return True
    return False


def member_kind(node: Node, name: Optional[str], name_node: Optional[Node]) -> MemberKind:
    """Classify a body member.

    Constructors and accessors share node types with methods in the grammar,
    so they are told apart by name and keyword.
    """
    if node.type not in METHOD_MEMBER_TYPES:
        return MemberKind.OTHER
    if name is None or name_node is None or name in CONSTRUCTOR_NAMES:
        return MemberKind.OTHER
    if _is_accessor(node, name_node):
        return MemberKind.OTHER
    return MemberKind.METHOD


def _first_token_node(node: Node) -> Node:
    """Return the earliest of the member and its directly preceding decorators."""
    first = node
    sibling = node.prev_sibling
    while sibling is not None and sibling.type == DECORATOR_NODE:
        first = sibling
        sibling = sibling.prev_sibling
    return first


def _extend_to_terminator(source: bytes, end: int) -> int:
    """Extend ``end`` over a trailing ``;`` or ``,`` on the same line."""
    pos = end
    while pos < len(source) and source[pos] in INLINE_WHITESPACE:
        pos += 1
    if pos < len(source) and source[pos] in SIGNATURE_TERMINATORS:
        return pos + 1
    return end


def _build_member(node: Node, source: bytes) -> MemberNode:
    name_node = node.child_by_field_name("name")
    name = Span(name_node.start_byte, name_node.end_byte).text(source) if name_node else None

    first = _first_token_node(node)
    end = node.end_byte
    if node.child_by_field_name("body") is None:
        end = _extend_to_terminator(source, end)

    comments: List[Span] = []
    sibling = first.prev_sibling
    while sibling is not None and sibling.type == COMMENT_NODE:
        comments.append(Span(sibling.start_byte, sibling.end_byte))
        sibling = sibling.prev_sibling
    comments.reverse()

    if sibling is not None:
        trivia_start = sibling.end_byte
    elif comments:
        trivia_start = comments[0].start
    else:
        trivia_start = first.start_byte

    return MemberNode(
        kind=member_kind(node, name, name_node),
        name=name,
        span=Span(first.start_byte, end),
        trivia=Span(trivia_start, first.start_byte),
        comments=tuple(comments),
        start_line=first.start_point.row + 1,
    )


def _build_members(node: Node, source: bytes) -> Tuple[MemberNode, ...]:
    body = node.child_by_field_name("body")
    if body is None:
        return ()
    return tuple(
        _build_member(child, source)
        for child in body.named_children
        if child.type not in (COMMENT_NODE, DECORATOR_NODE)
    )


def build_source_tree(root: Node, source: bytes, path: Optional[str] = None) -> SourceTree:
    """Collect named class/interface declarations from a tree-sitter root node.

    Nodes are visited in pre-order with an explicit stack, so deeply nested
    input does not depend on interpreter recursion depth. Anonymous classes are
    transparent: their nested declarations attach to the enclosing named one.

    Args:
        root: Root node of an error-free tree-sitter tree.
        source: The raw source bytes the tree was parsed from.
        path: Source file path, for diagnostics.

    Returns:
        The immutable SourceTree.
    """
    declarations: List[DeclarationNode] = []
    stack: List[Tuple[Node, Optional[int]]] = [(root, None)]

    while stack:
        node, parent = stack.pop()
        enclosing = parent

        kind = declaration_kind(node)
        name_node = node.child_by_field_name("name") if kind is not None else None
        if kind is not None and name_node is not None:
            declarations.append(
                DeclarationNode(
                    kind=kind,
                    name=Span(name_node.start_byte, name_node.end_byte).text(source),
                    parent=parent,
                    members=_build_members(node, source),
                    span=Span(node.start_byte, node.end_byte),
                    start_line=node.start_point.row + 1,
                )
            )
            enclosing = len(declarations) - 1
            logger.debug(
                "Found %s '%s' at line %d",
                kind.value,
                declarations[-1].name,
                declarations[-1].start_line,
            )

        for child in reversed(node.named_children):
            if child.type != COMMENT_NODE:
                stack.append((child, enclosing))

    return SourceTree(path=path, source=source, declarations=tuple(declarations))
