"""
Tree-sitter parser initialization and file parsing utilities.

This module provides functions to initialize the TypeScript parser, parse
declaration sources, and reject sources that do not parse cleanly.
"""

import logging
import os
from typing import List, Optional
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree

from extraction.config import SOURCE_ENCODING, TSX_EXTENSIONS, TYPESCRIPT_EXTENSIONS
from extraction.syntax_tree import SourceTree, build_source_tree

# Configure logging
logger = logging.getLogger(__name__)

# Module-level language constants
TYPESCRIPT_LANGUAGE = Language(tstypescript.language_typescript())
TSX_LANGUAGE = Language(tstypescript.language_tsx())


class ParseError(ValueError):
    """Raised when source text cannot be structurally parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.message = message
        self.path = path
        self.line = line
        self.column = column
        location = path or "<source>"
        if line is not None:
            location = f"{location}:{line}"
            if column is not None:
                location = f"{location}:{column}"
        super().__init__(f"{location}: {message}")


def create_parser(tsx: bool = False) -> Parser:
    """Create and configure a tree-sitter parser for TypeScript.

    Args:
        tsx: Use the TSX dialect instead of plain TypeScript.

    Returns:
        A Parser instance configured with the TypeScript language.

    Example:
        >>> parser = create_parser()
        >>> tree = parser.parse(b"interface A { foo(): void; }")
    """
    parser = Parser(TSX_LANGUAGE if tsx else TYPESCRIPT_LANGUAGE)
    logger.debug("Created tree-sitter %s parser", "TSX" if tsx else "TypeScript")
    return parser


def find_error_nodes(tree: Tree) -> List[Node]:
    """Collect ERROR and MISSING nodes in source order.

    Only subtrees flagged with ``has_error`` are descended into.
    """
    errors: List[Node] = []
    stack: List[Node] = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            errors.append(node)
            continue
        if node.has_error:
            stack.extend(reversed(node.children))
    return errors


def count_error_nodes(tree: Tree) -> int:
    """Count ERROR and MISSING nodes in a parsed tree."""
    return len(find_error_nodes(tree))


def _describe_error(node: Node) -> str:
    if node.is_missing:
        return f"missing '{node.type}'"
    return "unexpected or unterminated syntax"


def parse_bytes(source: bytes, path: Optional[str] = None, tsx: bool = False) -> SourceTree:
    """Parse raw bytes of TypeScript declaration source.

    Args:
        source: UTF-8 encoded bytes of TypeScript source code.
        path: Originating file path, used in diagnostics only.
        tsx: Parse with the TSX dialect.

    Returns:
        The immutable SourceTree of named class/interface declarations.

    Raises:
        TypeError: If source is not bytes.
        ParseError: If source is not valid UTF-8 or contains syntax errors.

    Example:
        >>> tree = parse_bytes(b"interface A { foo(): void; }")
        >>> tree.declaration_names()
        ['A']
    """
    if not isinstance(source, bytes):
        raise TypeError(f"Source must be bytes, got {type(source).__name__}")

    try:
        source.decode(SOURCE_ENCODING)
    except UnicodeDecodeError as e:
        line = source[:e.start].count(b"\n") + 1
        raise ParseError(f"source is not valid UTF-8: {e.reason}", path, line) from e

    parser = create_parser(tsx=tsx)
    tree = parser.parse(source)

    if tree.root_node.has_error:
        errors = find_error_nodes(tree)
        # has_error can be set without a locatable node; fall back to the root
        first = errors[0] if errors else tree.root_node
        logger.warning(
            "Parsed tree for %s contains %d syntax error(s)",
            path or "<source>",
            len(errors),
        )
        raise ParseError(
            _describe_error(first),
            path,
            first.start_point.row + 1,
            first.start_point.column + 1,
        )

    logger.debug("Parsed %d bytes of TypeScript code", len(source))
    return build_source_tree(tree.root_node, source, path)


def parse_file(file_path: str) -> SourceTree:
    """Parse a TypeScript declaration file from disk.

    Args:
        file_path: Path to the .d.ts, .ts or .tsx file.

    Returns:
        The immutable SourceTree for the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        ParseError: If the file does not parse cleanly.

    Example:
        >>> tree = parse_file("player.d.ts")
        >>> tree.declaration_names()
        ['Player']
    """
    ext = os.path.splitext(file_path)[1]
    if ext not in TYPESCRIPT_EXTENSIONS and ext not in TSX_EXTENSIONS:
        logger.warning(
            "File %s has unrecognised extension %r; parsing as TypeScript",
            file_path,
            ext,
        )

    try:
        with open(file_path, "rb") as f:
            source_bytes = f.read()
    except FileNotFoundError:
        logger.error("File not found: %s", file_path)
        raise
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise

    tree = parse_bytes(source_bytes, path=file_path, tsx=ext in TSX_EXTENSIONS)
    logger.info("Successfully parsed file: %s", file_path)
    return tree
