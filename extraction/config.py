"""
Configuration constants for TypeScript declaration extraction.

Defines the tree-sitter node type strings used for declaration and member
extraction.
"""

from typing import Set

# Declaration node types we match against the requested name
CLASS_DECLARATION_TYPES: Set[str] = {
    "class_declaration",
    "abstract_class_declaration",
}
INTERFACE_DECLARATION_TYPES: Set[str] = {
    "interface_declaration",
}

# Member node types that are methods (subject to the exclusions below)
METHOD_MEMBER_TYPES: Set[str] = {
    "method_signature",
    "method_definition",
    "abstract_method_signature",
}

# Member names that denote constructors rather than methods
CONSTRUCTOR_NAMES: Set[str] = {
    "constructor",
    '"constructor"',
    "'constructor'",
}

# Keywords marking a method-shaped member as an accessor
ACCESSOR_KEYWORDS: Set[str] = {
    "get",
    "set",
}

# Comment node type (includes //, /* */, /** */)
COMMENT_NODE: str = "comment"

# Decorators precede class members as siblings in the class body
DECORATOR_NODE: str = "decorator"

# Separators that terminate a body-less member signature
SIGNATURE_TERMINATORS: bytes = b";,"

# Horizontal whitespace allowed between a signature and its terminator
INLINE_WHITESPACE: bytes = b" \t"

# TypeScript file extensions
TYPESCRIPT_EXTENSIONS: Set[str] = {
    ".ts",
    ".mts",
    ".cts",
}
TSX_EXTENSIONS: Set[str] = {
    ".tsx",
}

# Source encoding of declaration files
SOURCE_ENCODING: str = "utf-8"
