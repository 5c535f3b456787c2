"""
Extraction Engine

Tree-sitter-based TypeScript declaration parser and method extractor.
Extracts the methods of a named class or interface together with their
leading comments.
"""

from extraction.models import ExtractedMethod, ExtractionRequest
from extraction.syntax_tree import (
    DeclarationKind,
    DeclarationNode,
    MemberKind,
    MemberNode,
    SourceTree,
    Span,
)
from extraction.parser import (
    ParseError,
    create_parser,
    parse_file,
    parse_bytes,
    count_error_nodes,
)
from extraction.filters import FilterPolicy
from extraction.trivia import leading_comment
from extraction.traversal import walk_declarations
from extraction.extractor import extract, extract_to_dict_list, parse_name_list

__all__ = [
    # Data models
    "ExtractedMethod",
    "ExtractionRequest",
    # Syntax tree
    "DeclarationKind",
    "DeclarationNode",
    "MemberKind",
    "MemberNode",
    "SourceTree",
    "Span",
    # Low-level parsing
    "ParseError",
    "create_parser",
    "parse_file",
    "parse_bytes",
    "count_error_nodes",
    # Mid-level extraction
    "FilterPolicy",
    "leading_comment",
    "walk_declarations",
    # High-level orchestration
    "extract",
    "extract_to_dict_list",
    "parse_name_list",
]
