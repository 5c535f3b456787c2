"""
Declaration traversal and method extraction logic.

This module walks the declaration table of a parsed source tree and extracts
the method members of the requested class or interface, along with their
leading comments.
"""

import logging
from typing import List

from extraction.filters import FilterPolicy
from extraction.models import ExtractedMethod, ExtractionRequest
from extraction.syntax_tree import DeclarationNode, MemberKind, SourceTree
from extraction.trivia import leading_comment

logger = logging.getLogger(__name__)


def extract_methods_from_declaration(
    declaration: DeclarationNode,
    source: bytes,
    policy: FilterPolicy,
) -> List[ExtractedMethod]:
    """Extract the accepted method members of one declaration.

    Args:
        declaration: A declaration whose name matched the request.
        source: The raw source file bytes.
        policy: Include/exclude policy for method names.

    Returns:
        Extracted methods in member order.
    """
    methods = []

    for member in declaration.members:
        if member.kind is not MemberKind.METHOD:
            continue

        if not policy.accepts(member.name):
            logger.debug(
                "Filtered out %s.%s at line %d",
                declaration.name,
                member.name,
                member.start_line,
            )
            continue

        methods.append(
            ExtractedMethod(
                declaration_name=declaration.name,
                method_name=member.name,
                signature_text=member.span.text(source),
                comment_text=leading_comment(member, source),
                start_line=member.start_line,
            )
        )

    return methods


def walk_declarations(tree: SourceTree, request: ExtractionRequest) -> List[ExtractedMethod]:
    """Extract methods of every declaration named ``request.declaration_name``.

    The declaration table is in pre-order, so one linear pass visits
    declarations in source order. A declaration is only visited when its
    enclosing class/interface was visited and matched; anything nested in a
    non-matching declaration is skipped along with it. Namespaces and modules
    are not declarations, so matches are found at any nesting depth through
    them.

    Args:
        tree: The parsed source tree.
        request: Extraction parameters.

    Returns:
        Extracted methods, grouped per declaration, in source order. Empty if
        no declaration matches.
    """
    policy = FilterPolicy.from_request(request)
    target = request.declaration_name
    descend = [False] * len(tree.declarations)
    methods: List[ExtractedMethod] = []

    for index, declaration in enumerate(tree.declarations):
        if declaration.parent is not None and not descend[declaration.parent]:
            continue

        if declaration.name != target:
            logger.debug(
                "Skipping %s '%s' at line %d",
                declaration.kind.value,
                declaration.name,
                declaration.start_line,
            )
            continue

        descend[index] = True
        found = extract_methods_from_declaration(declaration, tree.source, policy)
        logger.debug(
            "Extracted %d method(s) from %s '%s'",
            len(found),
            declaration.kind.value,
            declaration.name,
        )
        methods.extend(found)

    return methods
