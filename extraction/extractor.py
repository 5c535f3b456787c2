"""
High-level entry points for method extraction.

This module ties file reading, parsing and declaration traversal together for
a single ExtractionRequest.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional

from extraction.models import ExtractedMethod, ExtractionRequest
from extraction.parser import parse_file
from extraction.traversal import walk_declarations

logger = logging.getLogger(__name__)


def parse_name_list(raw: Optional[str]) -> Optional[FrozenSet[str]]:
    """Turn a comma-separated option value into a name set.

    Args:
        raw: Value such as ``"Foo,Bar"``, or None.

    Returns:
        The set of non-empty, whitespace-stripped names, or None when no
        names were given.

    Example:
        >>> sorted(parse_name_list("Foo, Bar"))
        ['Bar', 'Foo']
    """
    if raw is None:
        return None
    names = frozenset(part.strip() for part in raw.split(",") if part.strip())
    return names or None


def extract(request: ExtractionRequest) -> List[ExtractedMethod]:
    """Extract the method members of one declaration from a file.

    Args:
        request: File path, declaration name and name filters.

    Returns:
        Extracted methods in source order. Empty if no declaration matches.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        ParseError: If the file does not parse cleanly.

    Example:
        >>> methods = extract(ExtractionRequest("player.d.ts", "Player"))
        >>> [m.method_name for m in methods]
        ['AddComboPoints', 'AddItem']
    """
    logger.info(
        "Extracting methods of '%s' from %s",
        request.declaration_name,
        request.file_path,
    )

    tree = parse_file(request.file_path)
    methods = walk_declarations(tree, request)

    if request.declaration_name not in tree.declaration_names():
        logger.warning(
            "No class or interface named '%s' in %s",
            request.declaration_name,
            request.file_path,
        )

    logger.info("Extracted %d methods from %s", len(methods), request.file_path)
    return methods


def extract_to_dict_list(request: ExtractionRequest) -> List[Dict[str, Any]]:
    """Extract methods and return them as a list of dictionaries.

    Example:
        >>> records = extract_to_dict_list(ExtractionRequest("player.d.ts", "Player"))
        >>> import json
        >>> json.dump(records, open("methods.json", "w"), indent=2)
    """
    return [method.to_dict() for method in extract(request)]
