"""
Data models for extraction requests and extracted TypeScript methods.
"""

from dataclasses import dataclass, asdict, field
from typing import Optional, Dict, Any, FrozenSet, Iterable


def _as_name_set(names: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if names is None:
        return None
    if isinstance(names, str):
        # A bare string is one name, not a set of characters
        return frozenset([names])
    return frozenset(names)


@dataclass
class ExtractedMethod:
    """Represents a single method member extracted from a declaration.

    Attributes:
        declaration_name: Name of the enclosing class or interface
        method_name: Verbatim text of the member's name
        signature_text: Verbatim source text of the member, including its
            terminating ``;`` or ``,`` when it has no body
        comment_text: Leading comment block, trimmed; empty if none
        start_line: 1-indexed line of the member's first token
    """

    declaration_name: str
    method_name: str
    signature_text: str
    comment_text: str
    start_line: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the method to a dictionary suitable for JSON serialization.

        Returns:
            Dictionary representation of the method.
        """
        return asdict(self)


@dataclass
class ExtractionRequest:
    """Parameters of one extraction call.

    Attributes:
        file_path: Path of the declaration file to read
        declaration_name: Exact, case-sensitive class or interface name
        include_names: Allow-list of method names, or None for "all"
        exclude_names: Deny-list of method names, or None for "none"
    """

    file_path: str
    declaration_name: str
    include_names: Optional[FrozenSet[str]] = field(default=None)
    exclude_names: Optional[FrozenSet[str]] = field(default=None)

    def __post_init__(self) -> None:
        if not self.declaration_name:
            raise ValueError("declaration_name must be a non-empty string")
        self.include_names = _as_name_set(self.include_names)
        self.exclude_names = _as_name_set(self.exclude_names)
