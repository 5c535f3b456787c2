"""
Include/exclude name policy for extracted methods.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from extraction.models import ExtractionRequest


@dataclass(frozen=True)
class FilterPolicy:
    """Allow-list/deny-list over method names.

    Names are compared by exact string equality. Exclusion is checked first,
    so a name present in both sets is rejected.
    """

    include_names: Optional[FrozenSet[str]] = None
    exclude_names: Optional[FrozenSet[str]] = None

    @classmethod
    def from_request(cls, request: ExtractionRequest) -> "FilterPolicy":
        return cls(
            include_names=request.include_names,
            exclude_names=request.exclude_names,
        )

    def is_excluded(self, name: str) -> bool:
        return self.exclude_names is not None and name in self.exclude_names

    def is_included(self, name: str) -> bool:
        return self.include_names is None or name in self.include_names

    def accepts(self, name: str) -> bool:
        return not self.is_excluded(name) and self.is_included(name)
