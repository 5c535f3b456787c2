"""
Few-shot prompt construction for method documentation.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from extraction.models import ExtractedMethod
from rendering.config import DEFAULT_EXAMPLES_FILE

logger = logging.getLogger(__name__)

INSTRUCTION = (
    "Use the examples above and your knowledge of mod-eluna and Azerothcore "
    "to write markdown documentation for the following method. Keep the same "
    "section layout. The example usage should not be trivial and should be "
    "10-20 lines long."
)


def load_few_shot_example(path: Optional[Union[str, Path]] = None) -> str:
    """Read the few-shot example text.

    Args:
        path: Example file; defaults to the bundled example.

    Returns:
        The file contents.

    Raises:
        FileNotFoundError: If the example file does not exist.
    """
    example_path = Path(path) if path is not None else DEFAULT_EXAMPLES_FILE
    text = example_path.read_text(encoding="utf-8")
    logger.debug("Loaded few-shot example from %s (%d chars)", example_path, len(text))
    return text


def build_prompt(method: ExtractedMethod, few_shot_example: str) -> str:
    """Build the completion prompt for one extracted method."""
    comment = method.comment_text or "(none)"
    return (
        f"{few_shot_example.rstrip()}\n\n"
        f"{INSTRUCTION}\n\n"
        f"declare class {method.declaration_name} {{\n"
        f"  Inline Code Comment: {comment}\n"
        f"  Method: {method.method_name}\n"
        f"  MethodSignature: {method.signature_text}\n"
        f"}}\n"
    )
