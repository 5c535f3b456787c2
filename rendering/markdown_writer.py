"""
Appends generated method documentation to per-declaration markdown files.
"""

import logging
import os

from rendering.config import MARKDOWN_SUFFIX

logger = logging.getLogger(__name__)


def strip_filename_line(documentation: str, declaration_name: str) -> str:
    """Remove the first ``filename: <name>.md`` line a model may emit."""
    marker = f"filename: {declaration_name.lower()}{MARKDOWN_SUFFIX}\n"
    return documentation.replace(marker, "", 1)


class MarkdownWriter:
    """Writes one markdown file per class or interface under ``output_dir``."""

    def __init__(self, output_dir: str):
        self.output_dir = output_dir

    def path_for(self, declaration_name: str) -> str:
        return os.path.join(self.output_dir, f"{declaration_name}{MARKDOWN_SUFFIX}")

    def append(self, declaration_name: str, documentation: str) -> str:
        """Append a documentation fragment and return the file path.

        Fragments are separated by a blank line; earlier content is kept.
        """
        os.makedirs(self.output_dir, exist_ok=True)
        path = self.path_for(declaration_name)
        text = strip_filename_line(documentation, declaration_name)
        with open(path, "a", encoding="utf-8") as f:
            f.write(text + "\n\n")
        logger.debug("Appended %d chars to %s", len(text), path)
        return path
