"""
Documentation renderer: one model completion per extracted method.

Consumes extracted methods in order, prompts the configured chat model for a
markdown section per method and appends it to the declaration's file.
"""

import logging
from typing import Dict, Iterable, List

from core.structured_logging import target_scope
from extraction.models import ExtractedMethod
from rendering.completion import CompletionBackend
from rendering.markdown_writer import MarkdownWriter
from rendering.prompt import build_prompt

logger = logging.getLogger(__name__)


class RenderStats:
    """Statistics for a rendering run."""

    def __init__(self):
        self.methods_rendered = 0
        self.characters_generated = 0
        self.files_written: List[str] = []

    def to_dict(self) -> Dict[str, object]:
        """Convert stats to dictionary."""
        return {
            "methods_rendered": self.methods_rendered,
            "characters_generated": self.characters_generated,
            "files_written": list(self.files_written),
        }

    def __str__(self) -> str:
        return (
            f"RenderStats(methods={self.methods_rendered}, "
            f"chars={self.characters_generated}, files={len(self.files_written)})"
        )


class DocumentationRenderer:
    """Renders extracted methods to markdown through a completion backend.

    Args:
        backend: Chat model used to write each section.
        writer: Destination for the generated sections.
        few_shot_example: Example documentation prepended to every prompt.
    """

    def __init__(
        self,
        backend: CompletionBackend,
        writer: MarkdownWriter,
        few_shot_example: str,
    ):
        self.backend = backend
        self.writer = writer
        self.few_shot_example = few_shot_example

    def generate(self, method: ExtractedMethod) -> str:
        """Ask the backend for one method's documentation."""
        return self.backend.complete(build_prompt(method, self.few_shot_example))

    def render(self, methods: Iterable[ExtractedMethod]) -> RenderStats:
        """Render every method in order.

        Errors from the backend or the writer propagate and stop the run;
        sections already written stay on disk.
        """
        stats = RenderStats()

        for method in methods:
            with target_scope(f"{method.declaration_name}.{method.method_name}"):
                documentation = self.generate(method)
                logger.info(
                    "writing documentation for %s.%s",
                    method.declaration_name,
                    method.method_name,
                )
                path = self.writer.append(method.declaration_name, documentation)

            stats.methods_rendered += 1
            stats.characters_generated += len(documentation)
            if path not in stats.files_written:
                stats.files_written.append(path)

        logger.info("Rendering complete: %s", stats)
        return stats
