"""
Documentation Renderer

Turns extracted TypeScript methods into markdown documentation with an AI
chat model (OpenAI or Anthropic) and a few-shot example prompt.
"""

from rendering.completion import (
    ClaudeBackend,
    CompletionBackend,
    CompletionError,
    MockBackend,
    OpenAIChatBackend,
    create_backend,
)
from rendering.markdown_writer import MarkdownWriter, strip_filename_line
from rendering.prompt import build_prompt, load_few_shot_example
from rendering.renderer import DocumentationRenderer, RenderStats

__all__ = [
    "ClaudeBackend",
    "CompletionBackend",
    "CompletionError",
    "MockBackend",
    "OpenAIChatBackend",
    "create_backend",
    "MarkdownWriter",
    "strip_filename_line",
    "build_prompt",
    "load_few_shot_example",
    "DocumentationRenderer",
    "RenderStats",
]
