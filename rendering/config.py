"""
Configuration constants for the AI documentation renderer.

Defines model aliases, API credentials, retry bounds and output defaults.
Environment variables are loaded from a .env file at module import time via
python-dotenv.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load .env file (idempotent; does nothing if already loaded or missing)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# API credentials
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
CLAUDE_API_KEY: str = os.getenv("CLAUDE_API_KEY") or os.getenv("ANTHROPIC_API_KEY", "")

# ---------------------------------------------------------------------------
# Model aliases accepted on the command line
# ---------------------------------------------------------------------------
OPENAI_MODELS: Dict[str, str] = {
    "gpt3": "gpt-3.5-turbo",
    "gpt4": "gpt-4-turbo-preview",
}
CLAUDE_MODELS: Dict[str, str] = {
    "claude": "claude-3-opus-20240229",
}
MODEL_ALIASES = tuple(OPENAI_MODELS) + tuple(CLAUDE_MODELS)
CLAUDE_MAX_TOKENS: int = 2000

# Toggle: set USE_MOCK_COMPLETION=true in .env to skip real API calls
USE_MOCK_COMPLETION: bool = os.getenv("USE_MOCK_COMPLETION", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Retry configuration for completion API calls (used by tenacity)
# ---------------------------------------------------------------------------
COMPLETION_MAX_RETRIES: int = 5
COMPLETION_RETRY_MIN_WAIT: int = 2   # seconds
COMPLETION_RETRY_MAX_WAIT: int = 30  # seconds

# ---------------------------------------------------------------------------
# Prompt and output defaults
# ---------------------------------------------------------------------------
DEFAULT_EXAMPLES_FILE: Path = Path(__file__).parent / "prompts" / "few_shot_example.md"
MARKDOWN_SUFFIX: str = ".md"
