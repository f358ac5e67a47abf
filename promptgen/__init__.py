"""Build LLM prompts from a repository's TODO instruction and related types."""

__version__ = "0.1.0"
