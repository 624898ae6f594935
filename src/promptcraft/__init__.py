"""Promptcraft - compose structured LLM prompts from the terminal."""

__version__ = "0.1.0"
