"""Textual user interface for Promptcraft."""
