"""Command-line entry points and interactive prompts."""
