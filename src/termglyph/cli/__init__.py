"""Command-line interface and interactive terminal game."""
