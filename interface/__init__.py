"""Thin consumers of the engine: REST API and terminal game loop."""
