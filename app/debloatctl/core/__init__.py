"""Core session logic: connection state, package catalog and collaborators."""
