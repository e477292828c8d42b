# folio/cli/commands/__init__.py
"""CLI command implementations. Each module exposes command(...)."""
