"""CLI commands for synthetic-quota."""
