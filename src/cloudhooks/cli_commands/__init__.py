"""Command groups registered on the main typer app."""
