"""CLI de feedpass (Typer + Rich)."""
