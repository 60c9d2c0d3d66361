"""Capa de línea de comandos (Typer + Rich)."""
