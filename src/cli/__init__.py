"""Capa CLI (Typer + Rich): comandos y presentación."""
