"""Adaptadores de I/O: HTTP (monday.com, descarga de boards.toml) y exportación."""
