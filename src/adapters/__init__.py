"""Adaptadores de I/O: HTTP, parseo de feeds y caché JSON."""
