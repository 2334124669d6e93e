"""Servicios del Core: construcción de la lista de palabras y generación."""
