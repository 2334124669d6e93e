"""Modelos y tipos del dominio.

Por qué:
- Aquí viven la configuración tipada, los presets de feeds y los resultados
  explícitos de fetch/parseo.
- El dominio no conoce HTTP, CLI, ni ficheros: solo conceptos del problema.
"""
