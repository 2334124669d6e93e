"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los adaptadores de feed y caché.
- Los servicios dependen de estos contratos, así los tests inyectan dobles.
"""
