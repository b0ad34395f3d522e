"""Core del cliente: configuración, logging y errores.

Por qué:
- No depende de los adaptadores HTTP; los adaptadores dependen de él.
"""
