"""CLI (Typer + Rich).

Por qué separada:
- La librería se usa sin CLI; la CLI solo presenta resultados.
"""
