"""Adaptadores HTTP: transporte y un módulo por recurso del API.

Por qué un paquete por recurso:
- Cada recurso (auth, inventory, org, sites) define sus modelos y sus
  operaciones; todos delegan en `MistHttpClient`.
"""
