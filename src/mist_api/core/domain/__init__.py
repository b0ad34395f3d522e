"""Errores y tipos compartidos del dominio.

Por qué:
- Los adaptadores y la CLI comparten una única taxonomía de fallos.
- El dominio no conoce HTTP ni la CLI.
"""

from mist_api.core.domain.errors import FailureKind, MistApiError, MistConfigError

__all__ = ["FailureKind", "MistApiError", "MistConfigError"]
