"""
Elementos compartidos entre módulos del validador
"""

from .exceptions import (
    DoiException,
    RucInvalidArgumentError,
    ContextoNoReconocidoError,
    TipoDocumentoNoReconocidoError
)

__all__ = [
    "DoiException",
    "RucInvalidArgumentError",
    "ContextoNoReconocidoError",
    "TipoDocumentoNoReconocidoError"
]
