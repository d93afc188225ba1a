"""
Módulo DOI - catálogo de tipos de documento de identidad SUNAT
"""

from .models import DoiType, DoiDefinicion, PoliticaSanitizacion
from .schemas import DocumentoIdentidad, DoiTypeInfo
from .services import (
    sanitize,
    validate_number,
    is_suitable_for,
    validar_documento,
    describir_catalogo
)

__all__ = [
    "DoiType",
    "DoiDefinicion",
    "PoliticaSanitizacion",
    "DocumentoIdentidad",
    "DoiTypeInfo",
    "sanitize",
    "validate_number",
    "is_suitable_for",
    "validar_documento",
    "describir_catalogo"
]
