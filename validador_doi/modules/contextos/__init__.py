"""
Módulo de contextos de uso - subsistemas de declaración SUNAT

Las consultas de idoneidad viven en ``services`` y se importan desde allí;
este paquete solo expone el enumerado para evitar ciclos con el catálogo DOI.
"""

from .models import UsageContext

__all__ = [
    "UsageContext"
]
