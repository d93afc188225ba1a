"""
Excepciones personalizadas del validador de documentos de identidad
"""

from typing import Optional, Dict, Any


class DoiException(Exception):
    """Excepción base para el validador DOI"""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RucInvalidArgumentError(DoiException, ValueError):
    """El valor entregado al cálculo del dígito verificador no cumple el contrato"""
    
    def __init__(self, message: str, value: Any = None, details: Optional[Dict[str, Any]] = None):
        self.value = value
        super().__init__(message, details)


class ContextoNoReconocidoError(DoiException, ValueError):
    """Contexto de uso fuera del conjunto cerrado de subsistemas SUNAT"""
    
    def __init__(self, context: Any, tipo: Optional[str] = None):
        self.context = context
        self.tipo = tipo
        if tipo:
            message = f"Contexto no reconocido para determinar la idoneidad del tipo {tipo}: {context!r}"
        else:
            message = f"Contexto no reconocido: {context!r}"
        super().__init__(message, {"context": context, "tipo": tipo})


class TipoDocumentoNoReconocidoError(DoiException, ValueError):
    """Código de tipo de documento que no existe en el catálogo"""
    
    def __init__(self, code: Any, context: Optional[str] = None):
        self.code = code
        self.context = context
        if context:
            message = f"Código de documento '{code}' no reconocido en {context}"
        else:
            message = f"Tipo de documento no reconocido: {code!r}"
        super().__init__(message, {"code": code, "context": context})
