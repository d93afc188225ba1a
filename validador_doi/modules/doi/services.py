"""
Servicios del catálogo DOI - punto de entrada funcional para validar,
sanitizar y describir documentos de identidad
"""

import logging
from typing import List, Optional, Tuple, Union

from validador_doi.config import settings
from validador_doi.modules.contextos.models import UsageContext
from validador_doi.modules.doi.models import DoiType
from validador_doi.modules.doi.schemas import DoiTypeInfo
from validador_doi.modules.ruc.utils.ruc_validator import RucValidator

logger = logging.getLogger(__name__)

TipoDocumento = Union[DoiType, str]


def resolver_tipo(tipo: TipoDocumento) -> DoiType:
    """Acepta un DoiType o su código corto"""
    if isinstance(tipo, DoiType):
        return tipo
    return DoiType.from_short_name(tipo)


def sanitize(tipo: TipoDocumento, raw: Optional[str]) -> str:
    return resolver_tipo(tipo).sanitize(raw)


def validate_number(tipo: TipoDocumento, raw: Optional[str], strict: bool = True) -> bool:
    return resolver_tipo(tipo).validate_number(raw, strict)


def is_suitable_for(tipo: TipoDocumento, context: Union[UsageContext, str]) -> bool:
    return resolver_tipo(tipo).is_suitable_for(context)


def validar_documento(tipo: TipoDocumento, numero: Optional[str],
                      strict: Optional[bool] = None) -> Tuple[bool, str]:
    """
    Valida un documento según su tipo y explica el resultado
    
    Args:
        tipo: Tipo de documento (DoiType o código corto: RUC, DNI, CEX...)
        numero: Número del documento
        strict: Si es None se usa DOI_STRICT_DEFAULT
        
    Returns:
        Tuple[bool, str]: (es_valido, mensaje)
        
    Raises:
        TipoDocumentoNoReconocidoError: Si el código de tipo no existe
    """
    doi = resolver_tipo(tipo)
    if strict is None:
        strict = settings.STRICT_DEFAULT
    
    if doi is DoiType.RUC:
        return RucValidator.validar_ruc_completo(numero, strict)
    
    if numero is None or not numero.strip():
        return False, f"{doi.short_name} no puede estar vacío"
    
    if doi.validate_number(numero, strict):
        return True, f"{doi.short_name} válido"
    
    valor = numero if strict else doi.sanitize(numero)
    if len(valor) > doi.longitud_maxima:
        return False, f"{doi.short_name} no puede exceder {doi.longitud_maxima} caracteres, tiene {len(valor)}"
    return False, f"{doi.short_name} no cumple el formato {doi.regex}: {valor!r}"


def describir_catalogo() -> List[DoiTypeInfo]:
    """Describe todos los tipos del catálogo en orden de declaración"""
    return [DoiTypeInfo.from_doi_type(tipo) for tipo in DoiType]
