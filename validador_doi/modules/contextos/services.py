"""
Servicios de contexto - qué tipos DOI admite cada subsistema SUNAT
"""

from typing import List, Optional, Union

from validador_doi.modules.contextos.models import UsageContext
from validador_doi.modules.doi.models import DoiType


def list_suitable_types(context: Union[UsageContext, str]) -> List[DoiType]:
    """
    Tipos idóneos para el contexto, en orden de declaración del catálogo
    
    Raises:
        ContextoNoReconocidoError: Si el contexto no es reconocido
    """
    return [tipo for tipo in DoiType if tipo.is_suitable_for(context)]


def list_non_domiciled_types(context: Optional[Union[UsageContext, str]] = None) -> List[DoiType]:
    """Tipos admitidos para sujetos no domiciliados, opcionalmente dentro de un contexto"""
    tipos = [tipo for tipo in DoiType if tipo.is_accepted_for_non_domiciled]
    if context is None:
        return tipos
    return [tipo for tipo in tipos if tipo.is_suitable_for(context)]


def list_foreign_types() -> List[DoiType]:
    return [tipo for tipo in DoiType if tipo.is_foreign]
