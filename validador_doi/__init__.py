"""
Validador DOI - validación y normalización de documentos de identidad
peruanos para declaraciones electrónicas SUNAT (PLAME, PLE, AFPNet, FV3800)
"""

import logging

from .config import settings
from .shared.exceptions import (
    DoiException,
    RucInvalidArgumentError,
    ContextoNoReconocidoError,
    TipoDocumentoNoReconocidoError
)
from .modules.sanitizacion import digits_only, alnum_only
from .modules.ruc import (
    RucValidator,
    CategoriaContribuyente,
    compute_check_digit,
    is_ruc_valid,
    taxpayer_category
)
from .modules.contextos import UsageContext
from .modules.contextos.services import (
    list_suitable_types,
    list_non_domiciled_types,
    list_foreign_types
)
from .modules.doi import (
    DoiType,
    PoliticaSanitizacion,
    DocumentoIdentidad,
    DoiTypeInfo,
    sanitize,
    validate_number,
    is_suitable_for,
    validar_documento,
    describir_catalogo
)

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(settings.log_level)

__version__ = settings.APP_VERSION

__all__ = [
    "settings",
    "DoiException",
    "RucInvalidArgumentError",
    "ContextoNoReconocidoError",
    "TipoDocumentoNoReconocidoError",
    "digits_only",
    "alnum_only",
    "RucValidator",
    "CategoriaContribuyente",
    "compute_check_digit",
    "is_ruc_valid",
    "taxpayer_category",
    "UsageContext",
    "list_suitable_types",
    "list_non_domiciled_types",
    "list_foreign_types",
    "DoiType",
    "PoliticaSanitizacion",
    "DocumentoIdentidad",
    "DoiTypeInfo",
    "sanitize",
    "validate_number",
    "is_suitable_for",
    "validar_documento",
    "describir_catalogo"
]
