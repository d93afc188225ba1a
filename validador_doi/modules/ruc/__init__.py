"""
Módulo RUC - dígito verificador módulo 11 de SUNAT
"""

from .utils.ruc_validator import (
    RucValidator,
    CategoriaContribuyente,
    compute_check_digit,
    is_ruc_valid,
    taxpayer_category
)

__all__ = [
    "RucValidator",
    "CategoriaContribuyente",
    "compute_check_digit",
    "is_ruc_valid",
    "taxpayer_category"
]
