"""
Módulo de sanitización - filtros de caracteres y truncado por la derecha
"""

from .utils import digits_only, alnum_only, keep_rightmost

__all__ = [
    "digits_only",
    "alnum_only",
    "keep_rightmost"
]
