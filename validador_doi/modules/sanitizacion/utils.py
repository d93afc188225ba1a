"""
Utilidades de sanitización para números de documentos de identidad
===================================================================

Eliminan todo carácter que no pertenezca a la categoría permitida (dígitos o
alfanuméricos) y, cuando el resultado excede la longitud máxima, conservan los
últimos N caracteres. Los formatos de SUNAT (PLE, PLAME, AFPNet, FV3800) exigen
mantener el segmento derecho del valor, no el izquierdo.

Ninguna función lanza excepciones: ``None`` se trata como cadena vacía. No se
normaliza mayúsculas/minúsculas.
"""

from typing import Callable, Optional


def keep_rightmost(value: str, max_length: int) -> str:
    """
    Conserva los últimos ``max_length`` caracteres de ``value``
    
    Args:
        value: Cadena ya filtrada
        max_length: Longitud máxima; un valor <= 0 desactiva el truncado
        
    Returns:
        str: La cadena original o su segmento derecho
    """
    if max_length > 0 and len(value) > max_length:
        return value[-max_length:]
    return value


def _is_letter_or_digit(char: str) -> bool:
    return char.isalpha() or char.isdecimal()


def _filter(raw: Optional[str], keep: Callable[[str], bool], max_length: int) -> str:
    if not raw:
        return ""
    return keep_rightmost("".join(c for c in raw if keep(c)), max_length)


def digits_only(raw: Optional[str], max_length: int = 0) -> str:
    """
    Conserva solo dígitos decimales Unicode, en su orden original
    
    Args:
        raw: Valor a sanitizar; puede ser None
        max_length: Longitud máxima, o <= 0 para no truncar
        
    Returns:
        str: Dígitos del valor, truncados por la izquierda si excede
    """
    return _filter(raw, str.isdecimal, max_length)


def alnum_only(raw: Optional[str], max_length: int = 0) -> str:
    """
    Conserva solo letras y dígitos Unicode, en su orden original
    
    Args:
        raw: Valor a sanitizar; puede ser None
        max_length: Longitud máxima, o <= 0 para no truncar
        
    Returns:
        str: Caracteres alfanuméricos del valor, truncados por la izquierda si excede
    """
    return _filter(raw, _is_letter_or_digit, max_length)
