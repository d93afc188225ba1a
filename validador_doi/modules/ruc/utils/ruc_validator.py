"""
Utilidades para validación de RUC peruano
Basado en el algoritmo oficial de SUNAT (módulo 11)
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from validador_doi.modules.sanitizacion.utils import digits_only
from validador_doi.shared.exceptions import RucInvalidArgumentError

logger = logging.getLogger(__name__)

LONGITUD_RUC = 11


class CategoriaContribuyente(str, Enum):
    """Categoría del contribuyente según el prefijo del RUC"""
    PERSONA_NATURAL = "10"
    SUCESION_SOCIEDAD_CONYUGAL = "15"  # También militares, policías y extranjeros
    RESERVADO = "16"
    PERSONA_NATURAL_1993_2000 = "17"
    PERSONA_JURIDICA = "20"


class RucValidator:
    """Validador de RUC peruano con algoritmo oficial"""
    
    # Factores de verificación para RUC
    FACTORES = [5, 4, 3, 2, 7, 6, 5, 4, 3, 2]
    PREFIJOS_VALIDOS = tuple(c.value for c in CategoriaContribuyente)
    
    @staticmethod
    def limpiar_ruc(ruc: Optional[str]) -> str:
        """
        Aplica la política de sanitización del RUC: solo dígitos, máximo 11
        conservando los de la derecha
        """
        return digits_only(ruc, LONGITUD_RUC)
    
    @staticmethod
    def calcular_digito_verificador(ruc: str) -> str:
        """
        Calcula el dígito verificador del RUC con los pesos 5,4,3,2,7,6,5,4,3,2
        
        Solo se usan los 10 primeros dígitos; si llega el undécimo se ignora.
        
        Args:
            ruc: RUC de 10 u 11 dígitos, sin sanitizar
            
        Returns:
            str: Dígito verificador calculado
            
        Raises:
            RucInvalidArgumentError: Si el valor es None, su longitud no está en
                [10, 11] o contiene caracteres que no son dígitos
        """
        if ruc is None:
            raise RucInvalidArgumentError("No se puede calcular el dígito verificador de un RUC nulo")
        if len(ruc) < 10:
            raise RucInvalidArgumentError(
                "Para calcular el dígito verificador se requieren al menos 10 dígitos", value=ruc
            )
        if len(ruc) > LONGITUD_RUC:
            raise RucInvalidArgumentError("El RUC no puede exceder 11 dígitos", value=ruc)
        
        for i, caracter in enumerate(ruc):
            if not caracter.isdecimal():
                raise RucInvalidArgumentError(
                    f"Carácter inválido en RUC '{caracter}' en la posición {i}", value=ruc
                )
        
        suma = 0
        for digito, factor in zip(ruc[:10], RucValidator.FACTORES):
            suma += int(digito) * factor
        
        resto = suma % 11
        verificador = 11 - resto
        
        if verificador == 11:
            return "1"
        if verificador == 10:
            return "0"
        return str(verificador)
    
    @staticmethod
    def validar_estructura(ruc: Optional[str]) -> bool:
        """
        Validación estricta (sin sanitizar): 11 dígitos, prefijo válido y
        dígito verificador correcto
        """
        if ruc is None or len(ruc) != LONGITUD_RUC:
            return False
        if not ruc.isdecimal():
            return False
        if RucValidator.categoria(ruc) is None:
            return False
        
        return int(RucValidator.calcular_digito_verificador(ruc)) == int(ruc[10])
    
    @staticmethod
    def categoria(ruc: Optional[str]) -> Optional[CategoriaContribuyente]:
        """
        Obtiene la categoría del contribuyente a partir de los dos primeros dígitos
        
        Args:
            ruc: Número de RUC
            
        Returns:
            Optional[CategoriaContribuyente]: Categoría, o None si el prefijo no es válido
        """
        if not ruc or len(ruc) < 2 or not ruc[:2].isdecimal():
            return None
        
        prefijo = f"{int(ruc[:2]):02d}"
        try:
            return CategoriaContribuyente(prefijo)
        except ValueError:
            return None
    
    @staticmethod
    def validar_ruc_completo(ruc: Optional[str], strict: bool = True) -> Tuple[bool, str]:
        """
        Validación completa del RUC peruano con mensaje explicativo
        
        Args:
            ruc: Número de RUC
            strict: Si es False se sanitiza antes de validar
            
        Returns:
            Tuple[bool, str]: (es_valido, mensaje)
        """
        if ruc is None or not ruc.strip():
            return False, "RUC no puede estar vacío"
        
        valor = ruc if strict else RucValidator.limpiar_ruc(ruc)
        
        if len(valor) != LONGITUD_RUC:
            return False, f"RUC debe tener 11 dígitos, tiene {len(valor)}"
        
        if not valor.isdecimal():
            return False, "RUC debe contener solo números"
        
        if RucValidator.categoria(valor) is None:
            validos = ", ".join(RucValidator.PREFIJOS_VALIDOS)
            return False, f"RUC debe empezar con {validos}, empieza con {valor[:2]}"
        
        esperado = RucValidator.calcular_digito_verificador(valor)
        if int(esperado) != int(valor[10]):
            return False, f"Dígito verificador incorrecto. Esperado: {esperado}, Actual: {valor[10]}"
        
        return True, "RUC válido"


def compute_check_digit(raw: Optional[str], strict: bool = True) -> str:
    """
    Calcula el dígito verificador de un RUC
    
    En modo no estricto el valor pasa antes por la sanitización del RUC
    (solo dígitos, máximo 11).
    """
    valor = raw if strict else RucValidator.limpiar_ruc(raw)
    return RucValidator.calcular_digito_verificador(valor)


def is_ruc_valid(raw: Optional[str], strict: bool = True) -> bool:
    """
    Indica si el RUC es válido: 11 dígitos, prefijo 10/15/16/17/20 y dígito
    verificador correcto. Un valor vacío o nulo nunca es válido.
    """
    if raw is None or not raw.strip():
        return False
    
    valor = raw if strict else RucValidator.limpiar_ruc(raw)
    valido = RucValidator.validar_estructura(valor)
    if not valido:
        logger.debug("RUC rechazado (strict=%s): %r", strict, raw)
    return valido


def taxpayer_category(raw: Optional[str], strict: bool = True) -> Optional[CategoriaContribuyente]:
    """Categoría del contribuyente de un RUC válido; None si el RUC no es válido"""
    if not is_ruc_valid(raw, strict):
        return None
    valor = raw if strict else RucValidator.limpiar_ruc(raw)
    return RucValidator.categoria(valor)
