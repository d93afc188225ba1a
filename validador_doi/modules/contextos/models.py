"""
Models para contextos de uso
Subsistemas SUNAT donde se declara un documento de identidad
"""

from enum import Enum


class UsageContext(str, Enum):
    """Subsistemas de declaración electrónica SUNAT"""
    PLAME = "PLAME"  # Planilla electrónica
    PLE = "PLE"  # Libros electrónicos
    AFP_NET = "AFPNET"  # Aportes a fondos de pensiones
    FV_3800 = "FV3800"  # Declaración de beneficiario final

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalizado = value.strip().upper().replace("_", "").replace("-", "")
            for contexto in cls:
                if contexto.value == normalizado:
                    return contexto
        return None
