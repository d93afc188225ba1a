"""
Models para el catálogo de tipos de documento de identidad (DOI)
=================================================================

Tipos de documento usados en los sistemas electrónicos de SUNAT (PLAME, PLE,
AFPNet y FV3800). Cada tipo define:

- Un código corto para mapeos internos y visualización.
- Los identificadores oficiales de cada subsistema; vacío si no aplica.
- Una expresión regular con la estructura válida del número sanitizado.
- Una política de sanitización (solo dígitos o alfanumérico) con longitud máxima.
- Si el documento es de origen extranjero y si SUNAT lo admite para declarar
  sujetos no domiciliados.

La validación es solo estructural: no comprueba que el documento exista en
ningún registro.
"""

import logging
import re
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from validador_doi.modules.contextos.models import UsageContext
from validador_doi.modules.ruc.utils.ruc_validator import is_ruc_valid
from validador_doi.modules.sanitizacion.utils import alnum_only, digits_only
from validador_doi.shared.exceptions import (
    ContextoNoReconocidoError,
    TipoDocumentoNoReconocidoError
)

logger = logging.getLogger(__name__)

# Letra o dígito Unicode, el mismo espacio que produce alnum_only
_ALNUM = r"[^\W_]"


class PoliticaSanitizacion(str, Enum):
    """Política de limpieza aplicada al número de documento"""
    DIGITOS = "digitos"
    ALFANUMERICO = "alfanumerico"


class DoiDefinicion(BaseModel):
    """Datos estáticos de un tipo de documento"""
    model_config = ConfigDict(frozen=True)

    short_name: str = Field(..., description="Código corto del tipo de documento")
    plame_id: str = Field("", description="Código en PLAME")
    ple_id: str = Field("", description="Código en PLE")
    afp_id: str = Field("", description="Código en AFPNet")
    fv3800_id: str = Field("", description="Código en FV3800")
    regex: str = Field(..., description="Estructura válida del número")
    politica: PoliticaSanitizacion = Field(..., description="Política de sanitización")
    longitud_maxima: int = Field(..., description="Longitud máxima tras sanitizar", gt=0)
    foreign: bool = Field(False, description="Documento emitido a extranjeros")
    accepted_for_non_domiciled: bool = Field(False, description="Admitido para no domiciliados")
    checksum: bool = Field(False, description="Se valida con dígito verificador")


def _alfanumerico(short_name: str, plame_id: str, ple_id: str, afp_id: str, fv3800_id: str,
                  longitud: int, foreign: bool, non_domiciled: bool) -> DoiDefinicion:
    return DoiDefinicion(
        short_name=short_name,
        plame_id=plame_id,
        ple_id=ple_id,
        afp_id=afp_id,
        fv3800_id=fv3800_id,
        regex=f"{_ALNUM}{{1,{longitud}}}",
        politica=PoliticaSanitizacion.ALFANUMERICO,
        longitud_maxima=longitud,
        foreign=foreign,
        accepted_for_non_domiciled=non_domiciled
    )


# Atributo de la definición consultado por cada contexto
_CAMPO_POR_CONTEXTO = {
    UsageContext.PLAME: "plame_id",
    UsageContext.PLE: "ple_id",
    UsageContext.AFP_NET: "afp_id",
    UsageContext.FV_3800: "fv3800_id",
}


class DoiType(Enum):
    """Tipos de documento de identidad reconocidos por SUNAT"""

    # Documento que no encaja en ninguna categoría oficial (PLE 0)
    OTHERS = _alfanumerico("OTR", "", "0", "", "", 15, False, False)

    # Documento Nacional de Identidad: siempre 8 dígitos
    DNI = DoiDefinicion(
        short_name="DNI",
        plame_id="01",
        ple_id="1",
        afp_id="0",
        fv3800_id="01",
        regex=r"\d{8}",
        politica=PoliticaSanitizacion.DIGITOS,
        longitud_maxima=8
    )

    # Carné de identidad militar y policial
    PNP = _alfanumerico("PNP", "02", "0", "2", "", 15, False, False)

    # Carné de extranjería
    CE = _alfanumerico("CEX", "04", "4", "1", "04", 12, True, False)

    # Registro Único de Contribuyente: prefijo, 8 dígitos y dígito verificador módulo 11
    RUC = DoiDefinicion(
        short_name="RUC",
        plame_id="06",
        ple_id="6",
        afp_id="",
        fv3800_id="06",
        regex=r"(10|15|16|17|20)\d{9}",
        politica=PoliticaSanitizacion.DIGITOS,
        longitud_maxima=11,
        checksum=True
    )

    # Pasaporte peruano o extranjero
    PASSPORT = _alfanumerico("PAS", "07", "7", "4", "07", 12, True, False)

    # Carné de refugiado
    REFUGEE = _alfanumerico("REF", "09", "0", "9", "", 15, True, False)

    # Cédula de identidad diplomática
    DIPLOMATIC = _alfanumerico("CDI", "22", "0", "7", "", 15, True, False)

    # Permiso temporal de permanencia
    PTP = _alfanumerico("PTP", "23", "0", "6", "", 15, True, False)

    # Documento de identidad extranjero distinto de CE y pasaporte
    ID = _alfanumerico("ID", "24", "0", "8", "02", 15, True, True)

    # Carné del permiso temporal de permanencia
    ID_PTP = _alfanumerico("C. PTP", "26", "0", "10", "", 15, True, False)

    # Número de identificación tributaria extranjero
    TIN = _alfanumerico("TIN", "", "0", "", "01", 15, True, True)

    # === ATRIBUTOS ===

    @property
    def short_name(self) -> str:
        return self.value.short_name

    @property
    def plame_id(self) -> str:
        return self.value.plame_id

    @property
    def ple_id(self) -> str:
        return self.value.ple_id

    @property
    def afp_id(self) -> str:
        return self.value.afp_id

    @property
    def fv3800_id(self) -> str:
        return self.value.fv3800_id

    @property
    def regex(self) -> str:
        return self.value.regex

    @property
    def politica(self) -> PoliticaSanitizacion:
        return self.value.politica

    @property
    def longitud_maxima(self) -> int:
        return self.value.longitud_maxima

    @property
    def is_foreign(self) -> bool:
        """
        Indica si el documento es, por naturaleza, emitido a extranjeros

        Refleja el tipo de documento, no el domicilio fiscal de la persona.
        """
        return self.value.foreign

    @property
    def is_accepted_for_non_domiciled(self) -> bool:
        """
        Indica si SUNAT admite este tipo al declarar sujetos no domiciliados

        Solo ID y TIN lo son; CE, PTP, refugiado o diplomático están pensados
        para residentes en el Perú.
        """
        return self.value.accepted_for_non_domiciled

    # === COMPORTAMIENTO ===

    def sanitize(self, raw: Optional[str]) -> str:
        """
        Elimina caracteres inválidos y aplica la longitud máxima del tipo,
        conservando los caracteres de la derecha

        Args:
            raw: Número tal como lo ingresó una persona; puede ser None

        Returns:
            str: Valor sanitizado, nunca None
        """
        if self.politica is PoliticaSanitizacion.DIGITOS:
            return digits_only(raw, self.longitud_maxima)
        return alnum_only(raw, self.longitud_maxima)

    def validate_number(self, number: Optional[str], strict: bool = True) -> bool:
        """
        Valida la estructura del número con la expresión regular del tipo

        Si ``strict`` es False el número se sanitiza antes de comparar. Los
        tipos con dígito verificador (RUC) delegan en el algoritmo módulo 11.

        Args:
            number: Número a validar
            strict: Si es True no se sanitiza

        Returns:
            bool: True si la estructura es válida
        """
        if number is None or not number.strip():
            return False
        if self.value.checksum:
            return is_ruc_valid(number, strict)

        valor = number if strict else self.sanitize(number)
        valido = re.fullmatch(self.regex, valor) is not None
        if not valido:
            logger.debug("%s rechazado (strict=%s): %r", self.short_name, strict, number)
        return valido

    def subsystem_id(self, context: Union[UsageContext, str]) -> str:
        """
        Código de este tipo en el subsistema indicado; vacío si no aplica

        Raises:
            ContextoNoReconocidoError: Si el contexto no pertenece al conjunto cerrado
        """
        contexto = _resolver_contexto(context, self.name)
        campo = _CAMPO_POR_CONTEXTO.get(contexto)
        if campo is None:
            logger.warning("Contexto %s sin identificador en el catálogo DOI", contexto)
            raise ContextoNoReconocidoError(context, self.name)
        return getattr(self.value, campo)

    def is_suitable_for(self, context: Union[UsageContext, str]) -> bool:
        """
        Determina si este tipo se puede usar en el contexto SUNAT indicado

        Un tipo es idóneo cuando su identificador para ese subsistema no está
        vacío. No se sanitiza ni valida ningún número.

        Raises:
            ContextoNoReconocidoError: Si el contexto no es reconocido
        """
        return bool(self.subsystem_id(context).strip())

    # === BÚSQUEDAS ===

    @classmethod
    def from_short_name(cls, code: Optional[str]) -> "DoiType":
        """
        Busca un tipo por su código corto o por el nombre del miembro,
        sin distinguir mayúsculas

        Raises:
            TipoDocumentoNoReconocidoError: Si no existe
        """
        if code is not None:
            buscado = code.strip().upper()
            for tipo in cls:
                if tipo.short_name.upper() == buscado:
                    return tipo
            for tipo in cls:
                if tipo.name == buscado:
                    return tipo
        raise TipoDocumentoNoReconocidoError(code)

    @classmethod
    def from_subsystem_id(cls, context: Union[UsageContext, str], code: Optional[str]) -> "DoiType":
        """
        Busca el tipo a partir de su código en un subsistema (p. ej. PLE "6" es RUC)

        Varios tipos comparten el código PLE "0"; gana el primero declarado.

        Raises:
            TipoDocumentoNoReconocidoError: Si ningún tipo usa ese código
            ContextoNoReconocidoError: Si el contexto no es reconocido
        """
        contexto = _resolver_contexto(context)
        buscado = (code or "").strip()
        if buscado:
            for tipo in cls:
                if tipo.subsystem_id(contexto) == buscado:
                    return tipo
        raise TipoDocumentoNoReconocidoError(code, contexto.value)


def _resolver_contexto(context, tipo: Optional[str] = None) -> UsageContext:
    if isinstance(context, UsageContext):
        return context
    if isinstance(context, str):
        try:
            return UsageContext(context)
        except ValueError:
            pass
    logger.warning("Contexto no reconocido: %r", context)
    raise ContextoNoReconocidoError(context, tipo)
