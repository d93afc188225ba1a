from typing import List, Any
from pydantic import BaseModel, Field, field_validator, field_serializer, model_validator

from validador_doi.modules.contextos.models import UsageContext
from validador_doi.modules.doi.models import DoiType, PoliticaSanitizacion

# ==========================================
# ESQUEMAS DE REQUEST (INPUT)
# ==========================================

class DocumentoIdentidad(BaseModel):
    """
    Documento de identidad con número sanitizado y validado según su tipo
    """
    tipo_documento: DoiType = Field(..., description="Tipo DOI: código corto (RUC, DNI, CEX...) o miembro")
    numero_documento: str = Field(..., description="Número del documento")
    
    @field_validator('tipo_documento', mode='before')
    @classmethod
    def resolver_tipo(cls, v: Any):
        if isinstance(v, DoiType):
            return v
        if isinstance(v, str):
            return DoiType.from_short_name(v)
        raise ValueError('Tipo de documento debe ser un código de texto')
    
    @model_validator(mode='after')
    def sanitizar_y_validar(self):
        numero = self.tipo_documento.sanitize(self.numero_documento)
        if not self.tipo_documento.validate_number(numero, strict=True):
            raise ValueError(
                f"Número de documento inválido para {self.tipo_documento.short_name}: "
                f"{self.numero_documento!r}"
            )
        self.numero_documento = numero
        return self
    
    @field_serializer('tipo_documento')
    def serializar_tipo(self, tipo: DoiType) -> str:
        return tipo.short_name

# ==========================================
# ESQUEMAS DE RESPONSE (OUTPUT)
# ==========================================

class DoiTypeInfo(BaseModel):
    """Descripción serializable de un tipo del catálogo"""
    nombre: str = Field(..., description="Nombre del miembro")
    short_name: str = Field(..., description="Código corto")
    plame_id: str = Field(..., description="Código en PLAME")
    ple_id: str = Field(..., description="Código en PLE")
    afp_id: str = Field(..., description="Código en AFPNet")
    fv3800_id: str = Field(..., description="Código en FV3800")
    regex: str = Field(..., description="Estructura válida")
    politica: PoliticaSanitizacion = Field(..., description="Política de sanitización")
    longitud_maxima: int = Field(..., description="Longitud máxima")
    foreign: bool = Field(..., description="Documento extranjero")
    accepted_for_non_domiciled: bool = Field(..., description="Admitido para no domiciliados")
    contextos: List[UsageContext] = Field(default_factory=list, description="Subsistemas donde es idóneo")
    
    @classmethod
    def from_doi_type(cls, tipo: DoiType) -> "DoiTypeInfo":
        return cls(
            nombre=tipo.name,
            short_name=tipo.short_name,
            plame_id=tipo.plame_id,
            ple_id=tipo.ple_id,
            afp_id=tipo.afp_id,
            fv3800_id=tipo.fv3800_id,
            regex=tipo.regex,
            politica=tipo.politica,
            longitud_maxima=tipo.longitud_maxima,
            foreign=tipo.is_foreign,
            accepted_for_non_domiciled=tipo.is_accepted_for_non_domiciled,
            contextos=[c for c in UsageContext if tipo.is_suitable_for(c)]
        )
