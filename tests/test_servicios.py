"""
Tests de servicios del catálogo y esquemas pydantic
"""
import pytest
from pydantic import ValidationError

from validador_doi import (
    DocumentoIdentidad,
    DoiType,
    TipoDocumentoNoReconocidoError,
    UsageContext,
    describir_catalogo,
    sanitize,
    validar_documento,
    validate_number,
)
from validador_doi.modules.doi import services


def test_funciones_de_frontera():
    assert sanitize(DoiType.DNI, "12.345.678") == "12345678"
    assert sanitize("RUC", "20-60785424-7") == "20607854247"
    assert validate_number("DNI", "12345678", True) is True
    assert validate_number(DoiType.RUC, "20-60785424-7", False) is True


def test_tipo_desconocido():
    with pytest.raises(TipoDocumentoNoReconocidoError):
        sanitize("XYZ", "123")


class TestValidarDocumento:
    """Validación con mensaje explicativo"""

    def test_dni_valido(self):
        assert validar_documento("DNI", "12345678", strict=True) == (True, "DNI válido")

    def test_vacio(self):
        assert validar_documento(DoiType.CE, "  ", strict=True) == (False, "CEX no puede estar vacío")

    def test_excede_longitud(self):
        es_valido, mensaje = validar_documento(DoiType.CE, "ABC1234567890", strict=True)
        assert es_valido is False
        assert "no puede exceder 12 caracteres" in mensaje

    def test_formato(self):
        es_valido, mensaje = validar_documento(DoiType.DNI, "1234567", strict=True)
        assert es_valido is False
        assert "no cumple el formato" in mensaje

    def test_ruc_delega_en_validador(self):
        assert validar_documento("RUC", "20607854248", strict=True) == (
            False, "Dígito verificador incorrecto. Esperado: 7, Actual: 8"
        )

    def test_modo_por_defecto_configurable(self, monkeypatch):
        monkeypatch.setattr(services.settings, "STRICT_DEFAULT", True)
        assert validar_documento("DNI", "12.345.678")[0] is False
        monkeypatch.setattr(services.settings, "STRICT_DEFAULT", False)
        assert validar_documento("DNI", "12.345.678")[0] is True


def test_describir_catalogo():
    catalogo = describir_catalogo()
    assert [info.nombre for info in catalogo] == [t.name for t in DoiType]
    ruc = next(info for info in catalogo if info.short_name == "RUC")
    assert ruc.contextos == [UsageContext.PLAME, UsageContext.PLE, UsageContext.FV_3800]
    assert ruc.longitud_maxima == 11
    assert ruc.model_dump(mode="json")["politica"] == "digitos"


class TestDocumentoIdentidad:
    """Esquema pydantic que sanitiza y valida el número"""

    def test_sanitiza_numero(self):
        documento = DocumentoIdentidad(tipo_documento="DNI", numero_documento="12.345.678")
        assert documento.tipo_documento is DoiType.DNI
        assert documento.numero_documento == "12345678"

    def test_serializa_codigo_corto(self):
        documento = DocumentoIdentidad(tipo_documento=DoiType.RUC, numero_documento="20-60785424-7")
        assert documento.model_dump() == {
            "tipo_documento": "RUC",
            "numero_documento": "20607854247",
        }

    def test_numero_invalido(self):
        with pytest.raises(ValidationError):
            DocumentoIdentidad(tipo_documento="RUC", numero_documento="20607854248")

    def test_tipo_desconocido(self):
        with pytest.raises(ValidationError):
            DocumentoIdentidad(tipo_documento="XYZ", numero_documento="123")
