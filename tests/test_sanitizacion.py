"""
Tests de sanitización: filtrado de caracteres y truncado por la derecha
"""
import pytest

from validador_doi import alnum_only, digits_only
from validador_doi.modules.sanitizacion import keep_rightmost


def test_alnum_trunca_por_la_derecha():
    """Solo alfanuméricos, conservando los últimos caracteres"""
    assert alnum_only("A-12.B_34/XYZ-98765", 10) == "34XYZ98765"


def test_digits_trunca_por_la_derecha():
    assert digits_only("12-34.56A78B90", 6) == "567890"


@pytest.mark.parametrize("funcion", [alnum_only, digits_only])
def test_none_y_vacio_devuelven_cadena_vacia(funcion):
    assert funcion(None, 10) == ""
    assert funcion("", 10) == ""
    assert funcion("--- ./", 10) == ""


@pytest.mark.parametrize("max_length", [0, -1])
def test_longitud_no_positiva_desactiva_truncado(max_length):
    assert digits_only("1-2-3-4-5-6-7-8-9-0-1-2", max_length) == "123456789012"
    assert alnum_only("AB-CD-EF", max_length) == "ABCDEF"


def test_sin_truncado_cuando_cabe():
    assert digits_only("12.345.678", 8) == "12345678"
    assert alnum_only("ab 12", 15) == "ab12"


def test_conserva_letras_y_digitos_unicode():
    """No se normalizan mayúsculas ni acentos"""
    assert alnum_only("Ñandú-123", 15) == "Ñandú123"
    assert digits_only("١٢٣-45", 0) == "١٢٣45"


def test_digits_descarta_letras_y_simbolos_numericos_no_decimales():
    assert digits_only("x²½3", 0) == "3"


def test_keep_rightmost():
    assert keep_rightmost("ABCDEF", 3) == "DEF"
    assert keep_rightmost("ABC", 3) == "ABC"
    assert keep_rightmost("ABC", 0) == "ABC"
