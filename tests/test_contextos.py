"""
Tests de idoneidad de tipos DOI por subsistema SUNAT
"""
import pytest

from validador_doi import (
    ContextoNoReconocidoError,
    DoiType,
    UsageContext,
    is_suitable_for,
    list_foreign_types,
    list_non_domiciled_types,
    list_suitable_types,
)


@pytest.mark.parametrize("contexto", list(UsageContext))
def test_lista_coincide_con_tabla(contexto, idoneos_por_contexto):
    assert list_suitable_types(contexto) == idoneos_por_contexto[contexto]


@pytest.mark.parametrize("contexto", list(UsageContext))
def test_lista_equivale_a_identificador_no_vacio(contexto):
    esperados = {t for t in DoiType if t.subsystem_id(contexto).strip()}
    assert set(list_suitable_types(contexto)) == esperados


def test_ejemplos_de_idoneidad():
    assert DoiType.RUC.is_suitable_for(UsageContext.PLE) is True
    assert DoiType.RUC.is_suitable_for(UsageContext.FV_3800) is True
    assert DoiType.RUC.is_suitable_for(UsageContext.AFP_NET) is False
    assert DoiType.TIN.is_suitable_for(UsageContext.PLAME) is False
    assert DoiType.TIN.is_suitable_for(UsageContext.FV_3800) is True


@pytest.mark.parametrize("contexto,esperado", [
    ("PLAME", UsageContext.PLAME),
    ("ple", UsageContext.PLE),
    ("AFP_NET", UsageContext.AFP_NET),
    ("afpnet", UsageContext.AFP_NET),
    ("FV-3800", UsageContext.FV_3800),
])
def test_contexto_como_texto(contexto, esperado):
    assert UsageContext(contexto) is esperado
    assert list_suitable_types(contexto) == list_suitable_types(esperado)


@pytest.mark.parametrize("contexto", ["SIRE", "", None, 3])
def test_contexto_no_reconocido(contexto):
    with pytest.raises(ContextoNoReconocidoError) as exc_info:
        DoiType.DNI.is_suitable_for(contexto)
    assert exc_info.value.context == contexto
    assert exc_info.value.tipo == "DNI"


def test_lista_con_contexto_no_reconocido():
    with pytest.raises(ContextoNoReconocidoError):
        list_suitable_types("SIRE")


def test_funcion_acepta_codigo_corto():
    assert is_suitable_for("CEX", UsageContext.PLAME) is True
    assert is_suitable_for(DoiType.OTHERS, "PLAME") is False


def test_no_domiciliados():
    assert list_non_domiciled_types() == [DoiType.ID, DoiType.TIN]
    assert list_non_domiciled_types(UsageContext.AFP_NET) == [DoiType.ID]
    assert list_non_domiciled_types(UsageContext.FV_3800) == [DoiType.ID, DoiType.TIN]


def test_extranjeros():
    assert list_foreign_types() == [
        DoiType.CE, DoiType.PASSPORT, DoiType.REFUGEE, DoiType.DIPLOMATIC,
        DoiType.PTP, DoiType.ID, DoiType.ID_PTP, DoiType.TIN,
    ]
