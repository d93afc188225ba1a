"""
Configuración compartida de pytest
"""
import os
import sys

import pytest

# Añadir raíz del proyecto al path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from validador_doi import DoiType, UsageContext


# Idoneidad esperada por contexto, según los códigos de subsistema del catálogo
IDONEOS_POR_CONTEXTO = {
    UsageContext.PLAME: [
        DoiType.DNI, DoiType.PNP, DoiType.CE, DoiType.RUC, DoiType.PASSPORT,
        DoiType.REFUGEE, DoiType.DIPLOMATIC, DoiType.PTP, DoiType.ID, DoiType.ID_PTP,
    ],
    UsageContext.PLE: list(DoiType),
    UsageContext.AFP_NET: [
        DoiType.DNI, DoiType.PNP, DoiType.CE, DoiType.PASSPORT, DoiType.REFUGEE,
        DoiType.DIPLOMATIC, DoiType.PTP, DoiType.ID, DoiType.ID_PTP,
    ],
    UsageContext.FV_3800: [
        DoiType.DNI, DoiType.CE, DoiType.RUC, DoiType.PASSPORT, DoiType.ID, DoiType.TIN,
    ],
}


@pytest.fixture
def idoneos_por_contexto():
    return IDONEOS_POR_CONTEXTO
