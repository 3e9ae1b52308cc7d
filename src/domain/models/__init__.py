"""
Modelos de dominio del procesador de planillas.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from src.domain.models import RawTable, ColumnMap, RegistroProcesado
"""

from src.domain.models.column_map import ColumnMap
from src.domain.models.conceptos_planilla import ConceptosPlanilla
from src.domain.models.perfil_empleado import (
    REGIMEN_SNP,
    REGIMEN_SPP,
    PerfilEmpleado,
)
from src.domain.models.periodo import Periodo
from src.domain.models.raw_table import RawTable
from src.domain.models.registro_procesado import RegistroProcesado

__all__ = [
    "ColumnMap",
    "ConceptosPlanilla",
    "PerfilEmpleado",
    "Periodo",
    "REGIMEN_SNP",
    "REGIMEN_SPP",
    "RawTable",
    "RegistroProcesado",
]
