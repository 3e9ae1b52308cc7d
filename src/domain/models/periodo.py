"""
Modelo de dominio: Periodo de cálculo de la planilla.

El periodo (mes/año) al que corresponde una boleta. Se deriva de texto
libre ("JULIO 2025", "05/2024", "2024-05"), por eso lleva una bandera
`es_valido`: cuando el texto no se pudo interpretar, año y mes son el
mes calendario actual, un valor de respaldo y NO una suposición de lo que
quiso decir quien llenó la planilla.
"""

from dataclasses import dataclass

MESES_ESTACIONALES: tuple[int, ...] = (7, 12)
"""Julio y diciembre: únicos meses con gratificación, bono Ley 30334 y adelantos."""


@dataclass(frozen=True)
class Periodo:
    """Mes y año de la planilla, con indicador de validez."""

    año: int
    mes: int
    es_valido: bool

    @property
    def es_estacional(self) -> bool:
        """True si el mes es julio o diciembre (pago de gratificaciones)."""
        return self.mes in MESES_ESTACIONALES

    def __post_init__(self) -> None:
        if not 1 <= self.mes <= 12:
            raise ValueError(f"Mes fuera de rango: {self.mes}. Debe ser 1-12.")
