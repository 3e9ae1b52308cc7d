"""
Modelo de dominio: Conceptos remunerativos de una boleta.

Ingresos, descuentos y aportaciones del empleador para un trabajador
en un periodo. Todos los montos son Decimal (soles).

Decisiones de diseño:
- `onp` y `spp_total` son mutuamente excluyentes: un trabajador aporta
  al SNP o al SPP, nunca a ambos. Los componentes del SPP (aporte, prima,
  comisión) se conservan individualmente aunque el régimen sea SNP,
  porque la boleta los imprime línea por línea.
- Los totales son propiedades (no campos) para que nunca puedan quedar
  desalineados con los conceptos que los componen.
"""

from dataclasses import dataclass
from decimal import Decimal

_CENTAVOS = Decimal("0.01")


@dataclass(frozen=True)
class ConceptosPlanilla:
    """Montos de la boleta de pago de un trabajador."""

    # --- Ingresos ---
    remuneracion_basica: Decimal
    remuneracion_vacacional: Decimal
    horas_extras_25: Decimal
    horas_extras_35: Decimal
    horas_extras_100: Decimal
    asignacion_familiar: Decimal
    bonificacion_extra: Decimal
    bonificacion_regular: Decimal
    otros_ingresos: Decimal
    gratificacion: Decimal
    """Solo distinto de cero en julio y diciembre."""

    bono_30334: Decimal
    """Bono extraordinario Ley 30334. Solo julio y diciembre."""

    # --- Descuentos ---
    adelantos: Decimal
    """Adelantos otorgados. Solo julio y diciembre."""

    spp_aporte: Decimal
    spp_prima: Decimal
    spp_comision: Decimal
    spp_total: Decimal
    """Cero si el régimen es SNP."""

    onp: Decimal
    """Cero si el régimen es SPP."""

    renta_quinta: Decimal
    otros_descuentos: Decimal
    tardanzas: Decimal

    # --- Aportaciones del empleador ---
    essalud_regular: Decimal

    def __post_init__(self) -> None:
        if self.onp != 0 and self.spp_total != 0:
            raise ValueError(
                f"Un trabajador no puede aportar a ONP ({self.onp}) "
                f"y a una AFP ({self.spp_total}) al mismo tiempo"
            )

    @property
    def ingresos(self) -> list[tuple[str, Decimal]]:
        """Líneas de la columna INGRESOS de la boleta, en orden de impresión."""
        return [
            ("REMUNERACIÓN O JORNAL BÁSICO", self.remuneracion_basica),
            ("REMUNERACIÓN VACACIONAL", self.remuneracion_vacacional),
            ("HORAS EXTRAS 25%", self.horas_extras_25),
            ("HORAS EXTRAS 35%", self.horas_extras_35),
            ("HORAS EXTRAS 100%", self.horas_extras_100),
            ("ASIGNACIÓN FAMILIAR", self.asignacion_familiar),
            ("GRATIFICACIÓN", self.gratificacion),
            ("BONO TEMPORAL LEY 30334", self.bono_30334),
            ("BONIFICACION EXTRAORDINARIA", self.bonificacion_extra),
            ("BONIFICACION REGULAR", self.bonificacion_regular),
            ("OTROS INGRESOS", self.otros_ingresos),
        ]

    @property
    def descuentos(self) -> list[tuple[str, Decimal]]:
        """Líneas de la columna DESCUENTOS de la boleta, en orden de impresión."""
        return [
            ("ADELANTOS OTORGADOS", self.adelantos),
            ("DESCUENTO JUDICIAL", Decimal("0")),
            ("ESSALUD VIDA", Decimal("0")),
            ("SPP - APORTE OBLIGATORIA", self.spp_aporte),
            ("SPP - PRIMA SEGURO", self.spp_prima),
            ("SPP - COMISION PORCENTUAL", self.spp_comision),
            ("SISTEMA NACIONAL DE PENSIONES ONP", self.onp),
            ("RENTA DE QUINTA CATEGORIA", self.renta_quinta),
            ("OTROS DESCUENTOS", self.otros_descuentos),
            ("TARDANZAS / PERMISOS / FALTAS", self.tardanzas),
        ]

    @property
    def aportaciones(self) -> list[tuple[str, Decimal]]:
        """Líneas de la columna APORTACIONES (a cargo del empleador)."""
        return [("ESSALUD SEGURO REGULAR", self.essalud_regular)]

    @property
    def total_ingresos(self) -> Decimal:
        return _sumar(self.ingresos)

    @property
    def total_descuentos(self) -> Decimal:
        return _sumar(self.descuentos)

    @property
    def total_aportaciones(self) -> Decimal:
        return _sumar(self.aportaciones)

    @property
    def neto_a_pagar(self) -> Decimal:
        """Total de ingresos menos total de descuentos.

        Las aportaciones no se restan: las paga el empleador.
        """
        return (self.total_ingresos - self.total_descuentos).quantize(_CENTAVOS)


def _sumar(lineas: list[tuple[str, Decimal]]) -> Decimal:
    total = sum((monto for _, monto in lineas), Decimal("0"))
    return total.quantize(_CENTAVOS)
