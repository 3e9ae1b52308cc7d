"""
Modelo de dominio: Datos del trabajador para la boleta.

Agrupa los campos descriptivos de la cabecera de la boleta de pago:
identidad, cargo, fechas, días y régimen pensionario.

Las fechas se guardan como texto, tal como vienen en la planilla.
La boleta las imprime sin transformar y la planilla no garantiza
ningún formato de fecha.
"""

from dataclasses import dataclass
from decimal import Decimal

REGIMEN_SNP = "SNP"
"""Sistema Nacional de Pensiones (ONP)."""

REGIMEN_SPP = "SPP"
"""Sistema Privado de Pensiones (AFP)."""

REGIMENES_PENSIONARIOS: tuple[str, ...] = (REGIMEN_SNP, REGIMEN_SPP)


@dataclass(frozen=True)
class PerfilEmpleado:
    """Cabecera de la boleta: quién es el trabajador y qué periodo se paga."""

    nombre_completo: str
    dni: str
    """Se guarda como string: los DNI peruanos tienen ceros iniciales."""

    cargo: str
    area: str
    fecha_ingreso: str
    fecha_cese: str
    fecha_nacimiento: str
    dias_laborados: int
    dias_vacaciones: int
    dias_faltas: int
    horas_extras: Decimal
    remuneracion_mensual: Decimal
    sistema_pensionario: str
    """Nombre de la AFP tal como viene en la planilla (o el régimen si está vacío)."""

    regimen_pensionario: str
    """'SNP' o 'SPP'."""

    periodo_texto: str
    """Periodo tal como se imprime en la boleta. Ejemplo: 'JULIO 2025'."""

    def __post_init__(self) -> None:
        if self.regimen_pensionario not in REGIMENES_PENSIONARIOS:
            raise ValueError(
                f"Régimen pensionario no reconocido: '{self.regimen_pensionario}'. "
                f"Esperado: SNP o SPP"
            )
