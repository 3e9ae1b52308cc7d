"""
Servicio de dominio: Normalización de una fila de la planilla.

Convierte una fila cruda del CSV (encabezado → texto) en un
RegistroProcesado con:
- PerfilEmpleado: cabecera de la boleta.
- ConceptosPlanilla: ingresos, descuentos y aportaciones.
- errores: problemas de validación de la fila.

Reglas de negocio que se aplican aquí:
1. Gratificación, bono Ley 30334 y adelantos solo se toman en julio y
   diciembre; en cualquier otro mes se fuerzan a cero.
2. El régimen pensionario (SNP/SPP) se clasifica a partir del nombre de la
   AFP y de los montos de ONP/SPP. El aporte del régimen que no aplica se
   fuerza a cero.
3. Los errores de validación NO cortan la extracción: la fila se procesa
   completa y los errores se acumulan.

Cada fila solo lee el ColumnMap compartido (inmutable) y produce su propio
registro, así que las filas son independientes entre sí.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal

from src.domain.models.column_map import ColumnMap
from src.domain.models.conceptos_planilla import ConceptosPlanilla
from src.domain.models.perfil_empleado import REGIMEN_SNP, REGIMEN_SPP, PerfilEmpleado
from src.domain.models.registro_procesado import RegistroProcesado
from src.domain.shared.int_parser import parse_int_safe
from src.domain.shared.money import parse_money
from src.domain.shared.period_parser import extract_period

ERROR_FALTA_NOMBRE = "Falta Nombre"
ERROR_FALTA_DNI = "Falta DNI"
ERROR_FALTA_PERIODO = "Falta periodo de cálculo"
ERROR_PERIODO_INVALIDO = "Formato de periodo inválido"

AFP_PRIVADAS: tuple[str, ...] = ("INTEGRA", "PRIMA", "PROFUTURO", "HABITAT")
"""Administradoras privadas de fondos de pensiones que operan en Perú."""

DIAS_LABORADOS_DEFAULT = 30
CARGO_DEFAULT = "EMPLEADO"
AREA_DEFAULT = "GENERAL"
PERIODO_DEFAULT = "MENSUAL"

_CERO = Decimal("0")


def normalize_row(
    row: Mapping[str, object],
    columns: ColumnMap,
    row_index: int,
    today: date | None = None,
) -> RegistroProcesado:
    """Normaliza y valida una fila del CSV.

    Args:
        row: Fila cruda (encabezado original → texto de la celda).
        columns: Mapeo de campos canónicos resuelto para el archivo.
        row_index: Posición de la fila en el archivo (desde 0).
        today: Fecha de referencia para periodos inválidos. Por defecto,
               la fecha actual.

    Returns:
        RegistroProcesado. Nunca lanza excepción por datos de la fila:
        los problemas quedan en `errores`.
    """
    errores: list[str] = []

    nombre = columns.value(row, "full_name")
    dni = columns.value(row, "dni")
    periodo_texto = columns.value(row, "period")

    if not nombre:
        errores.append(ERROR_FALTA_NOMBRE)
    if not dni:
        errores.append(ERROR_FALTA_DNI)
    if not periodo_texto:
        errores.append(ERROR_FALTA_PERIODO)

    periodo = extract_period(periodo_texto, today=today)
    if not periodo.es_valido and periodo_texto:
        errores.append(ERROR_PERIODO_INVALIDO)

    def monto(campo: str) -> Decimal:
        return parse_money(columns.value(row, campo))

    def monto_estacional(campo: str) -> Decimal:
        return monto(campo) if periodo.es_estacional else _CERO

    # --- Horas extras ---
    # La columna genérica "HORAS EXTRAS" se usa como respaldo del 25%
    # cuando el 25% está vacío o en cero (no solo cuando falta la columna).
    horas_extras_25 = monto("overtime_25") or monto("overtime")

    # --- Pensiones ---
    spp_aporte = monto("spp_aporte")
    spp_prima = monto("spp_prima")
    spp_comision = monto("spp_comision")
    spp_total = spp_aporte + spp_prima + spp_comision
    onp = monto("onp")
    afp_nombre = columns.value(row, "afp")
    regimen = clasificar_regimen(afp_nombre, onp, spp_total)

    conceptos = ConceptosPlanilla(
        remuneracion_basica=monto("base_salary"),
        remuneracion_vacacional=monto("vacation_remuneration"),
        horas_extras_25=horas_extras_25,
        horas_extras_35=monto("overtime_35"),
        horas_extras_100=monto("overtime_100"),
        asignacion_familiar=monto("family_allowance"),
        bonificacion_extra=monto("bonus"),
        bonificacion_regular=monto("regular_bonus"),
        otros_ingresos=monto("other_income"),
        gratificacion=monto_estacional("gratificacion"),
        bono_30334=monto_estacional("bono_30334"),
        adelantos=monto_estacional("adelantos"),
        spp_aporte=spp_aporte,
        spp_prima=spp_prima,
        spp_comision=spp_comision,
        spp_total=spp_total if regimen == REGIMEN_SPP else _CERO,
        onp=onp if regimen == REGIMEN_SNP else _CERO,
        renta_quinta=monto("income_tax"),
        otros_descuentos=monto("other_deductions"),
        tardanzas=monto("tardanzas"),
        essalud_regular=monto("essalud"),
    )

    empleado = PerfilEmpleado(
        nombre_completo=nombre,
        dni=dni,
        cargo=columns.value(row, "job_title") if "job_title" in columns else CARGO_DEFAULT,
        area=columns.value(row, "area") if "area" in columns else AREA_DEFAULT,
        fecha_ingreso=columns.value(row, "hire_date"),
        fecha_cese=columns.value(row, "termination_date"),
        fecha_nacimiento=columns.value(row, "birth_date"),
        dias_laborados=parse_int_safe(
            columns.value(row, "days_worked"), default=DIAS_LABORADOS_DEFAULT
        ),
        dias_vacaciones=parse_int_safe(columns.value(row, "vacation_days"), default=0),
        dias_faltas=parse_int_safe(columns.value(row, "absence_days"), default=0),
        horas_extras=monto("overtime_hours"),
        remuneracion_mensual=monto("monthly_remuneration"),
        sistema_pensionario=afp_nombre or regimen,
        regimen_pensionario=regimen,
        periodo_texto=periodo_texto or PERIODO_DEFAULT,
    )

    return RegistroProcesado(
        id=f"{dni}-{row_index}",
        empleado=empleado,
        planilla=conceptos,
        errores=tuple(errores),
    )


def clasificar_regimen(afp_nombre: str, onp: Decimal, spp_total: Decimal) -> str:
    """Clasifica el régimen pensionario del trabajador.

    Orden de evaluación:
    1. El nombre dice 'ONP' o hay monto de ONP → SNP.
    2. Hay aportes al SPP o el nombre es una AFP conocida → SPP.
    3. Sin información → SNP.

    Ejemplos:
        >>> clasificar_regimen("ONP", Decimal("0"), Decimal("0"))
        'SNP'
        >>> clasificar_regimen("AFP INTEGRA", Decimal("0"), Decimal("0"))
        'SPP'
        >>> clasificar_regimen("", Decimal("0"), Decimal("150.40"))
        'SPP'
    """
    nombre = afp_nombre.upper()
    if "ONP" in nombre or onp > 0:
        return REGIMEN_SNP
    if spp_total > 0 or any(afp in nombre for afp in AFP_PRIVADAS):
        return REGIMEN_SPP
    return REGIMEN_SNP
