"""
Tabla de campos canónicos y sus encabezados conocidos.

CONTEXTO DEL PROBLEMA:
Cada sistema de planillas (y cada persona que arma el Excel a mano)
nombra las columnas a su manera. El mismo dato llega como
"APELLIDOS Y NOMBRES", "NOMBRES Y APELLIDOS" o simplemente "TRABAJADOR".

SOLUCIÓN:
Una tabla declarativa campo canónico → variantes de encabezado, en orden
de preferencia. El resolvedor de columnas recorre los campos en el orden
de declaración y, dentro de cada campo, las variantes en orden: el primer
encabezado que coincide gana.

Las variantes se escriben tal como aparecen en las planillas. Las tildes
y mayúsculas se normalizan al comparar, no hace falta duplicarlas aquí.

IMPORTANTE: el orden de las variantes es parte del comportamiento. Por
ejemplo, en `overtime_hours` la variante 'Horas Extras' también coincide
por substring con 'HORAS EXTRAS 25%'; cambiar el orden cambia qué columna
se vincula.
"""

from collections.abc import Mapping
from types import MappingProxyType

COLUMN_VARIANTS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        # --- Identificación ---
        "full_name": ("APELLIDOS Y NOMBRES", "NOMBRES Y APELLIDOS", "TRABAJADOR"),
        "dni": ("DNI", "DOCUMENTO"),
        "job_title": ("CARGO U OCUPACIÓN", "CARGO", "OCUPACION"),
        "area": ("AREA DE TRABAJO", "AREA", "DEPARTAMENTO"),
        "hire_date": ("FECHA DE INGRESO", "F. INGRESO"),
        "termination_date": ("FECHA DE CESE", "F. CESE"),
        "birth_date": ("FECHA DE NACIMIENTO", "F. NACIMIENTO"),
        "period": ("PERIODO DE CÁLCULO", "PERIODO", "MES"),
        # --- Ingresos ---
        "base_salary": ("REMUNERACIÓN O JORNAL BÁSICO", "BASICO"),
        "monthly_remuneration": ("REM.MENSUAL",),
        "vacation_remuneration": ("REMUNERACIÓN VACACIONAL", "VACACIONES PAGADAS"),
        "family_allowance": ("ASIGNACIÓN FAMILIAR", "ASIG. FAM."),
        "bonus": ("Bonos", "BONIFICACIONES"),
        "regular_bonus": ("BONIFICACION REGULAR",),
        "gratificacion": ("GRATIFICACIÓN", "GRATIFICACION"),
        "bono_30334": ("BONO TEMPORAL LEY 30334", "BONO 30334"),
        "other_income": ("OTROS INGRESOS",),
        # --- Horas extras ---
        "overtime_hours": ("Horas Extras", "H.Ext.", "Hrs. Extra"),
        "overtime_25": ("HORAS EXTRAS 25%", "H.E. 25%"),
        "overtime_35": ("HORAS EXTRAS 35%", "H.E. 35%"),
        "overtime_100": ("HORAS EXTRAS 100%", "H.E. 100%"),
        "overtime": ("HORAS EXTRAS",),
        # --- Descuentos ---
        "afp": ("AFP", "SISTEMA PENSIONARIO"),
        "spp_aporte": ("SPP - APORTE OBLIGATORIA", "AFP APORTE"),
        "spp_prima": ("SPP - PRIMA SEGURO", "AFP PRIMA"),
        "spp_comision": ("SPP - COMISION PORCENTUAL", "AFP COMISION"),
        "onp": ("SISTEMA NACIONAL DE PENSIONES ONP", "ONP"),
        "income_tax": ("RENTA DE QUINTA CATEGORIA", "RENTA 5TA"),
        "other_deductions": ("OTROS DESCUENTOS",),
        "tardanzas": ("TARDANZAS", "DSCTO TARDANZA"),
        "adelantos": ("ADELANTOS OTORGADOS", "ADELANTOS"),
        # --- Aportaciones del empleador ---
        "essalud": ("ESSALUD SEGURO REGULAR", "ESSALUD"),
        # --- Días ---
        "days_worked": ("DIAS LABORADOS", "DIAS LABORADOS:", "Dias Lab.", "Dias Laborados"),
        "vacation_days": ("DIAS DE VACACIONES", "DIAS DE VACACIONES:", "Días Vac."),
        "absence_days": ("DIAS DE FALTAS", "Días de Falta", "Permisos y Faltas"),
    }
)

REQUIRED_FIELDS: tuple[str, ...] = ("full_name", "dni")
"""Campos sin los cuales el archivo completo no se puede procesar."""
