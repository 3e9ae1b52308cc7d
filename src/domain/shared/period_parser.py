"""
Interpretación del periodo de cálculo de la planilla.

CONTEXTO DEL PROBLEMA:
La columna "PERIODO DE CÁLCULO" es texto libre. En las planillas reales
aparecen, entre otros:

- "JULIO 2025", "Setiembre 2024"  → nombre del mes + año
- "05/2024", "05-2024"            → MM/YYYY
- "2024/05", "2024-05"            → YYYY/MM
- "PLANILLA JULIO 2025"           → con texto alrededor

SOLUCIÓN:
Un parser que prueba los patrones SIEMPRE en el mismo orden (primero el
nombre del mes, después los numéricos) y que nunca lanza excepción. Si
ningún patrón produce un mes y un año en rango, devuelve el mes actual
marcado como inválido, para que el normalizador reporte el error en la
fila sin detener el lote.
"""

import re
from datetime import date

from src.domain.models.periodo import Periodo
from src.domain.shared.month_map import month_to_int

_AÑO_MIN = 1900
_AÑO_MAX = 2100

# "JULIO 2025": palabra en mayúsculas, espacios y año de 4 dígitos.
_TEXT_PATTERN = re.compile(r"([A-Z]+)\s+(\d{4})")

# "05/2024", "05-2024"  |  "2024/05", "2024-05"
_NUMERIC_PATTERN = re.compile(r"(\d{1,2})[/\-](\d{4})|(\d{4})[/\-](\d{1,2})")


def extract_period(text: str | None, today: date | None = None) -> Periodo:
    """Extrae mes y año del texto del periodo.

    Orden de intentos:
    1. Nombre del mes en español + año ("JULIO 2025").
    2. Formatos numéricos MM/YYYY, MM-YYYY, YYYY/MM, YYYY-MM.

    Args:
        text: Texto de la celda del periodo.
        today: Fecha de referencia para el valor de respaldo. Por defecto,
               la fecha actual.

    Returns:
        Periodo con es_valido=True si algún patrón coincidió con mes
        1-12 y año 1900-2100. Si no, el año/mes de `today` con
        es_valido=False.

    Ejemplos:
        >>> extract_period("JULIO 2025")
        Periodo(año=2025, mes=7, es_valido=True)
        >>> extract_period("2024-05")
        Periodo(año=2024, mes=5, es_valido=True)
    """
    normalized = (text or "").strip().upper()

    # --- Caso 1: nombre del mes + año ---
    m = _TEXT_PATTERN.search(normalized)
    if m:
        año = int(m.group(2))
        try:
            mes = month_to_int(m.group(1))
        except ValueError:
            mes = None
        if mes is not None and _año_en_rango(año):
            return Periodo(año=año, mes=mes, es_valido=True)

    # --- Caso 2: formatos numéricos ---
    # Si la primera alternativa (MM/YYYY) coincide pero está fuera de
    # rango, NO se busca otra coincidencia más adelante en el texto.
    m = _NUMERIC_PATTERN.search(normalized)
    if m:
        if m.group(1) and m.group(2):
            mes, año = int(m.group(1)), int(m.group(2))
            if 1 <= mes <= 12 and _año_en_rango(año):
                return Periodo(año=año, mes=mes, es_valido=True)
        if m.group(3) and m.group(4):
            año, mes = int(m.group(3)), int(m.group(4))
            if 1 <= mes <= 12 and _año_en_rango(año):
                return Periodo(año=año, mes=mes, es_valido=True)

    # --- Sin coincidencias: respaldo con el mes actual ---
    hoy = today or date.today()
    return Periodo(año=hoy.year, mes=hoy.month, es_valido=False)


def _año_en_rango(año: int) -> bool:
    return _AÑO_MIN <= año <= _AÑO_MAX
