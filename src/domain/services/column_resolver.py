"""
Servicio de dominio: Resolución de columnas.

Dado el encabezado de un CSV, decide qué columna corresponde a cada campo
canónico de la planilla (ver column_variants.COLUMN_VARIANTS).

Estrategia (deliberadamente simple y predecible, sin puntajes):

    Para cada campo, en orden de declaración:
        Para cada variante, en orden:
            1. Coincidencia EXACTA (sin tildes, mayúsculas, con strip)
               contra todos los encabezados → se vincula.
            2. Si no, el PRIMER encabezado (en orden de columnas) que
               CONTIENE la variante → se vincula.
        Si ninguna variante coincide, el campo queda sin resolver.

Un mismo encabezado puede terminar vinculado a más de un campo (por
ejemplo, 'AFP APORTE' contiene 'AFP'). Es una ambigüedad conocida del
esquema de variantes y se conserva tal cual.
"""

from collections.abc import Mapping, Sequence

from src.domain.models.column_map import ColumnMap
from src.domain.shared.column_variants import COLUMN_VARIANTS
from src.domain.shared.text_cleaner import normalize_header


def find_column(headers: Sequence[str], variants: Sequence[str]) -> str | None:
    """Busca el encabezado que corresponde a una lista de variantes.

    Args:
        headers: Encabezados originales del CSV, en orden de columnas.
        variants: Variantes aceptadas para el campo, en orden de preferencia.

    Returns:
        El encabezado ORIGINAL (sin normalizar) que coincidió, o None.

    Ejemplos:
        >>> find_column(["N°", "DNI", "TRABAJADOR"], ["APELLIDOS Y NOMBRES", "TRABAJADOR"])
        'TRABAJADOR'
        >>> find_column(["Dias Lab. (mes)"], ["DIAS LABORADOS", "Dias Lab."])
        'Dias Lab. (mes)'
    """
    normalized = [normalize_header(h) for h in headers]

    for variant in variants:
        target = normalize_header(variant)
        if not target:
            continue

        # Paso 1: coincidencia exacta
        for original, norm in zip(headers, normalized):
            if norm == target:
                return original

        # Paso 2: coincidencia por substring, primera columna gana
        for original, norm in zip(headers, normalized):
            if target in norm:
                return original

    return None


def resolve_columns(
    headers: Sequence[str],
    variants: Mapping[str, Sequence[str]] = COLUMN_VARIANTS,
) -> ColumnMap:
    """Construye el ColumnMap de un archivo.

    Es una función pura: el mismo encabezado siempre produce el mismo
    mapeo.

    Args:
        headers: Encabezados originales del CSV.
        variants: Tabla campo → variantes. Por defecto, COLUMN_VARIANTS.

    Returns:
        ColumnMap con solo los campos que se pudieron resolver.
    """
    bindings: dict[str, str] = {}
    for campo, opciones in variants.items():
        header = find_column(headers, opciones)
        if header is not None:
            bindings[campo] = header
    return ColumnMap(bindings)
