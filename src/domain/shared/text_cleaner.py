"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar celdas y encabezados del CSV
antes de que el resolvedor de columnas y el normalizador los usen.

Estas funciones NO tienen lógica de negocio (no saben de planillas ni
montos). Solo operan sobre strings puros.
"""

import math
import re
import unicodedata


def safe_string(value: object) -> str:
    """Convierte cualquier valor de celda a texto limpio.

    None y NaN (celdas vacías en pandas) se convierten en "".

    Ejemplos:
        >>> safe_string("  PEREZ LOPEZ, JUAN ")
        'PEREZ LOPEZ, JUAN'
        >>> safe_string(None)
        ''
        >>> safe_string(30)
        '30'
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  APELLIDOS   Y NOMBRES ")
        'APELLIDOS Y NOMBRES'
    """
    return re.sub(r"\s+", " ", text).strip()


def fold_accents(text: str) -> str:
    """Elimina tildes y diéresis conservando la letra base.

    Las planillas exportadas de distintos sistemas escriben el mismo
    encabezado con y sin tilde: 'REMUNERACIÓN' vs 'REMUNERACION'.

    La Ñ se conserva: no es una letra con tilde sino otra letra.

    Ejemplos:
        >>> fold_accents("CARGO U OCUPACIÓN")
        'CARGO U OCUPACION'
        >>> fold_accents("AÑO")
        'AÑO'
    """
    resultado = []
    for char in text:
        if char in "ñÑ":
            resultado.append(char)
            continue
        descompuesto = unicodedata.normalize("NFD", char)
        resultado.append(
            "".join(c for c in descompuesto if unicodedata.category(c) != "Mn")
        )
    return "".join(resultado)


def normalize_header(text: str) -> str:
    """Forma comparable de un encabezado: sin tildes, en mayúsculas y con
    los espacios internos colapsados.

    Es la normalización que el resolvedor de columnas aplica tanto a los
    encabezados del archivo como a las variantes conocidas.

    Ejemplos:
        >>> normalize_header("  Días Vac. ")
        'DIAS VAC.'
        >>> normalize_header("APELLIDOS  Y  NOMBRES")
        'APELLIDOS Y NOMBRES'
    """
    return clean_whitespace(fold_accents(text).upper())


def safe_filename_part(text: str) -> str:
    """Vuelve un texto de la planilla seguro para usarlo dentro de un nombre
    de archivo o de una entrada del ZIP.

    Las barras ('/' y '\\') se reemplazan por guiones para que ninguna celda
    pueda crear subcarpetas ni salir del directorio de salida. Los puntos
    iniciales se eliminan.

    Ejemplos:
        >>> safe_filename_part("05/2024")
        '05-2024'
        >>> safe_filename_part("/../../otro")
        '-..-..-otro'
        >>> safe_filename_part("..oculto")
        'oculto'
    """
    return text.replace("/", "-").replace("\\", "-").lstrip(".")
