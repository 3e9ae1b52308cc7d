"""
Lectura tolerante de cantidades enteras (días laborados, vacaciones, faltas).

Las celdas de días suelen venir con texto extra o con decimales
("30 días", "30.0", "15,0"). Se toma el entero inicial y se ignora el
resto. Si no hay ningún entero al inicio de la celda se usa el valor por
defecto del campo.
"""

import math
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_safe(value: object, default: int) -> int:
    """Lee el entero inicial de una celda. Nunca lanza excepción.

    Args:
        value: Texto de la celda, un número, o None.
        default: Valor a devolver si la celda está vacía o no empieza
                 con un número.

    Ejemplos:
        >>> parse_int_safe("30", default=30)
        30
        >>> parse_int_safe("28 días", default=30)
        28
        >>> parse_int_safe("", default=30)
        30
        >>> parse_int_safe("N/A", default=0)
        0
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return int(value)

    m = _LEADING_INT.match(str(value))
    if not m:
        return default
    return int(m.group(1))
