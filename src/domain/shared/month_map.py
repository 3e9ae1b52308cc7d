"""
Mapeo de nombres de meses en español a números.

Las planillas peruanas escriben el periodo con el nombre completo del
mes ("JULIO 2025"). Además de los doce nombres estándar se incluye
SETIEMBRE, la grafía usual en Perú (y la que usa la SUNAT) para
septiembre.

La tabla es una constante de solo lectura: se construye una vez al
importar el módulo y nunca se modifica. El lookup siempre es
case-insensitive (se normaliza a mayúsculas).
"""

from collections.abc import Mapping
from types import MappingProxyType

_MONTH_MAP: Mapping[str, int] = MappingProxyType(
    {
        "ENERO": 1,
        "FEBRERO": 2,
        "MARZO": 3,
        "ABRIL": 4,
        "MAYO": 5,
        "JUNIO": 6,
        "JULIO": 7,
        "AGOSTO": 8,
        "SEPTIEMBRE": 9,
        "SETIEMBRE": 9,
        "OCTUBRE": 10,
        "NOVIEMBRE": 11,
        "DICIEMBRE": 12,
    }
)


def month_to_int(month_name: str) -> int:
    """Convierte un nombre de mes en español a su número 1-12.

    Args:
        month_name: Nombre completo del mes. Ejemplos: 'JULIO', 'julio',
                    'Setiembre'.

    Returns:
        Entero de 1 a 12.

    Raises:
        ValueError: Si el nombre no se reconoce.

    Ejemplos:
        >>> month_to_int("JULIO")
        7
        >>> month_to_int("setiembre")
        9
    """
    normalized = month_name.strip().upper()
    result = _MONTH_MAP.get(normalized)
    if result is None:
        raise ValueError(
            f"Mes no reconocido: '{month_name}'. "
            f"Valores válidos: {', '.join(_MONTH_MAP)}"
        )
    return result

