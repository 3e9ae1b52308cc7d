"""
Modelo de dominio: Tabla cruda decodificada del CSV.

Es el "puente" entre el adaptador que decodifica el archivo (pandas)
y el procesador de planillas. El procesador nunca ve un DataFrame:
solo encabezados y filas de texto.

Se guardan los encabezados tal como vienen (sin normalizar) porque el
ColumnMap vincula cada campo canónico al texto ORIGINAL del encabezado,
que es la clave con la que se busca en cada fila.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class RawTable:
    """Encabezados + filas de un CSV, en el orden original del archivo."""

    headers: tuple[str, ...]
    """Encabezados en el orden de las columnas."""

    rows: tuple[Mapping[str, str], ...] = field(default_factory=tuple)
    """Cada fila es un mapeo de solo lectura encabezado → texto de la celda."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", tuple(self.headers))
        object.__setattr__(
            self, "rows", tuple(MappingProxyType(dict(row)) for row in self.rows)
        )

    @property
    def has_headers(self) -> bool:
        """Indica si la tabla tiene al menos un encabezado no vacío."""
        return any(h.strip() for h in self.headers)

    def __len__(self) -> int:
        return len(self.rows)
