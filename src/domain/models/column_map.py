"""
Modelo de dominio: Mapeo de campos canónicos a encabezados del CSV.

Lo produce el resolvedor de columnas UNA vez por archivo y lo leen
todas las filas. Al ser inmutable, normalizar filas en paralelo no
necesita ningún tipo de sincronización.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.domain.shared.text_cleaner import safe_string


@dataclass(frozen=True)
class ColumnMap:
    """Campo canónico → encabezado original del CSV.

    Un campo sin resolver simplemente no aparece en `bindings`.
    """

    bindings: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copia de solo lectura: nadie puede modificar el mapeo después.
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    def header_for(self, campo: str) -> str | None:
        """Encabezado vinculado al campo, o None si no se resolvió."""
        return self.bindings.get(campo)

    def value(self, row: Mapping[str, object], campo: str) -> str:
        """Texto (con strip) de la celda del campo en una fila.

        Devuelve "" si el campo no se resolvió o la fila no tiene la celda.
        """
        header = self.header_for(campo)
        if header is None:
            return ""
        return safe_string(row.get(header))

    def missing(self, campos: Iterable[str]) -> list[str]:
        """Campos de la lista que no se pudieron resolver, en el mismo orden."""
        return [c for c in campos if c not in self.bindings]

    def __contains__(self, campo: object) -> bool:
        return campo in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)
