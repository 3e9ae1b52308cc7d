"""
Puerto de entrada: Lector de tablas.

Define el contrato para decodificar un archivo de planilla en una
RawTable (encabezados + filas de texto):

    TableReader (interfaz)
    └── CsvTableReader      → CSV en UTF-8 (pandas)

El procesador de planillas nunca abre archivos ni conoce pandas: recibe
la tabla ya decodificada. Separar, entrecomillar y decodificar el texto
es responsabilidad exclusiva del adaptador.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.models.raw_table import RawTable


class TableReader(ABC):
    """Interfaz para leer un archivo tabular."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este lector puede manejar el archivo dado.

        El PayrollProcessor usa el primer lector cuyo can_handle devuelva
        True.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> RawTable:
        """Decodifica el archivo en una RawTable.

        Un archivo vacío NO es un error de lectura: se devuelve una
        RawTable sin encabezados y el procesador decide qué hacer.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o no es del tipo
                                  esperado.
            LecturaArchivoError: Si el archivo no se puede decodificar.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del lector. Para logging. Ejemplo: 'csv-pandas'."""
        ...
