"""
Adaptador de entrada: Lector de planillas CSV usando pandas.

Decodifica el CSV exportado del sistema de planillas y lo entrega como
RawTable:
1. Lee TODO como texto (dtype=str): los DNI tienen ceros iniciales y los
   montos traen separadores que el dominio interpreta con sus propias
   reglas. pandas no debe convertir nada.
2. No convierte celdas vacías a NaN (keep_default_na=False).
3. Si no se indica separador, usa ';' cuando la línea de encabezados
   tiene más ';' que ',' y ',' en caso contrario. Las planillas
   exportadas desde Excel en español usan ';'.
4. Ignora líneas en blanco.
5. Recorta las filas con celdas de más en vez de rechazar el archivo.

Un archivo vacío no es un error de lectura: se devuelve una RawTable sin
encabezados y el procesador lanza el error de lote correspondiente.
"""

import csv
import io
from pathlib import Path

import pandas as pd

from src.domain.exceptions import FormatoInvalidoError, LecturaArchivoError
from src.domain.models.raw_table import RawTable
from src.domain.ports.table_reader import TableReader
from src.domain.shared.text_cleaner import safe_string


class CsvTableReader(TableReader):
    """Lee archivos .csv/.txt delimitados en UTF-8."""

    EXTENSIONES = (".csv", ".txt")

    def __init__(self, separador: str | None = None, encoding: str = "utf-8-sig") -> None:
        """
        Args:
            separador: Separador de columnas. None para detectarlo
                       automáticamente.
            encoding: Codificación del archivo. 'utf-8-sig' acepta UTF-8
                      con o sin BOM (Excel agrega BOM al exportar).
        """
        self._separador = separador
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "csv-pandas"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONES

    def read(self, file_path: Path) -> RawTable:
        """Decodifica el CSV en una RawTable.

        Las filas con más celdas que encabezados se recortan: las celdas
        sobrantes al final se descartan y la fila se conserva.

        Raises:
            FormatoInvalidoError: Si el archivo no existe.
            LecturaArchivoError: Si el archivo no está en UTF-8 o su
                                 estructura no se puede interpretar.
        """
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "CSV", "El archivo no existe")

        try:
            contenido = file_path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise LecturaArchivoError(str(file_path), f"El archivo no está en UTF-8: {e}")

        # Sin primera línea no hay de dónde detectar el separador
        lineas = contenido.splitlines()
        if not lineas or not lineas[0].strip():
            return RawTable(headers=())

        opciones = dict(
            sep=self._separador or self.detect_separator(lineas[0]),
            engine="python",
            dtype=str,
            keep_default_na=False,
        )
        try:
            encabezados = list(pd.read_csv(io.StringIO(lineas[0]), nrows=0, **opciones).columns)

            def recortar(campos: list[str]) -> list[str]:
                return campos[: len(encabezados)]

            # El encabezado entra como fila 0: así pandas no confunde las
            # celdas sobrantes de la primera fila de datos con un índice.
            df = pd.read_csv(
                io.StringIO(contenido),
                header=None,
                skip_blank_lines=True,
                on_bad_lines=recortar,
                **opciones,
            )
        except pd.errors.EmptyDataError:
            return RawTable(headers=())
        except (pd.errors.ParserError, csv.Error) as e:
            raise LecturaArchivoError(str(file_path), f"CSV mal formado: {e}")

        return self.from_dataframe(df.iloc[1:].set_axis(encabezados, axis=1))

    @staticmethod
    def detect_separator(primera_linea: str) -> str:
        """Elige ';' o ',' según cuál aparece más en la línea de encabezados.

        >>> CsvTableReader.detect_separator("TRABAJADOR;DNI;BASICO")
        ';'
        >>> CsvTableReader.detect_separator("APELLIDOS, NOMBRES;DNI;PERIODO")
        ';'
        >>> CsvTableReader.detect_separator("TRABAJADOR")
        ','
        """
        return ";" if primera_linea.count(";") > primera_linea.count(",") else ","

    @staticmethod
    def from_dataframe(df: pd.DataFrame) -> RawTable:
        """Convierte un DataFrame (ya leído) en RawTable.

        Los encabezados se conservan tal cual (sin strip): son la clave
        con la que el ColumnMap busca cada celda en la fila.
        """
        headers = tuple(str(c) for c in df.columns)
        rows = tuple(
            {header: safe_string(value) for header, value in zip(headers, values)}
            for values in df.itertuples(index=False, name=None)
        )
        return RawTable(headers=headers, rows=rows)
