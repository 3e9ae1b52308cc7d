"""
Servicio de dominio: Procesador de planillas.

Orquesta el procesamiento de un archivo completo:
1. Selecciona el TableReader adecuado (can_handle) y decodifica la tabla.
2. Verifica que haya encabezados.
3. Resuelve las columnas y verifica las obligatorias (Nombres, DNI).
4. Normaliza cada fila, en orden, y devuelve TODOS los registros
   (válidos e inválidos): quien llama filtra por `es_valido`.

Hay dos niveles de error:
- Fatal (lote): sin encabezados o sin columnas obligatorias. Se lanza una
  excepción y no se devuelve ningún registro parcial.
- Recuperable (fila): falta nombre, DNI o periodo. Queda en
  RegistroProcesado.errores y el lote continúa.

¿Por qué no poner esta lógica en el CLI?
Porque "dado un CSV, producir registros de planilla" es una regla del
dominio. El CLI solo decide QUÉ archivo procesar y DÓNDE guardar.
"""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from src.domain.exceptions import (
    ColumnasObligatoriasError,
    EncabezadosNoEncontradosError,
    FormatoInvalidoError,
)
from src.domain.models.raw_table import RawTable
from src.domain.models.registro_procesado import RegistroProcesado
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.table_reader import TableReader
from src.domain.services.column_resolver import resolve_columns
from src.domain.services.record_normalizer import normalize_row
from src.domain.shared.column_variants import COLUMN_VARIANTS, REQUIRED_FIELDS


class PayrollProcessor:
    """Procesa un archivo de planilla y produce la lista de RegistroProcesado.

    Recibe sus dependencias por constructor (Dependency Injection). No
    sabe qué lector concreto se usa, solo conoce los puertos.
    """

    def __init__(
        self,
        table_readers: Sequence[TableReader],
        logger: ProcessLogger,
        today: date | None = None,
    ) -> None:
        """
        Args:
            table_readers: Lectores disponibles, en orden de prioridad.
            logger: Logger para la bitácora de procesamiento.
            today: Fecha de referencia para periodos inválidos. None usa
                   la fecha actual en cada procesamiento.
        """
        self._readers = table_readers
        self._logger = logger
        self._today = today

    def process_file(self, file_path: Path) -> list[RegistroProcesado]:
        """Lee y procesa un archivo de planilla.

        Raises:
            FormatoInvalidoError: Si ningún lector puede manejar el archivo.
            LecturaArchivoError: Si el archivo no se puede decodificar.
            EncabezadosNoEncontradosError: Si el archivo no tiene encabezados.
            ColumnasObligatoriasError: Si faltan las columnas de Nombres o DNI.
        """
        reader = self._find_reader(file_path)
        if reader is None:
            error = FormatoInvalidoError(
                str(file_path),
                "CSV",
                f"Ningún lector puede manejar '{file_path.suffix}'",
            )
            self._logger.log_error(file_path, error)
            raise error

        self._logger.log_file_received(file_path, reader.name)

        try:
            table = reader.read(file_path)
            return self.process_table(table, source=str(file_path))
        except Exception as e:
            self._logger.log_error(file_path, e)
            raise

    def process_table(self, table: RawTable, source: str = "") -> list[RegistroProcesado]:
        """Procesa una tabla ya decodificada.

        Es una transformación pura fila por fila: ninguna fila afecta a
        otra, y todas leen el mismo ColumnMap inmutable.

        Args:
            table: Tabla cruda (encabezados + filas).
            source: Nombre del archivo de origen, solo para mensajes de error.

        Returns:
            Un RegistroProcesado por fila, en el orden original.
        """
        if not table.has_headers:
            raise EncabezadosNoEncontradosError(source)

        columns = resolve_columns(table.headers, COLUMN_VARIANTS)
        missing = columns.missing(COLUMN_VARIANTS)
        self._logger.log_columns_detected(dict(columns.bindings), missing)

        faltantes = columns.missing(REQUIRED_FIELDS)
        if faltantes:
            raise ColumnasObligatoriasError(faltantes, source)

        today = self._today or date.today()
        registros = [
            normalize_row(row, columns, index, today=today)
            for index, row in enumerate(table.rows)
        ]

        for index, registro in enumerate(registros):
            if not registro.es_valido:
                self._logger.log_row_invalid(index, list(registro.errores))

        self._logger.log_processing_complete(
            total=len(registros),
            validos=sum(1 for r in registros if r.es_valido),
        )
        return registros

    def _find_reader(self, file_path: Path) -> TableReader | None:
        """Devuelve el primer lector que pueda manejar el archivo."""
        for reader in self._readers:
            if reader.can_handle(file_path):
                return reader
        return None
