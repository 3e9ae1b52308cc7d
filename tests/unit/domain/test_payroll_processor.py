"""
Tests para src.domain.services.payroll_processor

El procesador solo conoce puertos, así que aquí se prueba con un lector
en memoria y una bitácora que acumula eventos en listas.
"""

from datetime import date
from pathlib import Path

import pytest

from src.adapters.input.table_readers.csv_reader import CsvTableReader
from src.domain.exceptions import (
    ColumnasObligatoriasError,
    EncabezadosNoEncontradosError,
    FormatoInvalidoError,
    PlanillaBaseError,
)
from src.domain.models.raw_table import RawTable
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.table_reader import TableReader
from src.domain.services.payroll_processor import PayrollProcessor

HOY = date(2026, 3, 15)


class MemoryLogger(ProcessLogger):
    """Bitácora en memoria: guarda cada evento para inspeccionarlo."""

    def __init__(self) -> None:
        self.recibidos: list[tuple[Path, str]] = []
        self.columnas: list[tuple[dict, list]] = []
        self.invalidas: list[tuple[int, list]] = []
        self.completos: list[tuple[int, int]] = []
        self.errores: list[tuple[Path, Exception]] = []

    def log_file_received(self, file_path, reader_name):
        self.recibidos.append((file_path, reader_name))

    def log_columns_detected(self, detected, missing):
        self.columnas.append((detected, missing))

    def log_row_invalid(self, row_index, errores):
        self.invalidas.append((row_index, errores))

    def log_processing_complete(self, total, validos):
        self.completos.append((total, validos))

    def log_error(self, file_path, error):
        self.errores.append((file_path, error))

    def log_export_start(self, num_documents):
        pass

    def log_export_complete(self, output_path, num_documents):
        pass

    def get_summary(self):
        return {}


class MemoryReader(TableReader):
    """Lector que devuelve siempre la misma tabla para archivos .mem."""

    def __init__(self, table: RawTable) -> None:
        self._table = table

    @property
    def name(self) -> str:
        return "memoria"

    def can_handle(self, file_path):
        return file_path.suffix == ".mem"

    def read(self, file_path):
        return self._table


def _tabla(*filas: dict[str, str]) -> RawTable:
    headers = ("APELLIDOS Y NOMBRES", "DNI", "PERIODO", "BASICO")
    return RawTable(headers=headers, rows=tuple(filas))


def _fila(nombre="PEREZ LOPEZ, JUAN", dni="01234567", periodo="MAYO 2025", basico="1,130.00"):
    return {"APELLIDOS Y NOMBRES": nombre, "DNI": dni, "PERIODO": periodo, "BASICO": basico}


@pytest.fixture
def logger():
    return MemoryLogger()


@pytest.fixture
def processor(logger):
    return PayrollProcessor([CsvTableReader()], logger, today=HOY)


class TestProcessTable:
    def test_devuelve_todas_las_filas_en_orden(self, processor):
        tabla = _tabla(
            _fila(dni="11111111"),
            _fila(dni=""),
            _fila(dni="33333333", periodo="garbage"),
            _fila(dni="44444444"),
        )

        registros = processor.process_table(tabla)

        assert [r.empleado.dni for r in registros] == ["11111111", "", "33333333", "44444444"]
        assert [r.es_valido for r in registros] == [True, False, False, True]
        assert [r.id for r in registros] == ["11111111-0", "-1", "33333333-2", "44444444-3"]

    def test_registra_filas_invalidas_y_resumen(self, processor, logger):
        processor.process_table(_tabla(_fila(), _fila(nombre=""), _fila()))

        assert logger.invalidas == [(1, ["Falta Nombre"])]
        assert logger.completos == [(3, 2)]

    def test_registra_columnas_detectadas(self, processor, logger):
        processor.process_table(_tabla(_fila()))

        detectadas, faltantes = logger.columnas[0]
        assert detectadas["full_name"] == "APELLIDOS Y NOMBRES"
        assert detectadas["base_salary"] == "BASICO"
        assert "income_tax" in faltantes
        assert "dni" not in faltantes

    def test_tabla_sin_filas(self, processor, logger):
        assert processor.process_table(_tabla()) == []
        assert logger.completos == [(0, 0)]

    def test_sin_encabezados_es_fatal(self, processor):
        with pytest.raises(EncabezadosNoEncontradosError, match="No se encontraron columnas"):
            processor.process_table(RawTable(headers=()))

    def test_encabezados_en_blanco_es_fatal(self, processor):
        with pytest.raises(EncabezadosNoEncontradosError):
            processor.process_table(RawTable(headers=("", "  ")))

    def test_sin_dni_es_fatal(self, processor):
        tabla = RawTable(
            headers=("TRABAJADOR", "PERIODO"),
            rows=({"TRABAJADOR": "ANA", "PERIODO": "MAYO 2025"},),
        )

        with pytest.raises(ColumnasObligatoriasError) as exc_info:
            processor.process_table(tabla)

        assert exc_info.value.faltantes == ["dni"]
        assert "Nombres, DNI" in str(exc_info.value)

    def test_sin_nombre_ni_dni_es_fatal(self, processor):
        tabla = RawTable(headers=("CODIGO", "MONTO"))

        with pytest.raises(ColumnasObligatoriasError) as exc_info:
            processor.process_table(tabla)

        assert exc_info.value.faltantes == ["full_name", "dni"]

    def test_errores_de_lote_comparten_base(self):
        assert issubclass(ColumnasObligatoriasError, PlanillaBaseError)
        assert issubclass(EncabezadosNoEncontradosError, PlanillaBaseError)


class TestProcessFile:
    def test_csv_desde_disco(self, processor, logger, tmp_path):
        archivo = tmp_path / "planilla.csv"
        archivo.write_text(
            "APELLIDOS Y NOMBRES,DNI,PERIODO,GRATIFICACIÓN\n"
            'PEREZ LOPEZ JUAN,01234567,JULIO 2025,"1,025.00"\n'
            "GOMEZ ANA,07654321,JULIO 2025,900\n",
            encoding="utf-8",
        )

        registros = processor.process_file(archivo)

        assert len(registros) == 2
        assert registros[0].empleado.dni == "01234567"
        assert registros[0].planilla.gratificacion.to_eng_string() == "1025.00"
        assert logger.recibidos == [(archivo, "csv-pandas")]

    def test_fila_desalineada_no_aborta_el_lote(self, processor, logger, tmp_path):
        archivo = tmp_path / "planilla.csv"
        archivo.write_text(
            "APELLIDOS Y NOMBRES,DNI,PERIODO\n"
            "PEREZ LOPEZ JUAN,01234567,JULIO 2025\n"
            "GOMEZ ANA,07654321,JULIO 2025,900,EXTRA\n",
            encoding="utf-8",
        )

        registros = processor.process_file(archivo)

        assert [r.empleado.dni for r in registros] == ["01234567", "07654321"]
        assert all(r.es_valido for r in registros)
        assert logger.errores == []

    def test_formato_no_soportado(self, processor, logger, tmp_path):
        archivo = tmp_path / "planilla.pdf"
        archivo.write_bytes(b"%PDF-1.4")

        with pytest.raises(FormatoInvalidoError):
            processor.process_file(archivo)

        assert len(logger.errores) == 1
        assert logger.recibidos == []

    def test_error_de_lote_se_registra_y_propaga(self, processor, logger, tmp_path):
        archivo = tmp_path / "vacio.csv"
        archivo.write_text("", encoding="utf-8")

        with pytest.raises(EncabezadosNoEncontradosError):
            processor.process_file(archivo)

        assert isinstance(logger.errores[0][1], EncabezadosNoEncontradosError)

    def test_usa_el_primer_lector_que_acepta(self, logger):
        tabla = _tabla(_fila())
        processor = PayrollProcessor(
            [CsvTableReader(), MemoryReader(tabla)], logger, today=HOY
        )

        registros = processor.process_file(Path("planilla.mem"))

        assert len(registros) == 1
        assert logger.recibidos[0][1] == "memoria"
