"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante el procesamiento de una
planilla. El dominio solo conoce EVENTOS de negocio ("se detectaron las
columnas", "la fila 12 no tiene DNI"), no niveles de log ni formatos.

La implementación puede imprimir a consola, escribir con `logging` o
acumular en memoria para los tests, sin cambiar el dominio.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Fase 1: Lectura ---

    @abstractmethod
    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        """Registra que se recibió un archivo y qué lector lo va a decodificar."""
        ...

    @abstractmethod
    def log_columns_detected(self, detected: dict[str, str], missing: list[str]) -> None:
        """Registra el resultado de la resolución de columnas.

        Args:
            detected: Campo canónico → encabezado vinculado.
            missing: Campos canónicos que no se pudieron resolver.
        """
        ...

    # --- Fase 2: Normalización ---

    @abstractmethod
    def log_row_invalid(self, row_index: int, errores: list[str]) -> None:
        """Registra una fila que quedó inválida y sus motivos."""
        ...

    @abstractmethod
    def log_processing_complete(self, total: int, validos: int) -> None:
        """Registra el fin de la normalización del lote."""
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error fatal del lote o de la salida."""
        ...

    # --- Fase 3: Exportación ---

    @abstractmethod
    def log_export_start(self, num_documents: int) -> None:
        """Registra el inicio de la generación de boletas."""
        ...

    @abstractmethod
    def log_export_complete(self, output_path: Path, num_documents: int) -> None:
        """Registra el fin exitoso de la generación de boletas."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'registros_procesados': int,
                'registros_validos': int,
                'registros_invalidos': int,
                'boletas_generadas': int,
                'errores': list[dict],  # [{archivo, error}]
            }
        """
        ...
