"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Revisar qué columnas se detectaron cuando una planilla nueva no cuadra.
"""

from pathlib import Path

from src.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Si True, imprime también el detalle de columnas
                     vinculadas y de cada fila inválida.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._registros_procesados: int = 0
        self._registros_validos: int = 0
        self._boletas_generadas: int = 0
        self._errores: list[dict] = []

    # --- Fase 1: Lectura ---

    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({reader_name})")

    def log_columns_detected(self, detected: dict[str, str], missing: list[str]) -> None:
        print(f"  🔎 Columnas detectadas: {len(detected)} — sin detectar: {len(missing)}")
        if self._verbose:
            for campo, header in detected.items():
                print(f"      {campo:<22} ← {header}")
            if missing:
                print(f"      Sin columna: {', '.join(missing)}")

    # --- Fase 2: Normalización ---

    def log_row_invalid(self, row_index: int, errores: list[str]) -> None:
        if self._verbose:
            print(f"  ⚠️  Fila {row_index + 1}: {'; '.join(errores)}")

    def log_processing_complete(self, total: int, validos: int) -> None:
        self._registros_procesados += total
        self._registros_validos += validos
        print(f"  ✅ Procesados: {total} registros — {validos} válidos, {total - validos} con errores")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    # --- Fase 3: Exportación ---

    def log_export_start(self, num_documents: int) -> None:
        print(f"\n🧾 Generando {num_documents} boletas...")

    def log_export_complete(self, output_path: Path, num_documents: int) -> None:
        self._boletas_generadas += num_documents
        print(f"  ✅ Boletas generadas: {output_path}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "registros_procesados": self._registros_procesados,
            "registros_validos": self._registros_validos,
            "registros_invalidos": self._registros_procesados - self._registros_validos,
            "boletas_generadas": self._boletas_generadas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        resumen = self.get_summary()
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:    {resumen['archivos_recibidos']}")
        print(f"  Registros procesados:  {resumen['registros_procesados']}")
        print(f"  Registros válidos:     {resumen['registros_validos']}")
        print(f"  Registros con errores: {resumen['registros_invalidos']}")
        print(f"  Boletas generadas:     {resumen['boletas_generadas']}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
