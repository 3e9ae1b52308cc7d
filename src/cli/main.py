"""
Punto de entrada CLI: boletas-parser.

Uso:
    # Generar el ZIP de boletas en el mismo directorio del CSV
    boletas-parser /ruta/planilla.csv

    # Elegir directorio de salida y forzar separador ';'
    boletas-parser /ruta/planilla.csv -o /ruta/salida --separador ";"

    # Una boleta por archivo en vez de un ZIP
    boletas-parser /ruta/planilla.csv --individual

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (CsvTableReader, ExcelPayslipRenderer, etc.)
- Las inyecta en el PayrollProcessor y en el ZipPayslipWriter.
- Ejecuta el procesamiento.

No contiene lógica de negocio, solo el cableado de componentes.
"""

import argparse
import sys
from pathlib import Path

from src.adapters.input.table_readers.csv_reader import CsvTableReader
from src.adapters.output.loggers.console_logger import ConsoleLogger
from src.adapters.output.renderers.excel_renderer import ExcelPayslipRenderer
from src.adapters.output.writers.zip_writer import ZipPayslipWriter, default_archive_name
from src.domain.exceptions import PlanillaBaseError
from src.domain.services.payroll_processor import PayrollProcessor


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI. Devuelve el código de salida."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else input_path.parent

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=args.verbose)
    processor = PayrollProcessor(
        table_readers=[CsvTableReader(separador=args.separador)],
        logger=logger,
    )
    writer = ZipPayslipWriter(ExcelPayslipRenderer())

    print("=" * 60)
    print("GENERADOR DE BOLETAS DE PAGO")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print()

    # --- Procesar ---
    try:
        registros = processor.process_file(input_path)
    except PlanillaBaseError:
        # El logger ya registró el error
        logger.print_summary()
        return 1

    validos = [r for r in registros if r.es_valido]
    if not validos:
        print("\n❌ No hay registros válidos para generar boletas.")
        logger.print_summary()
        return 1

    # --- Generar boletas ---
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.log_export_start(len(validos))
    try:
        if args.individual:
            for registro in validos:
                writer.write_single(registro, output_dir)
            logger.log_export_complete(output_dir, len(validos))
        else:
            zip_path = writer.write_batch(registros, output_dir / default_archive_name())
            logger.log_export_complete(zip_path, len(validos))
    except PlanillaBaseError as e:
        logger.log_error(input_path, e)
        logger.print_summary()
        return 1

    logger.print_summary()
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        description="Genera boletas de pago a partir de una planilla CSV",
        epilog="Ejemplo: boletas-parser planilla_julio.csv -o salida/",
    )

    parser.add_argument(
        "input_path",
        help="Ruta al archivo CSV de la planilla",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida. Si no se especifica, se usa el mismo "
        "directorio del CSV.",
    )

    parser.add_argument(
        "--separador",
        default=None,
        help="Separador de columnas del CSV. Por defecto se detecta automáticamente.",
    )

    parser.add_argument(
        "--individual",
        action="store_true",
        help="Genera un archivo por boleta en vez de un ZIP.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Muestra las columnas detectadas y el detalle de filas con errores.",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
