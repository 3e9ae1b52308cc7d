"""
Adaptador de salida: Escritor de boletas (individuales o en ZIP).

- write_single: guarda la boleta de un registro como un archivo suelto.
- write_batch: filtra los registros válidos y empaqueta una boleta por
  registro en un solo ZIP, dentro de la carpeta "Boletas/".

El formato de cada boleta lo decide el PayslipRenderer inyectado; este
adaptador solo nombra y empaqueta.

Nombres de las entradas del ZIP:
    Boletas/Boleta_<DNI>_<periodo con '/' → '-'><extensión>

Si dos registros producen el mismo nombre (mismo DNI y periodo repetidos
en el archivo), al segundo se le agrega "_2", al tercero "_3", etc.
"""

import zipfile
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from src.domain.exceptions import OutputError
from src.domain.models.registro_procesado import RegistroProcesado
from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.payslip_renderer import PayslipRenderer

CARPETA_ZIP = "Boletas"


def default_archive_name(today: date | None = None) -> str:
    """Nombre por defecto del ZIP: 'Boletas_Pago_YYYY-MM-DD.zip'."""
    hoy = today or date.today()
    return f"Boletas_Pago_{hoy.isoformat()}.zip"


class ZipPayslipWriter(OutputWriter):
    """Escribe boletas usando un PayslipRenderer."""

    def __init__(self, renderer: PayslipRenderer) -> None:
        self._renderer = renderer

    def write_single(self, registro: RegistroProcesado, output_path: Path) -> Path:
        """Escribe la boleta de un registro.

        Si output_path es un directorio, el archivo se nombra con
        `registro.nombre_documento`.
        """
        extension = self._renderer.file_extension
        if output_path.is_dir():
            output_path = output_path / f"{registro.nombre_documento}{extension}"
        elif output_path.suffix.lower() != extension:
            output_path = output_path.with_suffix(extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        contenido = self._renderer.render(registro)
        try:
            output_path.write_bytes(contenido)
        except OSError as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def write_batch(self, registros: Sequence[RegistroProcesado], output_path: Path) -> Path:
        validos = [r for r in registros if r.es_valido]
        if not validos:
            raise OutputError(str(output_path), "No hay registros válidos para generar boletas")

        if output_path.suffix.lower() != ".zip":
            output_path = output_path.with_suffix(".zip")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        nombres = self.entry_names(validos)
        try:
            with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
                for registro, nombre in zip(validos, nombres):
                    zf.writestr(nombre, self._renderer.render(registro))
        except OSError as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def entry_names(self, registros: Sequence[RegistroProcesado]) -> list[str]:
        """Nombres de las entradas del ZIP, en el mismo orden que los registros."""
        extension = self._renderer.file_extension
        vistos: dict[str, int] = {}
        nombres: list[str] = []
        for registro in registros:
            base = registro.nombre_documento
            vistos[base] = vistos.get(base, 0) + 1
            if vistos[base] > 1:
                base = f"{base}_{vistos[base]}"
            nombres.append(f"{CARPETA_ZIP}/{base}{extension}")
        return nombres
