"""
Puerto de salida: Escritor de boletas.

Define el contrato para guardar las boletas generadas. El dominio produce
RegistroProcesado y no decide ni conoce cómo se empaquetan las boletas:
hoy es un ZIP en disco, mañana podría ser un bucket o un correo.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from src.domain.models.registro_procesado import RegistroProcesado


class OutputWriter(ABC):
    """Interfaz para escribir boletas de pago."""

    @abstractmethod
    def write_single(self, registro: RegistroProcesado, output_path: Path) -> Path:
        """Escribe la boleta de un solo registro.

        Args:
            registro: Registro procesado (se espera válido).
            output_path: Ruta del documento a crear.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...

    @abstractmethod
    def write_batch(self, registros: Sequence[RegistroProcesado], output_path: Path) -> Path:
        """Empaqueta en un solo archivo una boleta por cada registro VÁLIDO.

        Los registros inválidos se omiten: de 5 registros con 2 inválidos
        salen exactamente 3 boletas.

        Args:
            registros: Resultado completo del procesamiento.
            output_path: Ruta del archivo contenedor.

        Returns:
            Ruta real del archivo creado.

        Raises:
            OutputError: Si no hay registros válidos o falla la escritura.
        """
        ...
