"""
Puerto de salida: Renderizador de boletas de pago.

Convierte UN registro procesado en UN documento (la boleta). El formato
del documento (posiciones, fuentes, bordes) es asunto exclusivo del
adaptador: el dominio solo entrega el PerfilEmpleado y los
ConceptosPlanilla ya validados.

    PayslipRenderer (interfaz)
    └── ExcelPayslipRenderer   → Boleta en una hoja .xlsx (xlsxwriter)
"""

from abc import ABC, abstractmethod

from src.domain.models.registro_procesado import RegistroProcesado


class PayslipRenderer(ABC):
    """Interfaz para generar el documento de una boleta."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extensión de los documentos generados, con punto. Ejemplo: '.xlsx'."""
        ...

    @abstractmethod
    def render(self, registro: RegistroProcesado) -> bytes:
        """Genera la boleta del registro y devuelve el documento en bytes.

        Raises:
            OutputError: Si el documento no se puede generar.
        """
        ...
