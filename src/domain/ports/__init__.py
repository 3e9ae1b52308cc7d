"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from src.domain.ports import TableReader, PayslipRenderer, OutputWriter
"""

from src.domain.ports.output_writer import OutputWriter
from src.domain.ports.payslip_renderer import PayslipRenderer
from src.domain.ports.process_logger import ProcessLogger
from src.domain.ports.table_reader import TableReader

__all__ = [
    "OutputWriter",
    "PayslipRenderer",
    "ProcessLogger",
    "TableReader",
]
