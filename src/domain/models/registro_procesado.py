"""
Modelo de dominio: Resultado de normalizar una fila de la planilla.

Es el contrato entre el procesador y los colaboradores de salida:
- Lo PRODUCE el normalizador de filas (una instancia por fila del CSV).
- Lo CONSUMEN el renderizador de boletas y el escritor del ZIP.

Una fila con problemas (sin nombre, sin DNI, periodo inválido) igual
produce un RegistroProcesado: los datos que sí se pudieron extraer
quedan disponibles y los problemas se listan en `errores`.
"""

from dataclasses import dataclass

from src.domain.models.conceptos_planilla import ConceptosPlanilla
from src.domain.models.perfil_empleado import PerfilEmpleado
from src.domain.shared.text_cleaner import safe_filename_part


@dataclass(frozen=True)
class RegistroProcesado:
    """Una fila de la planilla ya normalizada y validada."""

    id: str
    """DNI + posición de la fila ('12345678-0'). La posición evita
    colisiones cuando un DNI se repite en el mismo archivo."""

    empleado: PerfilEmpleado
    planilla: ConceptosPlanilla
    errores: tuple[str, ...] = ()
    """Problemas encontrados en la fila, en el orden en que se detectaron."""

    @property
    def es_valido(self) -> bool:
        """Un registro es válido si y solo si no tiene errores."""
        return not self.errores

    @property
    def nombre_documento(self) -> str:
        """Nombre base (sin extensión) de la boleta de este registro.

        Las barras del DNI y del periodo se reemplazan por guiones porque en
        un ZIP una barra crearía subcarpetas: '05/2024' → 'Boleta_123_05-2024'.
        """
        dni = safe_filename_part(self.empleado.dni)
        periodo = safe_filename_part(self.empleado.periodo_texto)
        return f"Boleta_{dni}_{periodo}"

    def __post_init__(self) -> None:
        if self.es_valido and not (self.empleado.nombre_completo and self.empleado.dni):
            raise ValueError(
                f"Registro '{self.id}' marcado como válido sin nombre o sin DNI"
            )
