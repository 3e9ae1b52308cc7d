"""
Adaptador de salida: Boleta de pago en Excel.

Genera la boleta de UN trabajador como un libro .xlsx de una sola hoja
("Boleta") con el layout estándar:

    EMPRESA / DIRECCIÓN
    BOLETA DE PAGO
    Datos del trabajador (dos columnas de etiqueta: valor)
    INGRESOS | DESCUENTOS | APORTACIONES
    TOTAL INGRESOS | TOTAL DESCUENTOS | TOTAL APORTACIONES
    NETO A PAGAR
    Lima, <periodo>
    Firma y Sello del Empleador        Firma del Trabajador / DNI

Las tablas se arman con pandas y se escriben con xlsxwriter, igual que
el resto de salidas Excel del proyecto. El documento se genera en
memoria (BytesIO) para poder empaquetarlo en un ZIP sin archivos
temporales.
"""

import io

import pandas as pd

from src.domain.exceptions import OutputError
from src.domain.models.registro_procesado import RegistroProcesado
from src.domain.ports.payslip_renderer import PayslipRenderer
from src.domain.shared.money import format_money

EMPRESA_DEFAULT = "SERVICIOS ASISTENCIALES SANTA BEATRIZ SAC"
DIRECCION_DEFAULT = (
    "JR.RAMON DAGNINO 227 - JESÚS MARIA (ALT.CUADRA 6 AV. ARENALES) "
    "RUC:20566148006 Telefonos :4800-535"
)

_HOJA = "Boleta"
_FILA_DATOS = 4
_COLUMNAS_CONCEPTOS = ("Concepto", "Monto")


class ExcelPayslipRenderer(PayslipRenderer):
    """Genera boletas de pago en formato .xlsx."""

    def __init__(self, empresa: str = EMPRESA_DEFAULT, direccion: str = DIRECCION_DEFAULT) -> None:
        self._empresa = empresa
        self._direccion = direccion

    @property
    def file_extension(self) -> str:
        return ".xlsx"

    def render(self, registro: RegistroProcesado) -> bytes:
        buffer = io.BytesIO()
        try:
            self._escribir_boleta(registro, buffer)
        except Exception as e:
            raise OutputError(registro.nombre_documento + self.file_extension, str(e))
        return buffer.getvalue()

    # =================================================================
    # MÉTODOS PRIVADOS: Armado de la hoja
    # =================================================================

    @staticmethod
    def _datos_trabajador(registro: RegistroProcesado) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Las dos columnas de datos del trabajador como DataFrames etiqueta/valor."""
        emp = registro.empleado
        izquierda = pd.DataFrame(
            [
                ("APELLIDOS Y NOMBRES :", emp.nombre_completo),
                ("CARGO U OCUPACIÓN:", emp.cargo),
                ("FECHA DE NACIMIENTO:", emp.fecha_nacimiento),
                ("DNI:", emp.dni),
                ("DIAS LABORADOS:", str(emp.dias_laborados)),
                ("DIAS DE VACACIONES:", str(emp.dias_vacaciones)),
                ("LICENCIAS O SUBSIDIOS:", ""),
                ("Horas Extras:", str(emp.horas_extras) if emp.horas_extras else ""),
                ("AREA DE TRABAJO:", emp.area),
            ],
            columns=["Dato", "Valor"],
        )
        derecha = pd.DataFrame(
            [
                ("FECHA DE INGRESO:", emp.fecha_ingreso),
                ("FECHA DE CESE:", emp.fecha_cese),
                ("REM.MENSUAL:", format_money(emp.remuneracion_mensual)),
                ("CARNET ESSALUD:", ""),
                ("DIAS DE FALTAS:", str(emp.dias_faltas)),
                ("PERIODO DE CÁLCULO:", emp.periodo_texto),
                ("REGIMEN PENSIÓN:", emp.regimen_pensionario),
                ("SISTEMA PENSIONARIO:", emp.sistema_pensionario),
            ],
            columns=["Dato", "Valor"],
        )
        return izquierda, derecha

    def _escribir_boleta(self, registro: RegistroProcesado, buffer: io.BytesIO) -> None:
        planilla = registro.planilla
        izquierda, derecha = self._datos_trabajador(registro)

        df_ingresos = pd.DataFrame(
            [(c, float(m)) for c, m in planilla.ingresos], columns=_COLUMNAS_CONCEPTOS
        )
        df_descuentos = pd.DataFrame(
            [(c, float(m)) for c, m in planilla.descuentos], columns=_COLUMNAS_CONCEPTOS
        )
        df_aportes = pd.DataFrame(
            [(c, float(m)) for c, m in planilla.aportaciones], columns=_COLUMNAS_CONCEPTOS
        )

        fila_conceptos = _FILA_DATOS + max(len(izquierda), len(derecha)) + 2
        fila_totales = fila_conceptos + 1 + max(
            len(df_ingresos), len(df_descuentos), len(df_aportes)
        ) + 1

        with pd.ExcelWriter(buffer, engine="xlsxwriter") as writer:
            # --- Datos del trabajador (sin encabezados de columna) ---
            izquierda.to_excel(
                writer, sheet_name=_HOJA, index=False, header=False, startrow=_FILA_DATOS
            )
            derecha.to_excel(
                writer,
                sheet_name=_HOJA,
                index=False,
                header=False,
                startrow=_FILA_DATOS,
                startcol=3,
            )

            # --- Columnas de conceptos ---
            df_ingresos.to_excel(writer, sheet_name=_HOJA, index=False, startrow=fila_conceptos)
            df_descuentos.to_excel(
                writer, sheet_name=_HOJA, index=False, startrow=fila_conceptos, startcol=3
            )
            df_aportes.to_excel(
                writer, sheet_name=_HOJA, index=False, startrow=fila_conceptos, startcol=6
            )

            # --- Formato ---
            workbook = writer.book
            ws = writer.sheets[_HOJA]

            titulo = workbook.add_format({"bold": True, "font_size": 10, "align": "center"})
            subtitulo = workbook.add_format({"font_size": 8, "align": "center"})
            negrita = workbook.add_format({"bold": True})
            seccion = workbook.add_format({"bold": True, "align": "center", "border": 1})
            money_format = workbook.add_format({"num_format": "#,##0.00"})
            total_format = workbook.add_format({"bold": True, "num_format": "#,##0.00"})

            ws.set_column("A:A", 32)
            ws.set_column("B:B", 14, money_format)
            ws.set_column("C:C", 3)
            ws.set_column("D:D", 36)
            ws.set_column("E:E", 14, money_format)
            ws.set_column("F:F", 3)
            ws.set_column("G:G", 28)
            ws.set_column("H:H", 14, money_format)

            # --- Cabecera ---
            ws.merge_range(0, 0, 0, 7, self._empresa, titulo)
            ws.merge_range(1, 0, 1, 7, self._direccion, subtitulo)
            ws.merge_range(2, 0, 2, 7, "BOLETA DE PAGO", titulo)

            # --- Títulos de secciones ---
            ws.merge_range(fila_conceptos - 1, 0, fila_conceptos - 1, 1, "INGRESOS", seccion)
            ws.merge_range(fila_conceptos - 1, 3, fila_conceptos - 1, 4, "DESCUENTOS", seccion)
            ws.merge_range(fila_conceptos - 1, 6, fila_conceptos - 1, 7, "APORTACIONES", seccion)

            # --- Totales ---
            ws.write(fila_totales, 0, "TOTAL INGRESOS", negrita)
            ws.write_number(fila_totales, 1, float(planilla.total_ingresos), total_format)
            ws.write(fila_totales, 3, "TOTAL DESCUENTOS", negrita)
            ws.write_number(fila_totales, 4, float(planilla.total_descuentos), total_format)
            ws.write(fila_totales, 6, "TOTAL APORTACIONES", negrita)
            ws.write_number(fila_totales, 7, float(planilla.total_aportaciones), total_format)

            ws.write(fila_totales + 2, 0, "NETO A PAGAR", negrita)
            ws.write_number(fila_totales + 2, 4, float(planilla.neto_a_pagar), total_format)

            # --- Pie ---
            ws.write(fila_totales + 4, 7, f"Lima, {registro.empleado.periodo_texto}")
            ws.write(fila_totales + 7, 1, "Firma y Sello del Empleador")
            ws.write(fila_totales + 7, 6, "Firma del Trabajador")
            ws.write(fila_totales + 8, 6, f"DNI: {registro.empleado.dni}")
