"""
Excepciones de dominio del procesador de planillas.

Solo los problemas que impiden procesar el archivo COMPLETO se lanzan
como excepción. Los problemas de una fila individual (falta el nombre,
el DNI o el periodo) NO son excepciones: se acumulan en
RegistroProcesado.errores y la fila se devuelve igual, marcada como
inválida.

Jerarquía:
    PlanillaBaseError
    ├── EncabezadosNoEncontradosError  → El archivo no tiene fila de encabezados
    ├── ColumnasObligatoriasError      → No se detectaron Nombres y/o DNI
    ├── FormatoInvalidoError           → El archivo no tiene el formato esperado
    ├── LecturaArchivoError            → Error al decodificar el CSV
    └── OutputError                    → Error al generar boletas o el ZIP
"""


class PlanillaBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite que el CLI capture cualquier error fatal del lote con un solo
    `except PlanillaBaseError`.
    """


class EncabezadosNoEncontradosError(PlanillaBaseError):
    """Se lanza cuando la tabla decodificada no tiene fila de encabezados.

    Típicamente: archivo vacío, o un CSV cuya primera línea está en blanco.
    """

    def __init__(self, archivo: str = ""):
        self.archivo = archivo
        mensaje = "No se encontraron columnas en el archivo CSV"
        if archivo:
            mensaje += f": {archivo}"
        super().__init__(mensaje)


class ColumnasObligatoriasError(PlanillaBaseError):
    """Se lanza cuando el resolvedor de columnas no pudo vincular alguno de
    los campos obligatorios (nombre completo, DNI).

    Es un error de lote: ninguna fila se procesa, porque sin esas columnas
    ningún registro podría ser válido.
    """

    def __init__(self, faltantes: list[str], archivo: str = ""):
        self.faltantes = list(faltantes)
        self.archivo = archivo
        mensaje = (
            "No se detectaron columnas obligatorias (Nombres, DNI). "
            f"Faltan: {', '.join(self.faltantes)}. Verifique el formato del archivo"
        )
        if archivo:
            mensaje += f" — {archivo}"
        super().__init__(mensaje)


class FormatoInvalidoError(PlanillaBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un CSV pero el archivo es un .pdf.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class LecturaArchivoError(PlanillaBaseError):
    """Se lanza cuando falla la decodificación de la tabla.

    Esto puede pasar porque:
    - El archivo no está en UTF-8.
    - No se pudo detectar el separador de columnas.
    - Las comillas del CSV están desbalanceadas.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(PlanillaBaseError):
    """Se lanza cuando falla la generación de boletas o del archivo ZIP.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - No hay registros válidos para empaquetar.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
