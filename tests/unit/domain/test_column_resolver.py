"""
Tests para src.domain.services.column_resolver

Los encabezados de ejemplo vienen de planillas reales: exportadas del
sistema de planillas (con tildes y nombres largos) y armadas a mano
(abreviadas, sin tildes).
"""

from src.domain.services.column_resolver import find_column, resolve_columns

ENCABEZADOS_SISTEMA = [
    "N°",
    "APELLIDOS Y NOMBRES",
    "DNI",
    "CARGO",
    "AREA",
    "PERIODO",
    "REMUNERACIÓN O JORNAL BÁSICO",
    "ASIGNACIÓN FAMILIAR",
    "GRATIFICACIÓN",
    "BONO 30334",
    "HORAS EXTRAS 25%",
    "HORAS EXTRAS",
    "AFP",
    "SPP - APORTE OBLIGATORIA",
    "SPP - PRIMA SEGURO",
    "SPP - COMISION PORCENTUAL",
    "ONP",
    "ADELANTOS",
    "ESSALUD",
    "DIAS LABORADOS",
]


class TestFindColumn:
    def test_coincidencia_exacta(self):
        assert find_column(["N°", "DNI", "TRABAJADOR"], ["TRABAJADOR"]) == "TRABAJADOR"

    def test_exacta_tiene_prioridad_sobre_substring(self):
        """'HORAS EXTRAS 25%' contiene 'HORAS EXTRAS', pero hay una columna
        que coincide exactamente más a la derecha: gana la exacta."""
        headers = ["HORAS EXTRAS 25%", "HORAS EXTRAS"]
        assert find_column(headers, ["HORAS EXTRAS"]) == "HORAS EXTRAS"

    def test_substring_primera_columna_gana(self):
        headers = ["Dias Lab. (mes)", "Dias Lab. (acum)"]
        assert find_column(headers, ["Dias Lab."]) == "Dias Lab. (mes)"

    def test_variantes_en_orden_de_preferencia(self):
        headers = ["TRABAJADOR", "APELLIDOS Y NOMBRES"]
        variantes = ["APELLIDOS Y NOMBRES", "TRABAJADOR"]
        assert find_column(headers, variantes) == "APELLIDOS Y NOMBRES"

    def test_ignora_tildes_y_mayusculas(self):
        headers = ["Remuneracion o jornal basico"]
        assert find_column(headers, ["REMUNERACIÓN O JORNAL BÁSICO"]) == (
            "Remuneracion o jornal basico"
        )

    def test_devuelve_encabezado_original_sin_normalizar(self):
        assert find_column(["  Días Vac. "], ["Días Vac."]) == "  Días Vac. "

    def test_espacios_dobles_en_el_encabezado(self):
        headers = ["N°", "APELLIDOS  Y  NOMBRES", "DNI"]
        assert find_column(headers, ["APELLIDOS Y NOMBRES"]) == "APELLIDOS  Y  NOMBRES"

    def test_sin_coincidencia(self):
        assert find_column(["N°", "DNI"], ["TRABAJADOR"]) is None

    def test_variante_vacia_se_ignora(self):
        assert find_column(["DNI"], ["", "DNI"]) == "DNI"


class TestResolveColumns:
    def test_planilla_del_sistema(self):
        columnas = resolve_columns(ENCABEZADOS_SISTEMA)

        assert columnas.header_for("full_name") == "APELLIDOS Y NOMBRES"
        assert columnas.header_for("dni") == "DNI"
        assert columnas.header_for("period") == "PERIODO"
        assert columnas.header_for("base_salary") == "REMUNERACIÓN O JORNAL BÁSICO"
        assert columnas.header_for("overtime_25") == "HORAS EXTRAS 25%"
        assert columnas.header_for("overtime") == "HORAS EXTRAS"
        assert columnas.header_for("onp") == "ONP"
        assert columnas.header_for("days_worked") == "DIAS LABORADOS"

    def test_campos_sin_columna_no_aparecen(self):
        columnas = resolve_columns(ENCABEZADOS_SISTEMA)

        assert "income_tax" not in columnas
        assert columnas.header_for("vacation_days") is None
        assert "income_tax" in columnas.missing(["dni", "income_tax"])

    def test_trabajador_como_nombre(self):
        columnas = resolve_columns(["TRABAJADOR", "DNI"])
        assert columnas.header_for("full_name") == "TRABAJADOR"
        assert columnas.missing(["full_name", "dni"]) == []

    def test_un_encabezado_puede_servir_a_varios_campos(self):
        """'AFP APORTE' es el aporte al SPP, pero también contiene 'AFP'."""
        columnas = resolve_columns(["TRABAJADOR", "DNI", "AFP APORTE"])

        assert columnas.header_for("spp_aporte") == "AFP APORTE"
        assert columnas.header_for("afp") == "AFP APORTE"

    def test_es_idempotente(self):
        primero = resolve_columns(ENCABEZADOS_SISTEMA)
        segundo = resolve_columns(ENCABEZADOS_SISTEMA)
        assert dict(primero.bindings) == dict(segundo.bindings)

    def test_sin_encabezados(self):
        columnas = resolve_columns([])
        assert len(columnas) == 0

    def test_tabla_de_variantes_personalizada(self):
        columnas = resolve_columns(["Nro Doc"], variants={"dni": ("NRO DOC",)})
        assert dict(columnas.bindings) == {"dni": "Nro Doc"}
