"""
Tests para src.domain.shared.period_parser

Cada formato corresponde a una forma real de escribir el periodo:
- "JULIO 2025"       → nombre del mes + año
- "SETIEMBRE 2024"   → grafía peruana de septiembre
- "05/2024", "05-2024"
- "2024/05", "2024-05"
"""

from datetime import date

import pytest

from src.domain.models.periodo import Periodo
from src.domain.shared.period_parser import extract_period

HOY = date(2026, 3, 15)


class TestExtractPeriodTexto:
    """Periodos con el nombre del mes."""

    def test_julio(self):
        assert extract_period("JULIO 2025") == Periodo(año=2025, mes=7, es_valido=True)

    def test_setiembre(self):
        assert extract_period("SETIEMBRE 2024") == Periodo(año=2024, mes=9, es_valido=True)

    def test_minusculas(self):
        assert extract_period("diciembre 2024") == Periodo(año=2024, mes=12, es_valido=True)

    def test_con_espacios_alrededor(self):
        assert extract_period("   febrero   2025 ") == Periodo(año=2025, mes=2, es_valido=True)

    def test_con_texto_alrededor(self):
        assert extract_period("PLANILLA JULIO 2025") == Periodo(año=2025, mes=7, es_valido=True)

    def test_año_fuera_de_rango_es_invalido(self):
        resultado = extract_period("JULIO 1850", today=HOY)
        assert resultado.es_valido is False

    def test_mes_desconocido_cae_a_numerico(self):
        """'MES 2024/07' no es nombre de mes, pero sí contiene YYYY/MM."""
        assert extract_period("MES 2024/07") == Periodo(año=2024, mes=7, es_valido=True)


class TestExtractPeriodNumerico:
    """Periodos numéricos."""

    @pytest.mark.parametrize(
        "text, año, mes",
        [
            ("05/2024", 2024, 5),
            ("05-2024", 2024, 5),
            ("2024/05", 2024, 5),
            ("2024-05", 2024, 5),
            ("7/2025", 2025, 7),
            ("2025-12", 2025, 12),
        ],
    )
    def test_formatos_numericos(self, text, año, mes):
        assert extract_period(text) == Periodo(año=año, mes=mes, es_valido=True)

    def test_mes_13_es_invalido(self):
        assert extract_period("13/2024", today=HOY).es_valido is False

    def test_mes_cero_es_invalido(self):
        assert extract_period("2024-00", today=HOY).es_valido is False


class TestExtractPeriodInvalido:
    """Textos sin periodo reconocible: respaldo con el mes actual."""

    def test_basura_devuelve_fecha_actual_invalida(self):
        assert extract_period("garbage", today=HOY) == Periodo(
            año=2026, mes=3, es_valido=False
        )

    def test_vacio_es_invalido(self):
        assert extract_period("", today=HOY).es_valido is False

    def test_none_es_invalido(self):
        assert extract_period(None, today=HOY).es_valido is False

    def test_sin_today_usa_fecha_del_sistema(self):
        resultado = extract_period("garbage")
        hoy = date.today()
        assert resultado.es_valido is False
        assert (resultado.año, resultado.mes) == (hoy.year, hoy.month)

    def test_abreviatura_no_es_periodo(self):
        assert extract_period("JUL 2025", today=HOY).es_valido is False
