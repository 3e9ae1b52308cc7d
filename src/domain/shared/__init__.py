"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el resolvedor de columnas y el
normalizador de filas, y no dependen de ninguna librería externa. Solo
operan sobre tipos nativos de Python.

Uso:
    from src.domain.shared.money import parse_money, format_money
    from src.domain.shared.int_parser import parse_int_safe
    from src.domain.shared.month_map import month_to_int
    from src.domain.shared.period_parser import extract_period
    from src.domain.shared.text_cleaner import safe_string, normalize_header
    from src.domain.shared.column_variants import COLUMN_VARIANTS, REQUIRED_FIELDS
"""
