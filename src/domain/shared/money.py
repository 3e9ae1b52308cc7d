"""
Utilidades para manejo de montos monetarios (soles).

CONTEXTO DEL PROBLEMA:
Las planillas llegan de hojas de cálculo configuradas en distintos
idiomas, así que el mismo monto aparece escrito de varias formas:

- "1,234.56"   → punto decimal, coma de miles (configuración en inglés)
- "1.234,56"   → coma decimal, punto de miles (configuración en español)
- "S/ 1,400"   → con símbolo de moneda y sin decimales
- "12,5"       → coma decimal sin separador de miles
- ""           → celda vacía (concepto que no aplica)

SOLUCIÓN:
Una sola función tolerante (parse_money) que:
1. Siempre devuelve Decimal (precisión monetaria garantizada).
2. Decide cuál separador es el decimal con reglas fijas y deterministas.
3. NUNCA lanza excepción: si no hay una interpretación razonable devuelve
   Decimal("0"). En una planilla es preferible una boleta con un concepto
   en cero que un lote entero rechazado por una celda sucia.

La ambigüedad "1,234" (¿mil doscientos treinta y cuatro o uno coma dos?)
es inherente a la heurística: exactamente 3 dígitos después del único
separador siempre se interpretan como miles.
"""

import math
import re
from decimal import Decimal, InvalidOperation

# Marcador de moneda al inicio: "S/", "S/.", "PEN" (con o sin espacios).
_CURRENCY_PREFIX = re.compile(r"^\s*(?:S/\.?|PEN)\s*", re.IGNORECASE)

# Todo lo que no sea dígito, punto, coma o signo menos.
_NON_NUMERIC = re.compile(r"[^0-9.,\-]")

# Prefijo numérico más largo (equivalente a leer "12.5abc" como 12.5).
_NUMERIC_PREFIX = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_money(value: object) -> Decimal:
    """Convierte el valor de una celda a un monto Decimal.

    Reglas de separadores (después de quitar el símbolo de moneda y
    cualquier carácter que no sea dígito, '.', ',' o '-'):

    - Sin separadores: número entero.
    - Con '.' y ',': el que aparece ÚLTIMO es el separador decimal; el
      otro es separador de miles y se elimina.
    - Solo ',': si le siguen exactamente 3 dígitos es de miles (se elimina);
      si no, es decimal.
    - Solo '.': misma regla que la coma.

    Args:
        value: Texto de la celda, un número, o None.

    Returns:
        Decimal con el monto. Decimal("0") si el valor está vacío o no
        tiene una interpretación numérica.

    Ejemplos:
        >>> parse_money("1,234.56")
        Decimal('1234.56')
        >>> parse_money("1.234,56")
        Decimal('1234.56')
        >>> parse_money("S/ 1,400")
        Decimal('1400')
        >>> parse_money("12,5")
        Decimal('12.5')
        >>> parse_money(None)
        Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, (int, float)):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return Decimal("0")
        return Decimal(str(value))

    text = str(value)
    if not text.strip():
        return Decimal("0")

    cleaned = _CURRENCY_PREFIX.sub("", text).strip()
    cleaned = _NON_NUMERIC.sub("", cleaned)
    cleaned = _resolve_separators(cleaned)

    m = _NUMERIC_PREFIX.match(cleaned)
    if not m:
        return Decimal("0")

    numero = m.group(0)
    if numero.endswith("."):
        numero = numero[:-1]

    try:
        return Decimal(numero)
    except InvalidOperation:
        return Decimal("0")


def format_money(amount: Decimal) -> str:
    """Formatea un Decimal como monto en soles.

    Ejemplos:
        >>> format_money(Decimal("1234.5"))
        'S/ 1,234.50'
        >>> format_money(Decimal("-80"))
        '-S/ 80.00'
    """
    amount = amount.quantize(Decimal("0.01"))
    if amount < 0:
        return f"-S/ {abs(amount):,.2f}"
    return f"S/ {amount:,.2f}"


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _resolve_separators(cleaned: str) -> str:
    """Deja un solo punto decimal (o ninguno) según las reglas de separadores."""
    last_comma = cleaned.rfind(",")
    last_dot = cleaned.rfind(".")

    if last_comma == -1 and last_dot == -1:
        return cleaned

    if last_comma != -1 and last_dot != -1:
        if last_comma > last_dot:
            # "1.234,56": coma decimal, puntos de miles
            return cleaned.replace(".", "").replace(",", ".")
        # "1,234.56": punto decimal, comas de miles
        return cleaned.replace(",", "")

    if last_comma != -1:
        if len(cleaned) - last_comma - 1 == 3:
            return cleaned.replace(",", "")
        return cleaned.replace(",", ".")

    if len(cleaned) - last_dot - 1 == 3:
        return cleaned.replace(".", "")
    return cleaned
