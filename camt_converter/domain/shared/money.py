"""
Utilidades para manejo de montos monetarios.

CONTEXTO:
En camt.052 el monto de una entrada (Amt) SIEMPRE es no negativo. El signo
no viene en el número sino en un campo aparte, CdtDbtInd:
    CRDT → abono (el saldo aumenta)  → monto positivo
    DBIT → cargo (el saldo disminuye) → monto negativo

El texto del monto usa punto decimal y no lleva separador de miles
(tipo ActiveOrHistoricCurrencyAndAmount de ISO 20022): "1234.56".
Por eso aquí NO se aceptan comas ni símbolos de moneda: si aparecen,
el archivo está mal formado y se reporta. Como es un xs:decimal, sí
son válidos "+12.34", ".50" y "12.".

Siempre se usa Decimal (nunca float) para no perder centavos.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

DEBIT = "DBIT"
CREDIT = "CRDT"

_AMOUNT = re.compile(r"^\+?(\d+\.?\d*|\.\d+)$")


def parse_amount(text: str) -> Decimal:
    """Convierte el texto de Amt a Decimal no negativo.

    Raises:
        ValueError: Si el texto está vacío, tiene signo negativo, comas u otros
                    caracteres, o no se puede convertir a Decimal.

    Ejemplos:
        >>> parse_amount("12.34")
        Decimal('12.34')
        >>> parse_amount(" 1000 ")
        Decimal('1000')
        >>> parse_amount(".50")
        Decimal('0.50')
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_amount espera str, recibió {type(text).__name__}")

    cleaned = text.strip()
    if not cleaned:
        raise ValueError("El texto del monto está vacío")

    if not _AMOUNT.match(cleaned):
        raise ValueError(f"Monto con formato inválido: '{text}'")

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"No se pudo convertir a monto: '{text}'")


def apply_sign(amount: Decimal, indicator: str) -> Decimal:
    """Aplica el signo según el indicador débito/crédito.

    Solo DBIT niega el monto. Cualquier otro valor válido (CRDT) lo deja
    positivo. Un indicador desconocido es un error de formato.

    Ejemplos:
        >>> apply_sign(Decimal("12.34"), "DBIT")
        Decimal('-12.34')
        >>> apply_sign(Decimal("12.34"), "CRDT")
        Decimal('12.34')
    """
    if amount < 0:
        raise ValueError(f"El monto antes del signo no puede ser negativo: {amount}")

    indicator = indicator.strip().upper()
    if indicator == DEBIT:
        return -amount
    if indicator == CREDIT:
        return amount
    raise ValueError(f"Indicador débito/crédito desconocido: '{indicator}'")


def format_amount(amount: Decimal) -> str:
    """Formatea un monto con exactamente 2 decimales, punto decimal y sin miles.

    Independiente del locale del sistema: se usa formato de Decimal, no
    `locale.format_string`.

    Ejemplos:
        >>> format_amount(Decimal("-12.34"))
        '-12.34'
        >>> format_amount(Decimal("1234567.8"))
        '1234567.80'
        >>> format_amount(Decimal("0.005"))
        '0.01'
    """
    quantized = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:f}"
