"""
Catálogo de monedas ISO 4217.

Se usa para dos cosas:
1. Validar el atributo Ccy de Amt: un código que no existe es un error de
   formato del archivo, no una moneda "nueva".
2. Elegir el símbolo que se muestra en la columna Amount del Excel
   ("€", "$", "£"). Las monedas sin símbolo conocido usan el propio código.
"""

ISO_4217_CODES: frozenset[str] = frozenset(
    """
    AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD BIF BMD BND
    BOB BRL BSD BTN BWP BYN BZD CAD CDF CHF CLP CNY COP CRC CUP CVE CZK DJF
    DKK DOP DZD EGP ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD
    HNL HTG HUF IDR ILS INR IQD IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW
    KWD KYD KZT LAK LBP LKR LRD LSL LYD MAD MDL MGA MKD MMK MNT MOP MRU MUR
    MVR MWK MXN MYR MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN
    PYG QAR RON RSD RUB RWF SAR SBD SCR SDG SEK SGD SHP SLE SOS SRD SSP STN
    SVC SYP SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD UYU UZS VES
    VND VUV WST XAF XCD XCG XOF XPF YER ZAR ZMW ZWG
    """.split()
)

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "CHF": "CHF",
    "PLN": "zł",
    "CZK": "Kč",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr.",
    "INR": "₹",
    "TRY": "₺",
    "RUB": "₽",
    "UAH": "₴",
}


def normalize_currency(code: str) -> str:
    """Valida un código ISO 4217 y lo devuelve en mayúsculas.

    Raises:
        ValueError: Si el código está vacío o no es una moneda ISO 4217.

    Ejemplos:
        >>> normalize_currency(" eur ")
        'EUR'
    """
    normalized = code.strip().upper()
    if not normalized:
        raise ValueError("El código de moneda está vacío")
    if normalized not in ISO_4217_CODES:
        raise ValueError(f"Moneda desconocida: '{code}'")
    return normalized


def currency_symbol(code: str) -> str:
    """Símbolo de la moneda, o el propio código si no hay uno conocido."""
    return CURRENCY_SYMBOLS.get(code, code)
