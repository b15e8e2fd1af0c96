"""
Validación y formato de IBAN (ISO 13616).

Un IBAN se valida en tres pasos:
1. Estructura: 2 letras de país + 2 dígitos de control + BBAN alfanumérico.
2. Longitud: cada país del registro SWIFT tiene una longitud fija
   (DE = 22, AT = 20, NL = 18...). Un país fuera del registro es inválido.
3. Dígitos de control: se mueve el prefijo de 4 caracteres al final, se
   convierten las letras a números (A=10 ... Z=35) y el resultado módulo 97
   debe ser 1 (ISO 7064 MOD 97-10).

La forma "compacta" (sin espacios, mayúsculas) es la que se guarda. La
forma "formateada" agrupa en bloques de 4: "DE89 3704 0044 0532 0130 00".
"""

import re

# Registro IBAN de SWIFT: código de país → longitud total.
IBAN_LENGTHS: dict[str, int] = {
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20, "BE": 16,
    "BG": 22, "BH": 22, "BI": 27, "BR": 29, "BY": 28, "CH": 21, "CR": 22,
    "CY": 28, "CZ": 24, "DE": 22, "DJ": 27, "DK": 18, "DO": 28, "EE": 20,
    "EG": 29, "ES": 24, "FI": 18, "FK": 18, "FO": 18, "FR": 27, "GB": 22,
    "GE": 22, "GI": 23, "GL": 18, "GR": 27, "GT": 28, "HR": 21, "HU": 28,
    "IE": 22, "IL": 23, "IQ": 23, "IS": 26, "IT": 27, "JO": 30, "KW": 30,
    "KZ": 20, "LB": 28, "LC": 32, "LI": 21, "LT": 20, "LU": 20, "LV": 21,
    "LY": 25, "MC": 27, "MD": 24, "ME": 22, "MK": 19, "MN": 20, "MR": 27,
    "MT": 31, "MU": 30, "NI": 28, "NL": 18, "NO": 15, "OM": 23, "PK": 24,
    "PL": 28, "PS": 29, "PT": 25, "QA": 29, "RO": 24, "RS": 22, "RU": 33,
    "SA": 24, "SC": 31, "SD": 18, "SE": 24, "SI": 19, "SK": 24, "SM": 27,
    "SO": 23, "ST": 25, "SV": 28, "TL": 23, "TN": 24, "TR": 26, "UA": 29,
    "VA": 22, "VG": 24, "XK": 20, "YE": 30,
}

_STRUCTURE = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]+$")

GROUP_SIZE = 4


def compact_iban(text: str) -> str:
    """Quita espacios y pasa a mayúsculas.

    Ejemplos:
        >>> compact_iban(" de89 3704 0044 0532 0130 00 ")
        'DE89370400440532013000'
    """
    return re.sub(r"\s+", "", text).upper()


def validate_iban(text: str) -> str:
    """Valida un IBAN y devuelve su forma compacta.

    Args:
        text: IBAN en forma compacta o con espacios.

    Returns:
        IBAN compacto (sin espacios, mayúsculas).

    Raises:
        ValueError: Si la estructura, la longitud o los dígitos de control
                    no son correctos. El mensaje indica cuál falló.
    """
    iban = compact_iban(text)

    if not iban:
        raise ValueError("El IBAN está vacío")

    if not _STRUCTURE.match(iban):
        raise ValueError(f"IBAN con estructura inválida: '{text}'")

    country = iban[:2]
    expected_length = IBAN_LENGTHS.get(country)
    if expected_length is None:
        raise ValueError(f"País de IBAN desconocido: '{country}'")
    if len(iban) != expected_length:
        raise ValueError(
            f"Longitud de IBAN incorrecta para {country}: "
            f"{len(iban)} (se esperaba {expected_length})"
        )

    if _mod97(iban) != 1:
        raise ValueError(f"Dígitos de control de IBAN incorrectos: '{text}'")

    return iban


def format_iban(iban: str) -> str:
    """Agrupa un IBAN compacto en bloques de 4 caracteres.

    Ejemplos:
        >>> format_iban("DE89370400440532013000")
        'DE89 3704 0044 0532 0130 00'
    """
    return " ".join(iban[i : i + GROUP_SIZE] for i in range(0, len(iban), GROUP_SIZE))


def _mod97(iban: str) -> int:
    rearranged = iban[4:] + iban[:4]
    digits = "".join(str(int(char, 36)) for char in rearranged)
    return int(digits) % 97
