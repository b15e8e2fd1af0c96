"""
Utilidades compartidas del dominio.

Estas funciones son usadas por el parser camt y por los writers, y no
dependen de ninguna librería externa. Solo operan sobre tipos nativos de
Python.

Uso:
    from camt_converter.domain.shared.money import parse_amount, apply_sign, format_amount
    from camt_converter.domain.shared.date_parser import parse_iso_date
    from camt_converter.domain.shared.iban import validate_iban, format_iban
    from camt_converter.domain.shared.currency import normalize_currency
    from camt_converter.domain.shared.text_cleaner import clean_whitespace
"""
