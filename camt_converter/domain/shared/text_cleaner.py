"""
Utilidades de limpieza de texto.

Los exportes camt de los bancos traen nombres y textos de remesa con
espacios de relleno, saltos de línea y tabs en medio (los campos Ustrd
tienen ancho fijo de 140 caracteres en muchos bancos). Antes de guardarse
en un Movimiento, todo texto pasa por clean_whitespace().

Estas funciones NO tienen lógica de negocio. Solo operan sobre strings puros.
"""

import re


def clean_whitespace(text: str | None) -> str:
    """Reemplaza secuencias de espacios/tabs/saltos por un solo espacio y hace strip.

    None se trata como texto vacío, porque lxml devuelve None como `.text`
    de un elemento vacío (<Nm/>).

    Ejemplos:
        >>> clean_whitespace("  Max   Mustermann  ")
        'Max Mustermann'
        >>> clean_whitespace("SEPA\\n  Gutschrift")
        'SEPA Gutschrift'
        >>> clean_whitespace(None)
        ''
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def join_lines(lines: list[str], separator: str = "; ") -> str:
    """Une líneas de texto ya limpias, descartando las vacías.

    Ejemplos:
        >>> join_lines(["Miete Januar", "", "Wohnung 3"])
        'Miete Januar; Wohnung 3'
        >>> join_lines([])
        ''
    """
    return separator.join(line for line in lines if line)
