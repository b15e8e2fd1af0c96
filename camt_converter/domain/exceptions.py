"""
Excepciones de dominio del proyecto camt-converter.

¿Por qué excepciones propias en lugar de usar ValueError/RuntimeError?
Porque el CLI necesita distinguir entre "el archivo no se puede leer" y
"una entrada del XML está mal formada" para reportarlo con contexto, y
porque todas se capturan en un único punto con `except ConverterBaseError`.

Ninguna de estas excepciones se recupera por entrada, por documento ni por
archivo: cualquiera de ellas aborta la corrida completa.

Jerarquía:
    ConverterBaseError
    ├── CampoFaltanteError      → Falta un campo obligatorio en una entrada
    ├── ValorInvalidoError      → Monto, fecha, IBAN, moneda o XML inválido
    ├── ArchivoIlegibleError    → No se pudo abrir/leer un archivo o ZIP
    └── OutputError             → Error al generar la salida
"""


class ConverterBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class CampoFaltanteError(ConverterBaseError):
    """Se lanza cuando una entrada no contiene un campo obligatorio.

    Campos obligatorios: indicador débito/crédito (CdtDbtInd), monto (Amt),
    moneda (Amt/@Ccy), fecha contable (BookgDt/Dt) y fecha valor (ValDt/Dt).
    """

    def __init__(self, archivo: str, campo: str, entrada: int | None = None):
        self.archivo = archivo
        self.campo = campo
        self.entrada = entrada
        mensaje = f"Falta el campo obligatorio '{campo}' en '{archivo}'"
        if entrada is not None:
            mensaje += f" (entrada #{entrada})"
        super().__init__(mensaje)


class ValorInvalidoError(ConverterBaseError):
    """Se lanza cuando un valor presente no se puede interpretar.

    Ejemplos:
    - Monto que no es decimal: "12,34" o "abc".
    - Fecha que no es ISO: "31.12.2023".
    - IBAN con dígitos de control incorrectos.
    - Código de moneda que no existe en ISO 4217.
    - Documento que no es XML bien formado.
    """

    def __init__(self, archivo: str, campo: str, valor: str, causa: str = ""):
        self.archivo = archivo
        self.campo = campo
        self.valor = valor
        self.causa = causa
        mensaje = f"Valor inválido en '{archivo}' para '{campo}': '{valor}'"
        if causa:
            mensaje += f" — {causa}"
        super().__init__(mensaje)


class ArchivoIlegibleError(ConverterBaseError):
    """Se lanza cuando un archivo o un miembro de un ZIP no se puede leer.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - El ZIP está corrupto o truncado.
    - Un miembro del ZIP usa un método de compresión no soportado.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"No se pudo leer '{archivo}': {causa}")


class OutputError(ConverterBaseError):
    """Se lanza cuando falla la generación de la salida (CSV o Excel)."""

    def __init__(self, formato: str, causa: str):
        self.formato = formato
        self.causa = causa
        super().__init__(f"Error generando salida {formato}: {causa}")
