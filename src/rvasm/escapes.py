'''
decodificación de literales de cadena ("...") a bytes crudos
'''

from __future__ import annotations

from .diagnostics import MalformedEscape, UnsupportedConstruct

DECIMAL_DIGITS = "0123456789"
OCTAL_DIGITS = "01234567"

# Escapes de un carácter; cualquier otro carácter se representa a sí mismo (\\, \", ...)
CHAR_ESCAPES = {
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "b": 0x08,
    "f": 0x0C,
}

def _octal_escape(digits: str, token: str) -> int:
    if len(digits) < 3:
        raise MalformedEscape(f"Escape octal truncado en {token}")
    if any(d not in OCTAL_DIGITS for d in digits):
        raise MalformedEscape(f"Escape octal con dígitos no octales '\\{digits}' en {token}")
    value = int(digits[0]) * 64 + int(digits[1]) * 8 + int(digits[2])
    if value > 0xFF:
        raise MalformedEscape(f"Escape octal fuera de rango '\\{digits}' en {token}")
    return value

def unescape_string(token: str) -> bytes:
    """Convierte un token entre comillas dobles en sus bytes.

    - '\\' seguido de un dígito: escape octal de exactamente tres dígitos.
    - '\\x': no soportado (UnsupportedConstruct).
    - '\\n', '\\r', '\\t', '\\b', '\\f': bytes de control; otro carácter tras '\\'
      se toma literalmente.
    Los caracteres no ASCII se emiten en UTF-8.
    """
    if len(token) < 2 or not (token.startswith('"') and token.endswith('"')):
        raise ValueError(f"Se esperaba una cadena entre comillas, obtuve {token!r}")
    inner = token[1:-1]
    out = bytearray()
    i = 0
    while i < len(inner):
        c = inner[i]
        i += 1
        if c != "\\":
            out += c.encode("utf-8")
            continue
        if i == len(inner):
            raise MalformedEscape(f"Barra invertida al final de la cadena {token}")
        nxt = inner[i]
        i += 1
        if nxt in DECIMAL_DIGITS:
            out.append(_octal_escape(nxt + inner[i:i + 2], token))
            i += 2
        elif nxt == "x":
            raise UnsupportedConstruct(f"Escapes hexadecimales no soportados: {token}")
        elif nxt in CHAR_ESCAPES:
            out.append(CHAR_ESCAPES[nxt])
        else:
            out += nxt.encode("utf-8")
    return bytes(out)
