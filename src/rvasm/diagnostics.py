'''
clase Diagnostic, helpers y excepciones terminales del front end
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

# ---- Errores terminales ----
# Ninguno es recuperable: la primera falla detiene la pasada.

class AsmError(Exception):
    """Base de los errores del front end; lleva un Diagnostic de severidad error."""

    def __init__(self, message: str, *, line: int | None = None, col: int | None = None,
                 file: str | None = None, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.diagnostic = error(message, line=line, col=col, file=file, hint=hint)

    def __str__(self) -> str:
        return str(self.diagnostic)

class AsmSyntaxError(AsmError):
    """Línea rechazada por la gramática; muestra la línea fuente y la columna."""

    def __init__(self, message: str, *, source: str | None = None, line: int | None = None,
                 col: int | None = None, file: str | None = None, hint: str | None = None):
        super().__init__(message, line=line, col=col, file=file, hint=hint)
        self.source = source

    def located(self, *, line: int, file: str | None = None) -> "AsmSyntaxError":
        """Copia del error anclada a una línea (y archivo) concretos."""
        return AsmSyntaxError(self.message, source=self.source, line=line,
                              col=self.diagnostic.col, file=file, hint=self.diagnostic.hint)

    def __str__(self) -> str:
        s = str(self.diagnostic)
        if self.source is not None:
            s += f"\n    {self.source}"
            if self.diagnostic.col is not None:
                s += "\n    " + " " * (self.diagnostic.col - 1) + "^"
        return s

class MissingObjectData(AsmError):
    """Objeto anunciado con '.type NAME, @object' que nunca recibió datos."""

    def __init__(self, name: str):
        super().__init__(f"Objeto anunciado sin datos: {name}",
                         hint="falta la etiqueta o las directivas .ascii/.asciz/.word")
        self.name = name

class DuplicateWordAssignment(AsmError):
    """'.word' aplicado a un objeto que ya tiene contenido."""

    def __init__(self, name: str):
        super().__init__(f".word aplicado a un objeto que ya tiene datos: {name}")
        self.name = name

class UnsupportedConstruct(AsmError):
    """Construcción conocida pero no implementada (Difference, escapes \\x)."""

class MalformedEscape(AsmError):
    """Secuencia de escape octal truncada o con dígitos no octales."""
