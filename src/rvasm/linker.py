# src/rvasm/linker.py
from __future__ import annotations
import logging
from typing import Iterable, Iterator, List

from .ast import (
    Argument, Statement, Label, Directive, Instruction,
    Register, RegOffset, StringLiteral, Number, HiDataRef, LoDataRef, Symbol, Difference,
)
from .diagnostics import UnsupportedConstruct

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# ---------- Etiquetas definidas ----------

def extract_labels(statements: Iterable[Statement]) -> List[str]:
    """Nombres de las etiquetas definidas, sin duplicados y ordenados por nombre.

    Las redefiniciones se colapsan en silencio: detectarlas no es tarea de esta pasada.
    """
    names = set()
    for s in statements:
        if isinstance(s, Label):
            names.add(s.name)
        elif isinstance(s, (Directive, Instruction)):
            continue
        else:
            raise TypeError(f"Sentencia desconocida: {s!r}")
    return sorted(names)

# ---------- Símbolos referenciados ----------

def _constant_reference(c) -> Iterator[str]:
    if isinstance(c, Number):
        return
    if isinstance(c, (HiDataRef, LoDataRef)):
        yield c.symbol
        return
    raise TypeError(f"Constante desconocida: {c!r}")

def _argument_references(arg: Argument) -> Iterator[str]:
    if isinstance(arg, (Register, StringLiteral)):
        return
    if isinstance(arg, Symbol):
        yield arg.name
    elif isinstance(arg, RegOffset):
        yield from _constant_reference(arg.offset)
    elif isinstance(arg, (Number, HiDataRef, LoDataRef)):
        yield from _constant_reference(arg)
    elif isinstance(arg, Difference):
        raise UnsupportedConstruct(f"Referencias en diferencias de símbolos no soportadas: {arg}")
    else:
        raise TypeError(f"Argumento desconocido: {arg!r}")

def extract_label_references(statements: Iterable[Statement]) -> List[str]:
    """Símbolos referenciados por los argumentos de las instrucciones, ordenados.

    Los operandos de directivas no cuentan (los trata el constructor de objetos de datos).
    """
    refs = set()
    for s in statements:
        if isinstance(s, Instruction):
            for arg in s.args:
                refs.update(_argument_references(arg))
        elif isinstance(s, (Label, Directive)):
            continue
        else:
            raise TypeError(f"Sentencia desconocida: {s!r}")
    log.info("%d símbolos referenciados", len(refs))
    return sorted(refs)
