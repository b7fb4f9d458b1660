# src/rvasm/data.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional

from .ast import Statement, Label, Directive, Instruction, StringLiteral, Number, Symbol
from .diagnostics import MissingObjectData, DuplicateWordAssignment
from .utils import le32

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

TEXT_DIRS = {".ascii", ".asciz"}
WORD_SIZE = 4

def _is_object_type(d: Directive) -> bool:
    """'.type NAME, @object'"""
    return (d.name == ".type" and len(d.args) == 2
            and isinstance(d.args[0], Symbol) and isinstance(d.args[1], Symbol)
            and d.args[1].name == "@object")

def _encode_words(d: Directive) -> bytes:
    out = bytearray()
    for arg in d.args:
        if isinstance(arg, Number):
            out += le32(arg.value)
        else:
            # TODO resolver referencias indirectas (.word sym) en la etapa de reubicación
            out += bytes(WORD_SIZE)
    return bytes(out)

def extract_data_objects(statements: Iterable[Statement]) -> Dict[str, bytes]:
    """Materializa los objetos de datos declarados con '.type NAME, @object'.

    Recorre las sentencias una sola vez recordando la última etiqueta vista:
      - '.type X, @object' registra X (sin tocar el contenido si ya existía).
      - '.ascii'/'.asciz' con una cadena añaden sus bytes al objeto de la etiqueta
        actual (no se agrega el terminador NUL).
      - '.word' empaqueta cada número en 32 bits little-endian; los argumentos no
        numéricos quedan como cuatro ceros. Falla si el objeto ya tenía datos.
    Las directivas bajo una etiqueta que no es un objeto registrado se ignoran.
    Devuelve {nombre: bytes} ordenado por nombre; un objeto sin datos es un error.
    """
    current_label: Optional[str] = None
    objects: Dict[str, Optional[bytes]] = {}

    for s in statements:
        if isinstance(s, Label):
            current_label = s.name
        elif isinstance(s, Directive):
            if _is_object_type(s):
                name = s.args[0].name
                if name not in objects:
                    objects[name] = None
                    log.debug("objeto anunciado: %s", name)
            elif s.name in TEXT_DIRS and len(s.args) == 1 and isinstance(s.args[0], StringLiteral):
                if current_label in objects:
                    objects[current_label] = (objects[current_label] or b"") + s.args[0].data
            elif s.name == ".word":
                if current_label in objects:
                    if objects[current_label] is not None:
                        raise DuplicateWordAssignment(current_label)
                    objects[current_label] = _encode_words(s)
            # Otras directivas (.size, .p2align, ...) no aportan contenido
        elif isinstance(s, Instruction):
            continue
        else:
            raise TypeError(f"Sentencia desconocida: {s!r}")

    result: Dict[str, bytes] = {}
    for name in sorted(objects):
        data = objects[name]
        if data is None:
            raise MissingObjectData(name)
        result[name] = data
    log.info("%d objetos de datos", len(result))
    return result
