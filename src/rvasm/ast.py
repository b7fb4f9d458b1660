'''
dataclases del modelo (Statement, Argument, Constant) y su formato canónico
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

# ---- Registros y constantes ----

@dataclass(frozen=True)
class Register:
    """Registro entero 'xN' (0..31)."""
    num: int

    def __str__(self) -> str:
        return f"x{self.num}"

@dataclass(frozen=True)
class Number:
    """Constante numérica (entero con signo de 64 bits)."""
    value: int

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class HiDataRef:
    """Bits altos de la dirección futura de un símbolo: %hi(sym)."""
    symbol: str

    def __str__(self) -> str:
        return f"%hi({self.symbol})"

@dataclass(frozen=True)
class LoDataRef:
    """Bits bajos de la dirección futura de un símbolo: %lo(sym)."""
    symbol: str

    def __str__(self) -> str:
        return f"%lo({self.symbol})"

Constant = Union[Number, HiDataRef, LoDataRef]

# ---- Argumentos ----

@dataclass(frozen=True)
class RegOffset:
    """Dirección base+desplazamiento: offset(reg)."""
    reg: Register
    offset: Constant

    def __str__(self) -> str:
        return f"{self.offset}({self.reg})"

_CHAR_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

def _escape(text: str) -> str:
    out = []
    for ch in text:
        if ch in _CHAR_ESCAPES:
            out.append(_CHAR_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\{ord(ch):03o}")
        else:
            out.append(ch)
    return "".join(out)

@dataclass(frozen=True)
class StringLiteral:
    """Cadena ya decodificada (bytes crudos)."""
    data: bytes

    def __str__(self) -> str:
        # decodificación con pérdida: bytes no UTF-8 se sustituyen
        return '"' + _escape(self.data.decode("utf-8", errors="replace")) + '"'

@dataclass(frozen=True)
class Symbol:
    """Símbolo referenciado por nombre."""
    name: str

    def __str__(self) -> str:
        return self.name

@dataclass(frozen=True)
class Difference:
    """Diferencia de dos símbolos: left - right."""
    left: str
    right: str

    def __str__(self) -> str:
        return f"{self.left} - {self.right}"

Argument = Union[Register, RegOffset, StringLiteral, Number, HiDataRef, LoDataRef, Symbol, Difference]

def format_arguments(args: Tuple[Argument, ...]) -> str:
    return ", ".join(str(a) for a in args)

# ---- Sentencias ----

@dataclass(frozen=True)
class Label:
    """Etiqueta definida en el código fuente (p.ej., 'loop:')."""
    name: str

    def __str__(self) -> str:
        return f"{self.name}:"

@dataclass(frozen=True)
class Directive:
    """Directiva del ensamblador; el nombre conserva el punto inicial ('.word')."""
    name: str
    args: Tuple[Argument, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        return f"  {self.name} {format_arguments(self.args)}".rstrip()

@dataclass(frozen=True)
class Instruction:
    """Instrucción con mnemónico y argumentos tipados."""
    mnemonic: str
    args: Tuple[Argument, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        return f"  {self.mnemonic} {format_arguments(self.args)}".rstrip()

Statement = Union[Label, Directive, Instruction]
