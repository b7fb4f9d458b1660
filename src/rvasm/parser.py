# src/rvasm/parser.py
from __future__ import annotations
import logging
import re
from typing import List

from .lexer import (
    SYMBOL_PATTERN,
    strip_comment,
    is_directive,
    split_label,
    split_mnemonic_operands,
    split_operands,
)
from .ast import (
    Argument, Constant, Statement, Label, Directive, Instruction,
    RegOffset, StringLiteral, Number, HiDataRef, LoDataRef, Symbol, Difference,
)
from .escapes import unescape_string
from .regs import is_reg, parse_register
from .utils import is_signed_nbit
from .diagnostics import AsmSyntaxError

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

HEX_IMM_RE = re.compile(r"^[+-]?0x[0-9a-fA-F]+$")
DEC_IMM_RE = re.compile(r"^[+-]?\d+$")
SYMBOL_RE  = re.compile(r"^" + SYMBOL_PATTERN + r"$")
MNEMONIC_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.]*$")
RELOC_RE   = re.compile(r"^%(?P<kind>hi|lo)\(\s*(?P<sym>" + SYMBOL_PATTERN + r")\s*\)$")
MEM_RE     = re.compile(r"^(?P<off>[^()]*|%(?:hi|lo)\([^()]*\))\(\s*(?P<base>[^()]+?)\s*\)$")
DIFF_RE    = re.compile(r"^(?P<left>" + SYMBOL_PATTERN + r")\s*-\s*(?P<right>" + SYMBOL_PATTERN + r")$")

def _parse_number(token: str) -> Number:
    t = token.strip()
    if not (HEX_IMM_RE.match(t) or DEC_IMM_RE.match(t)):
        raise ValueError(f"Inmediato inválido: {token}")
    # base explícita: '010' es decimal
    value = int(t, 16) if HEX_IMM_RE.match(t) else int(t, 10)
    if not is_signed_nbit(value, 64):
        raise ValueError(f"Inmediato fuera de rango (64 bits con signo): {token}")
    return Number(value)

def _parse_constant(token: str) -> Constant:
    t = token.strip()
    m = RELOC_RE.match(t)
    if m:
        return HiDataRef(m.group("sym")) if m.group("kind") == "hi" else LoDataRef(m.group("sym"))
    return _parse_number(t)

def _parse_mem(token: str) -> RegOffset:
    m = MEM_RE.match(token)
    if not m:
        raise ValueError(f"Operando de memoria inválido: '{token}' (esperado imm(rs1) o (rs1))")
    off_raw = m.group("off").strip()
    base = parse_register(m.group("base"))
    off = Number(0) if off_raw == "" else _parse_constant(off_raw)
    return RegOffset(base, off)

def parse_argument(token: str) -> Argument:
    """Convierte un operando ya separado en su Argument; ValueError si no encaja."""
    t = token.strip()
    if not t:
        raise ValueError("Operando vacío")
    if t.startswith('"'):
        if len(t) < 2 or not t.endswith('"'):
            raise ValueError(f"Cadena sin cerrar: {t}")
        return StringLiteral(unescape_string(t))
    if RELOC_RE.match(t):
        return _parse_constant(t)
    if t.endswith(")") and "(" in t:
        return _parse_mem(t)
    m = DIFF_RE.match(t)
    if m:
        return Difference(m.group("left"), m.group("right"))
    if HEX_IMM_RE.match(t) or DEC_IMM_RE.match(t):
        return _parse_number(t)
    if is_reg(t):
        return parse_register(t)
    if SYMBOL_RE.match(t):
        return Symbol(t)
    raise ValueError(f"Operando inválido: '{t}'")

def _parse_args(op_str: str, line: str) -> tuple:
    args = []
    for tok in split_operands(op_str):
        try:
            args.append(parse_argument(tok))
        except ValueError as ex:
            col = line.find(tok) + 1 if tok else None
            raise AsmSyntaxError(str(ex), source=line, col=col or None) from None
    return tuple(args)

def parse_line(line: str) -> List[Statement]:
    """
    Analiza una línea ya recortada y devuelve sus sentencias (cero o más):
      - Label(name)               'name:' (puede repetirse y seguir con algo más)
      - Directive(name, args)     '.name arg, arg, ...' (el nombre conserva el punto)
      - Instruction(mnemonic, args)

    Una línea vacía o sólo con comentario no produce sentencias. Si la línea no
    encaja en la gramática se lanza AsmSyntaxError (sin número de línea; lo añade
    el driver).
    """
    out: List[Statement] = []
    core = strip_comment(line)

    label, rest = split_label(core)
    while label is not None:
        out.append(Label(label))
        core = rest
        label, rest = split_label(core)

    if not core:
        return out

    name, op_str = split_mnemonic_operands(core)
    if is_directive(name):
        if not SYMBOL_RE.match(name):
            raise AsmSyntaxError(f"Directiva inválida: '{name}'", source=line, col=line.find(name) + 1)
        out.append(Directive(name, _parse_args(op_str, line)))
    else:
        if not MNEMONIC_RE.match(name):
            raise AsmSyntaxError(f"Mnemónico inválido: '{name}'", source=line, col=line.find(name) + 1)
        out.append(Instruction(name, _parse_args(op_str, line)))

    log.debug("línea %r -> %d sentencias", line, len(out))
    return out
