'''
mapeos ABI↔xN, validaciones, utilidades de registros
'''

from __future__ import annotations
from typing import Dict

from .ast import Register

# Mapeo de nombres ABI a índices del banco de enteros
ABI_TO_NUM: Dict[str, int] = {
    "zero": 0, "ra": 1, "sp": 2, "gp": 3, "tp": 4,
    "t0": 5, "t1": 6, "t2": 7,
    "s0": 8, "fp": 8, "s1": 9,
    "a0": 10, "a1": 11, "a2": 12, "a3": 13, "a4": 14, "a5": 15, "a6": 16, "a7": 17,
    "s2": 18, "s3": 19, "s4": 20, "s5": 21, "s6": 22, "s7": 23, "s8": 24, "s9": 25, "s10": 26, "s11": 27,
    "t3": 28, "t4": 29, "t5": 30, "t6": 31,
}

def is_reg(token: str) -> bool:
    """Indica si el token representa un registro válido (ABI o 'xN')."""
    try:
        reg_num(token)
        return True
    except ValueError:
        return False

def reg_num(token: str) -> int:
    """Devuelve el índice 0..31 del registro, aceptando ABI o 'xN'; si no, ValueError."""
    t = token.strip()
    if t in ABI_TO_NUM:
        return ABI_TO_NUM[t]
    if t.startswith("x") and t[1:].isdigit() and t[1:] == str(int(t[1:])):
        n = int(t[1:])
        if 0 <= n <= 31:
            return n
    raise ValueError(f"Registro inválido: {token}")

def parse_register(token: str) -> Register:
    return Register(reg_num(token))
