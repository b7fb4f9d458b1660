'''
 bit-twiddling (u32, rangos con signo, empaquetado little-endian)
'''

from __future__ import annotations
import struct

# Máscara para 32 bits sin signo
U32_MASK = 0xFFFFFFFF

def u32(x: int) -> int:
    """Fuerza el valor al rango de 32 bits sin signo (truncando como un cast)."""
    return x & U32_MASK

def is_signed_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [-(2^(n-1)), 2^(n-1)-1] (con signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    lo = -(1 << (n - 1))
    hi = (1 << (n - 1)) - 1
    return lo <= x <= hi

def le32(x: int) -> bytes:
    """Palabra de 32 bits en little-endian (4 bytes)."""
    return struct.pack("<I", u32(x))

def to_hex_bytes(data: bytes) -> str:
    """Bytes como pares hexadecimales separados por espacios."""
    return " ".join(format(b, "02x") for b in data)
