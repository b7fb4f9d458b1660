from __future__ import annotations
from typing import Dict, Iterable, List
from .ast import Statement
from .utils import to_hex_bytes

def format_statements(statements: Iterable[Statement]) -> str:
    return "".join(f"{s}\n" for s in statements)

def to_hex_lines(objects: Dict[str, bytes]) -> List[str]:
    return [f"{name}: {to_hex_bytes(data)}".rstrip() for name, data in objects.items()]

def write_listing(statements: Iterable[Statement], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_statements(statements))

def write_objects(objects: Dict[str, bytes], path: str) -> None:
    lines = to_hex_lines(objects)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
