from __future__ import annotations
import argparse, logging, sys
from typing import List

from .ast import Statement
from .parser import parse_line
from .linker import extract_labels, extract_label_references
from .data import extract_data_objects
from .diagnostics import AsmError, AsmSyntaxError
from .utils import to_hex_bytes
from .writers import write_listing, write_objects

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

def parse_asm(text: str, *, filename: str | None = None) -> List[Statement]:
    """Convierte el texto fuente en la secuencia ordenada de sentencias.

    Cada línea no vacía se analiza por separado y sus sentencias se concatenan en
    orden. La primera línea rechazada aborta todo con AsmSyntaxError anclado a su
    número de línea; no hay resultado parcial.
    """
    statements: List[Statement] = []
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            statements.extend(parse_line(line))
        except AsmSyntaxError as ex:
            raise ex.located(line=lineno, file=filename) from None
    log.info("%d sentencias leídas%s", len(statements), f" de {filename}" if filename else "")
    return statements

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="RISC-V assembly front end", prog="rvasm")
    ap.add_argument("source", help="archivo .s/.asm de entrada")
    ap.add_argument("--listing", help="escribe el listado canónico de sentencias en este archivo")
    ap.add_argument("--objects", help="escribe los objetos de datos (nombre: bytes hex) en este archivo")
    ap.add_argument("-v", "--verbose", action="store_true", help="salida detallada por stderr")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s", level=logging.DEBUG, stream=sys.stderr)

    try:
        with open(args.source, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    try:
        statements = parse_asm(text, filename=args.source)
        labels = extract_labels(statements)
        refs = extract_label_references(statements)
        objects = extract_data_objects(statements)
    except AsmError as ex:
        print(ex, file=sys.stderr)
        return 1

    try:
        if args.listing:
            write_listing(statements, args.listing)
        if args.objects:
            write_objects(objects, args.objects)
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    for name in labels:
        print(f"label {name}")
    for name in refs:
        print(f"ref {name}")
    for name, data in objects.items():
        print(f"object {name} [{len(data)}] {to_hex_bytes(data)}".rstrip())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
