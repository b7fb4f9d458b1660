from __future__ import annotations
import re

SYMBOL_PATTERN = r"[A-Za-z_.$@][A-Za-z0-9_.$@]*"

# comment or string literal; strings are kept so '#' inside them survives
COMMENT_OR_STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"|#.*$|//.*$')

def strip_comment(line: str) -> str:
    """Remove comments starting with '#' or '//' (outside string literals)"""
    def _keep_strings(m):
        s = m.group(0)
        return s if s.startswith('"') else ""
    return COMMENT_OR_STRING_RE.sub(_keep_strings, line).strip()

LABEL_RE = re.compile(r"^(" + SYMBOL_PATTERN + r"|\d+):\s*(.*)$")

def split_label(line: str):
    """Return (label, rest) if line has 'label:', else (None, line)."""
    m = LABEL_RE.match(line)
    if not m:
        return None, line
    return m.group(1), m.group(2).strip()

def is_directive(line: str) -> bool:
    return line.strip().startswith('.')

def split_mnemonic_operands(line: str):
    s = line.strip()
    if not s:
        return "", ""
    parts = s.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()

def split_operands(op_str: str):
    if not op_str:
        return []
    # split by commas but not inside parentheses or string literals
    out = []
    cur = []
    depth = 0
    quoted = False
    escaped = False
    for ch in op_str:
        if quoted:
            cur.append(ch)
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                quoted = False
        elif ch == '"':
            quoted = True
            cur.append(ch)
        elif ch == '(':
            depth += 1
            cur.append(ch)
        elif ch == ')':
            depth = max(0, depth-1)
            cur.append(ch)
        elif ch == ',' and depth == 0:
            out.append(''.join(cur).strip())
            cur = []
        else:
            cur.append(ch)
    out.append(''.join(cur).strip())
    return out
