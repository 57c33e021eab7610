'''
registros bajos R0..R7 del subconjunto Thumb y validaciones
'''

from __future__ import annotations
import re

# Las instrucciones de 16 bits sólo direccionan R0..R7 (campo de 3 bits)
LOW_REGS = 8

REG_RE = re.compile(r"^r?(\d+)$", re.IGNORECASE)

def normalize_reg(token: str) -> str:
    """Devuelve el nombre canónico 'Rn' o lanza ValueError."""
    m = REG_RE.match(token.strip())
    if not m:
        raise ValueError(f"Registro inválido: {token}")
    return f"R{int(m.group(1))}"

def reg_num(token: str) -> int:
    """Índice numérico del registro; acepta 'R3', 'r3' o sólo '3'."""
    return int(normalize_reg(token)[1:])

def is_low_reg(token: str) -> bool:
    """Indica si el token es un registro codificable en 3 bits (R0..R7)."""
    try:
        return reg_num(token) < LOW_REGS
    except ValueError:
        return False
