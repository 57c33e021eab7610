'''
códigos de condición de los saltos condicionales (campo de 4 bits)
'''

from __future__ import annotations
from typing import Dict

CONDITIONS: Dict[str, int] = {
    "EQ": 0b0000, "NE": 0b0001,
    "CS": 0b0010, "CC": 0b0011,
    "MI": 0b0100, "PL": 0b0101,
    "VS": 0b0110, "VC": 0b0111,
    "HI": 0b1000, "LS": 0b1001,
    "GE": 0b1010, "LT": 0b1011,
    "GT": 0b1100, "LE": 0b1101,
    "AL": 0b1110,
}

# Alias de ARM para carry set / carry clear
ALIASES: Dict[str, str] = {"HS": "CS", "LO": "CC"}

def names() -> list[str]:
    """Todos los sufijos aceptados en el fuente, alias incluidos."""
    return list(CONDITIONS) + list(ALIASES)

def cond_code(suffix: str) -> int:
    """Valor de 4 bits del sufijo de condición (sin distinguir mayúsculas)."""
    s = suffix.upper()
    s = ALIASES.get(s, s)
    if s not in CONDITIONS:
        raise KeyError(f"Condición desconocida: {suffix}")
    return CONDITIONS[s]
