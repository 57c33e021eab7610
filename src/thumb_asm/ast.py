'''
dataclases del resultado de reconocer una línea (LineMatch, SourceLine)
'''

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import FrozenSet, Optional

# Campos de operando en el orden en que aparecen en el patrón.
# Son los únicos que cuentan para la "forma" de la línea.
OPERAND_FIELDS = (
    "cond",     # BEQ  -> EQ
    "reg1",     # ADD R1, ...
    "target",   # B loop
    "reg2",     # ADD R1, R2
    "imm2",     # MOV R1, #2
    "base",     # LDR R1, [R2]
    "index",    # LDR R1, [R2, R3]
    "offset",   # LDR R1, [R2, #4]
    "shift",    # LDR R1, [R2, R3, LSL #2]
    "amount",   # LDR R1, [R2, R3, LSL #2]
    "reg3",     # ADD R1, R2, R3
    "imm3",     # LSL R1, R2, #2
)

@dataclass(frozen=True)
class LineMatch:
    """Campos capturados de una línea; los ausentes son None, nunca 0.

    Ejemplo::

        loop ADD R0, R1, #3
        label='loop' mnemonic='ADD' reg1='0' reg2='1' imm3='3'
    """
    label: Optional[str] = None
    mnemonic: Optional[str] = None
    flags: Optional[str] = None      # sufijo S
    cond: Optional[str] = None
    reg1: Optional[str] = None
    target: Optional[str] = None
    reg2: Optional[str] = None
    imm2: Optional[str] = None
    base: Optional[str] = None
    index: Optional[str] = None
    offset: Optional[str] = None
    shift: Optional[str] = None
    amount: Optional[str] = None
    reg3: Optional[str] = None
    imm3: Optional[str] = None
    # columna (desde 1) de la instrucción, o de la etiqueta si va sola
    col: Optional[int] = field(default=None, compare=False)

    @property
    def is_instruction(self) -> bool:
        return self.mnemonic is not None

    @property
    def shape(self) -> FrozenSet[str]:
        """Conjunto de campos de operando presentes (decide la variante)."""
        return frozenset(f for f in OPERAND_FIELDS if getattr(self, f) is not None)

    def present(self) -> dict:
        """Campos capturados del texto (sin la columna)."""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if f.name != "col" and getattr(self, f.name) is not None}

@dataclass(frozen=True)
class SourceLine:
    """Línea del fuente (numerada desde 1) con su reconocimiento, si lo hubo."""
    line: int
    text: str
    match: Optional[LineMatch] = None
