# src/thumb_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from .ast import LineMatch
from .conditions import cond_code
from .regs import is_low_reg, reg_num
from .utils import WORD_BITS, parse_number, to_bin

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int       # u16
    index: int      # número de instrucción (pc)
    line: int
    mnemonic: str
    variant: str

class EncodingError(ValueError):
    """Un operando no cabe en su campo de bits."""

    def __init__(self, field: str, value: int, width: int):
        self.field = field
        self.value = value
        self.width = width
        super().__init__(f"{field}={value} fuera de rango para {width} bits (0..{(1 << width) - 1})")

# Un codificador recibe la línea reconocida y devuelve la cadena de bits
Encoder = Callable[[LineMatch], str]

# Ancho del índice de destino que se añade tras el prefijo de un salto
TARGET_BITS = 8

# ---------------- Helpers de empaquetado de bits ----------------

def _bits(value: int, width: int, field: str) -> str:
    try:
        return to_bin(value, width)
    except ValueError:
        raise EncodingError(field, value, width) from None

def _reg(m: LineMatch, name: str) -> str:
    token = getattr(m, name)
    if not is_low_reg(token):
        raise EncodingError(name, reg_num(token), 3)
    return _bits(reg_num(token), 3, name)

def _imm(m: LineMatch, name: str, width: int) -> str:
    return _bits(parse_number(getattr(m, name)), width, name)

def zero_fill(bits: str) -> str:
    """Los grupos sin valor (blancos) se rellenan con ceros."""
    return bits.replace(" ", "0")

def to_word(bits: str) -> int:
    if len(bits) != WORD_BITS:
        raise ValueError(f"palabra de {len(bits)} bits (se esperaban {WORD_BITS})")
    return int(zero_fill(bits), 2)

def encode_target(index: int) -> str:
    """Índice de instrucción destino de un salto, 8 bits."""
    return _bits(index, TARGET_BITS, "destino")

# ---------------- Formatos ----------------

def data_processing(op: int) -> Encoder:
    """010000 | op(4) | Rm(3) | Rdn(3)"""
    def _enc(m: LineMatch) -> str:
        return "010000" + _bits(op, 4, "op") + _reg(m, "reg2") + _reg(m, "reg1")
    return _enc

def shift_immediate(op: int) -> Encoder:
    """000 | op(2) | imm5 | Rm(3) | Rd(3)"""
    def _enc(m: LineMatch) -> str:
        return "000" + _bits(op, 2, "op") + _imm(m, "imm3", 5) + _reg(m, "reg2") + _reg(m, "reg1")
    return _enc

def add_sub_register(op: int) -> Encoder:
    """00011 | op(2) | Rm(3) | Rn(3) | Rd(3)"""
    def _enc(m: LineMatch) -> str:
        return "00011" + _bits(op, 2, "op") + _reg(m, "reg3") + _reg(m, "reg2") + _reg(m, "reg1")
    return _enc

def add_immediate() -> Encoder:
    """0001110 | imm3 | Rn(3) | Rd(3)"""
    def _enc(m: LineMatch) -> str:
        return "0001110" + _imm(m, "imm3", 3) + _reg(m, "reg2") + _reg(m, "reg1")
    return _enc

def move_immediate() -> Encoder:
    """00100 | Rd(3) | imm8"""
    def _enc(m: LineMatch) -> str:
        return "00100" + _reg(m, "reg1") + _imm(m, "imm2", 8)
    return _enc

def load_store(load: int, source: str) -> Encoder:
    """1001 | L | Rt(3) | imm8

    'source' es el campo del que sale el desplazamiento: 'imm2' para
    ``LDR R1, #4`` u 'offset' para ``LDR R1, [R2, #4]``.
    """
    def _enc(m: LineMatch) -> str:
        return "1001" + _bits(load, 1, "L") + _reg(m, "reg1") + _imm(m, source, 8)
    return _enc

def branch() -> Encoder:
    """11011110, seguido del destino que añade el traductor."""
    def _enc(m: LineMatch) -> str:
        return "11011110"
    return _enc

def branch_conditional() -> Encoder:
    """1101 | cond(4), seguido del destino que añade el traductor."""
    def _enc(m: LineMatch) -> str:
        return "1101" + _bits(cond_code(m.cond), 4, "cond")
    return _enc

def unknown() -> Encoder:
    """Instrucción desconocida: palabra en blanco, que acaba valiendo 0."""
    def _enc(m: LineMatch) -> str:
        return " " * WORD_BITS
    return _enc
