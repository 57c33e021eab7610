'''
utilidades de bits (rangos de n bits, binario de ancho fijo, hex del ROM)
'''

from __future__ import annotations

# Palabra de instrucción Thumb: 16 bits
WORD_BITS = 16
U16_MASK = 0xFFFF

def u16(x: int) -> int:
    """Fuerza el valor al rango de 16 bits sin signo."""
    return x & U16_MASK

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def to_bin(x: int, width: int) -> str:
    """Binario de 'width' bits rellenado con ceros a la izquierda.

    No trunca: si x no cabe en el ancho pedido lanza ValueError.
    """
    if not is_unsigned_nbit(x, width):
        raise ValueError(f"{x} no cabe en {width} bits")
    return format(x, f"0{width}b")

def to_hex(x: int) -> str:
    """Hex en minúsculas y sin relleno, como lo espera el cargador de Logisim."""
    return format(u16(x), "x")

def parse_number(text: str) -> int:
    """Convierte '42' o '0x2A' a entero (los ceros a la izquierda se aceptan)."""
    t = text.strip().lower()
    if t.startswith("0x"):
        return int(t[2:], 16)
    return int(t, 10)
