from __future__ import annotations
from typing import Iterable, List
from .utils import to_hex
from .encoding import Encoded

# Cabecera del formato de imagen de memoria de Logisim
HEADER = "v2.0 raw\n"
DEFAULT_OUTPUT = "rom.ini"

def to_hex_tokens(words: Iterable[Encoded]) -> List[str]:
    return [to_hex(w.word) for w in words]

def to_image(words: Iterable[Encoded]) -> str:
    """Cabecera y un token hex por instrucción, cada uno seguido de un espacio."""
    return HEADER + "".join(tok + " " for tok in to_hex_tokens(words))

def write_image(words: Iterable[Encoded], path: str = DEFAULT_OUTPUT) -> None:
    image = to_image(words)
    with open(path, "w", encoding="utf-8") as f:
        f.write(image)
