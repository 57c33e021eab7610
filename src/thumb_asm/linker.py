# src/thumb_asm/linker.py
from __future__ import annotations
import logging
from typing import Dict, Iterator, Optional, Sequence

from .ast import SourceLine

logger = logging.getLogger(__name__)

# ---------- Tabla de etiquetas ----------

class LabelTable:
    """Etiqueta -> número de instrucción.

    Los nombres distinguen mayúsculas. La primera escritura es la que vale:
    una entrada nunca se sobrescribe ni se borra.
    """

    def __init__(self) -> None:
        self._index: Dict[str, int] = {}

    def record(self, name: str, index: int) -> bool:
        """Registra la etiqueta; devuelve False si ya existía (y no la toca)."""
        if index < 0:
            raise ValueError("el índice de instrucción no puede ser negativo")
        if name in self._index:
            return False
        self._index[name] = index
        return True

    def get(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._index)

# ---------- Búsqueda hacia delante ----------

def lookahead(lines: Sequence[SourceLine], start: int, step: int, name: str) -> Optional[int]:
    """
    Busca 'name' en lines[start:] y devuelve el índice de instrucción al que
    queda ligada, o None si el fuente se acaba sin encontrarla.

    'step' es el índice de la instrucción que pide la etiqueta (el salto);
    lines[start] es la línea siguiente a la suya. Cada línea con instrucción
    cuenta una más, después de mirar su propia etiqueta: así una etiqueta
    sola en su línea apunta a la siguiente instrucción.
    """
    counter = step + 1
    for src in lines[start:]:
        m = src.match
        if m is None:
            continue
        if m.label == name:
            logger.debug("etiqueta '%s' encontrada hacia delante en la línea %d -> %d", name, src.line, counter)
            return counter
        if m.is_instruction:
            counter += 1
    logger.debug("etiqueta '%s' no encontrada desde la línea %d", name, start + 1)
    return None

def resolve(table: LabelTable, name: str, lines: Sequence[SourceLine], start: int, step: int) -> Optional[int]:
    """Índice de 'name': primero la tabla, si no una búsqueda hacia delante.

    Lo encontrado hacia delante se guarda en la tabla, así el recorrido
    principal verá la misma etiqueta ya registrada con el mismo índice.
    """
    index = table.get(name)
    if index is None:
        index = lookahead(lines, start, step, name)
        if index is not None:
            table.record(name, index)
    return index
