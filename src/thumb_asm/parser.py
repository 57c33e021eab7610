# src/thumb_asm/parser.py
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from .ast import SourceLine
from .lexer import is_blank, match_line
from .diagnostics import error, Diagnostic

logger = logging.getLogger(__name__)

def parse(text: str, *, filename: Optional[str] = None, strict: bool = False) -> Tuple[List[SourceLine], List[Diagnostic]]:
    """
    Devuelve (lines, diagnostics) con una SourceLine por línea del texto,
    numeradas desde 1, cada una con su LineMatch o None.

    Todo el fuente queda en memoria: la búsqueda hacia delante de etiquetas
    recorre esta lista en vez de mover un cursor de lectura.

    Reglas:
      - Comentarios: ';' hasta fin de línea.
      - Etiquetas: 'name:' sola en la línea, o 'name[:] instr ...'.
      - Instrucciones: MNEMONICO[S][COND] op1[, op2[, op3]].
      - Una línea que no encaja con el patrón se ignora; en modo estricto
        se informa como error (salvo las vacías y las de sólo comentario).
    """
    lines: List[SourceLine] = []
    diags: List[Diagnostic] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        m = match_line(raw)
        if m is None and not is_blank(raw):
            logger.debug("línea %d ignorada: %r", lineno, raw)
            if strict:
                diags.append(error(f"Línea no reconocida: '{raw.strip()}'", line=lineno, col=len(raw) - len(raw.lstrip()) + 1, file=filename,
                                   hint="formato: [etiqueta:] MNEMONICO[S][COND] op1[, op2[, op3]]"))
        lines.append(SourceLine(line=lineno, text=raw, match=m))

    return lines, diags
