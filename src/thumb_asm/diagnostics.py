'''
diagnósticos de traducción: severidad, ubicación archivo:línea:columna y pista
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Literal

Severity = Literal["error", "advertencia"]

@dataclass(frozen=True)
class Diagnostic:
    """Problema encontrado en una línea del programa.

    Se acumulan durante la traducción en vez de lanzarse; la línea de comandos
    los imprime todos y sólo escribe la imagen si ninguno es un error.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None     # desde 1: columna del mnemónico
    hint: Optional[str] = None
    file: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    @property
    def location(self) -> str:
        """'prog.s:12:9', 'prog.s', '12' ... o '' si no hay ubicación."""
        parts = [str(p) for p in (self.file, self.line) if p is not None]
        if self.line is not None and self.col is not None:
            parts.append(str(self.col))
        return ":".join(parts)

    def __str__(self) -> str:
        text = f"{self.severity.upper()}: {self.message}"
        if self.hint:
            text += f"  (pista: {self.hint})"
        loc = self.location
        return f"{loc}: {text}" if loc else text

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    return Diagnostic("error", message, line=line, col=col, hint=hint, file=file)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    return Diagnostic("advertencia", message, line=line, col=col, hint=hint, file=file)

def has_errors(diags: Iterable[Diagnostic]) -> bool:
    return any(d.is_error for d in diags)
