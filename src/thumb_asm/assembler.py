from __future__ import annotations
import argparse, sys
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.logging import RichHandler

from .ast import SourceLine
from .parser import parse
from .isa import select, UNKNOWN_INSTRUCTION
from .linker import LabelTable, resolve
from .encoding import Encoded, EncodingError, encode_target, to_word
from .diagnostics import Diagnostic, error, warning, has_errors
from .writers import write_image, DEFAULT_OUTPUT

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Translation:
    words: List[Encoded]
    labels: Dict[str, int]
    diagnostics: List[Diagnostic]

def translate(lines: Sequence[SourceLine], *, filename: Optional[str] = None, strict: bool = False) -> Translation:
    """Recorre las líneas una vez y produce una palabra por instrucción.

    - sin reconocimiento: se ignora;
    - etiqueta: se liga al pc actual;
    - instrucción: variante por (mnemónico, forma), codificación, destino
      del salto (buscando hacia delante si hace falta) y pc += 1.

    Una instrucción desconocida vale 0 y no detiene la traducción. Una
    etiqueta de salto inexistente o un operando fuera de rango dejan un
    diagnóstico de error (la palabra se conserva para no desalinear el resto).
    """
    labels = LabelTable()
    words: List[Encoded] = []
    diags: List[Diagnostic] = []
    step = 0

    for pos, src in enumerate(lines):
        m = src.match
        if m is None:
            continue

        if m.label is not None:
            if labels.record(m.label, step):
                logger.debug("etiqueta '%s' -> %d", m.label, step)
            elif labels.get(m.label) != step:
                diags.append(warning(f"Etiqueta redefinida: {m.label}", line=src.line, col=m.col, file=filename,
                                     hint=f"se mantiene la primera definición ({labels.get(m.label)})"))

        if not m.is_instruction:
            continue

        variant = select(m.mnemonic, m.shape)
        if variant is UNKNOWN_INSTRUCTION:
            logger.debug("línea %d: instrucción desconocida %s %s", src.line, m.mnemonic, m.present())
            if strict:
                diags.append(error(f"Instrucción desconocida: {m.mnemonic.upper()} con operandos {sorted(m.shape)}",
                                   line=src.line, col=m.col, file=filename))

        try:
            bits = variant.encode(m)
            if variant.is_branch:
                target = resolve(labels, m.target, lines, pos + 1, step)
                if target is None:
                    diags.append(error(f"Etiqueta no definida: {m.target}", line=src.line, col=m.col, file=filename,
                                       hint="la etiqueta debe aparecer en alguna línea del programa"))
                    target = 0
                bits += encode_target(target)
            word = to_word(bits)
        except EncodingError as ex:
            diags.append(error(f"{m.mnemonic.upper()}: {ex}", line=src.line, col=m.col, file=filename))
            word = 0

        words.append(Encoded(word=word, index=step, line=src.line, mnemonic=m.mnemonic.upper(), variant=variant.name))
        step += 1

    return Translation(words=words, labels=labels.as_dict(), diagnostics=diags)

def assemble_text(text: str, *, filename: str | None = None, strict: bool = False) -> Tuple[List[SourceLine], List[Diagnostic], Translation]:
    """Reconoce las líneas y las traduce.
    Devuelve (lines, diagnostics_totales, translation)."""
    lines, diags_parse = parse(text, filename=filename, strict=strict)
    result = translate(lines, filename=filename, strict=strict)
    diags = list(diags_parse) + list(result.diagnostics)
    diags.sort(key=lambda d: d.line or 0)
    return lines, diags, result

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Ensamblador Thumb (subconjunto) a imagen ROM de Logisim")
    ap.add_argument("source", help="archivo .s/.asm de entrada")
    ap.add_argument("-o", "--output", default=DEFAULT_OUTPUT,
                    help=f"imagen de memoria de salida (por defecto {DEFAULT_OUTPUT})")
    ap.add_argument("--strict", action="store_true",
                    help="tratar líneas no reconocidas e instrucciones desconocidas como errores")
    ap.add_argument("-v", "--verbose", action="store_true", help="mensajes de depuración")
    args = ap.parse_args(argv)

    _setup_logging(args.verbose)

    try:
        # utf-8-sig: una marca BOM inicial no debe quedar pegada a la línea 1
        with open(args.source, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    lines, diags, result = assemble_text(text, filename=args.source, strict=args.strict)

    for d in diags:
        print(d, file=sys.stderr)

    # Con errores no se escribe nada: nunca queda una imagen a medias
    if has_errors(diags):
        return 1

    try:
        write_image(result.words, args.output)
    except OSError as ex:
        print(f"ERROR al escribir {args.output}: {ex}", file=sys.stderr)
        return 3

    logger.info("%d etiquetas: %s", len(result.labels), result.labels)
    print(f"OK: {len(result.words)} instrucciones → {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
