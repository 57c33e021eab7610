from __future__ import annotations
import re
from typing import Iterable, Optional

from .ast import LineMatch
from .conditions import names as condition_names
from .isa import mnemonics, of_category

def _alternation(words: Iterable[str]) -> str:
    # longest first so that BIC wins over B, LSR over LS, ...
    uniq = sorted(set(words), key=lambda w: (-len(w), w))
    return "|".join(re.escape(w) for w in uniq)

NUMBER = r"(?:0x[0-9a-f]+|\d+)"

# Sub-patterns, in the order they are concatenated
LABEL       = r"^\s*(?:(?P<label>[A-Za-z_]\w*)(?:\s*:|\s+(?=[A-Za-z_])))?\s*"
MNEMONIC    = r"(?P<mnemonic>" + _alternation(mnemonics()) + r"|[A-Za-z_]\w*)"
FLAGS       = r"(?P<flags>S)?"
CONDITION   = r"(?P<cond>" + _alternation(condition_names()) + r")?"
SHIFT       = r"(?P<shift>" + _alternation(v.mnemonic for v in of_category("shift")) + r")"
OPERAND_1   = r"\s+(?:R(?P<reg1>\d+)(?!\w)|(?P<target>[A-Za-z_]\w*))"
ADDRESSING  = (r"\[\s*R(?P<base>\d+)\s*"
               r"(?:,\s*(?:R(?P<index>\d+)|#(?P<offset>" + NUMBER + r"))\s*"
               r"(?:,\s*" + SHIFT + r"(?:\s+#(?P<amount>" + NUMBER + r"))?\s*)?)?\]")
OPERAND_2   = r"(?:\s*,\s*(?:R(?P<reg2>\d+)(?!\w)|#(?P<imm2>" + NUMBER + r")|" + ADDRESSING + r"))?"
OPERAND_3   = r"(?:\s*,\s*(?:R(?P<reg3>\d+)(?!\w)|#(?P<imm3>" + NUMBER + r")))?"
COMMENT     = r"\s*(?:;.*)?$"

BODY = MNEMONIC + FLAGS + CONDITION + OPERAND_1 + OPERAND_2 + OPERAND_3

# One full-line, case-insensitive pattern. Group order follows ast.LineMatch:
#
#   loop   ADD   R0,  R1,  #3          BEQ   end         LDR  R2, [R0, #4]
#   label  mnem  reg1 reg2 imm3        mnem cond target   mnem reg1 base offset
PATTERN = re.compile(LABEL + r"(?:" + BODY + r")?" + COMMENT, re.IGNORECASE)

def is_blank(line: str) -> bool:
    """True for empty, whitespace-only or comment-only lines."""
    s = line.strip()
    return not s or s.startswith(";")

def match_line(line: str) -> Optional[LineMatch]:
    """Apply PATTERN to one line.

    Returns None when the line holds neither a label nor an instruction
    (blank, comment-only or not recognised at all).
    """
    m = PATTERN.match(line)
    if not m:
        return None
    groups = m.groupdict()
    if groups["label"] is None and groups["mnemonic"] is None:
        return None
    anchor = "mnemonic" if groups["mnemonic"] is not None else "label"
    return LineMatch(**groups, col=m.start(anchor) + 1)
