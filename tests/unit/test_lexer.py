import pytest
from src.thumb_asm.lexer import match_line, is_blank
from src.thumb_asm.ast import LineMatch

# --- match_line: campos capturados ---
@pytest.mark.parametrize("src, fields", [
    ("MOV R0, #5", {"mnemonic": "MOV", "reg1": "0", "imm2": "5"}),
    ("loop: ADD R1, R1, #1", {"label": "loop", "mnemonic": "ADD", "reg1": "1", "reg2": "1", "imm3": "1"}),
    ("loop ADD R1, R1, #1 ; inc", {"label": "loop", "mnemonic": "ADD", "reg1": "1", "reg2": "1", "imm3": "1"}),
    ("  BEQ end", {"mnemonic": "B", "cond": "EQ", "target": "end"}),
    ("B loop", {"mnemonic": "B", "target": "loop"}),
    ("BIC R1, R2", {"mnemonic": "BIC", "reg1": "1", "reg2": "2"}),
    ("ADDS R0, R1, R2", {"mnemonic": "ADD", "flags": "S", "reg1": "0", "reg2": "1", "reg3": "2"}),
    ("add r0, r1, #0x3", {"mnemonic": "add", "reg1": "0", "reg2": "1", "imm3": "0x3"}),
    ("LDR R2, [R0, #4]", {"mnemonic": "LDR", "reg1": "2", "base": "0", "offset": "4"}),
    ("LDR R2, [R0, R1, LSL #2]", {"mnemonic": "LDR", "reg1": "2", "base": "0", "index": "1", "shift": "LSL", "amount": "2"}),
    ("STR R1, [ R3 ]", {"mnemonic": "STR", "reg1": "1", "base": "3"}),
    ("end:", {"label": "end"}),
    ("end: ; fin del programa", {"label": "end"}),
    ("FOO R1, R2", {"mnemonic": "FOO", "reg1": "1", "reg2": "2"}),
])
def test_match_line_fields(src, fields):
    m = match_line(src)
    assert m is not None
    assert m.present() == fields

# --- líneas sin instrucción ni etiqueta ---
@pytest.mark.parametrize("src", [
    "",
    "    ",
    "; just a comment",
    "   ; indented comment",
    "not an instruction at all!",
    "NOP",
    "end",
])
def test_match_line_none(src):
    assert match_line(src) is None

def test_shape_excludes_label_mnemonic_and_flags():
    m = match_line("top: ADDS R0, R1, R2")
    assert m.shape == frozenset({"reg1", "reg2", "reg3"})
    assert LineMatch(mnemonic="B", cond="EQ", target="x").shape == frozenset({"cond", "target"})

def test_label_is_case_sensitive_as_written():
    assert match_line("Loop: MOV R0, #1").label == "Loop"

@pytest.mark.parametrize("src, expected", [
    ("", True),
    ("  ; c", True),
    ("MOV R0, #1", False),
])
def test_is_blank(src, expected):
    assert is_blank(src) == expected

# --- columna: mnemónico, o etiqueta si va sola ---
@pytest.mark.parametrize("src, col", [
    ("MOV R0, #5", 1),
    ("  loop: MOV R0, #1", 9),
    ("end:", 1),
    ("   end: ; fin", 4),
])
def test_match_line_col(src, col):
    assert match_line(src).col == col

def test_col_not_part_of_equality():
    assert match_line("MOV R0, #5") == match_line("   MOV R0, #5")
