import pytest
from src.thumb_asm.parser import parse
from src.thumb_asm.linker import LabelTable, lookahead, resolve

SRC = """
    B fwd
    MOV R0, #1
    ; comentario
fwd:
    MOV R1, #2
last MOV R2, #3
"""

def test_first_write_wins():
    t = LabelTable()
    assert t.record("loop", 3)
    assert not t.record("loop", 7)
    assert t.get("loop") == 3
    assert "loop" in t and "Loop" not in t
    assert len(t) == 1
    assert t.as_dict() == {"loop": 3}

def test_negative_index_rejected():
    with pytest.raises(ValueError):
        LabelTable().record("x", -1)

def test_lookahead_label_only_line_binds_next_instruction():
    lines, _ = parse(SRC)
    # 'B fwd' está en lines[1] con índice de instrucción 0
    assert lookahead(lines, 2, 0, "fwd") == 2

def test_lookahead_label_on_instruction_line():
    lines, _ = parse(SRC)
    assert lookahead(lines, 2, 0, "last") == 3

def test_lookahead_missing_label():
    lines, _ = parse(SRC)
    assert lookahead(lines, 2, 0, "nowhere") is None
    # sólo mira hacia delante
    assert lookahead(lines, 5, 2, "fwd") is None

def test_resolve_memoizes_lookahead():
    lines, _ = parse(SRC)
    t = LabelTable()
    assert resolve(t, "fwd", lines, 2, 0) == 2
    assert t.get("fwd") == 2
    t2 = LabelTable()
    assert resolve(t2, "nowhere", lines, 2, 0) is None
    assert "nowhere" not in t2
