from src.thumb_asm.diagnostics import error, warning, has_errors

def test_error_str():
    d = error("Etiqueta no definida: fin", line=12, file="prog.s", hint="defina 'fin:'")
    s = str(d)
    assert "prog.s:12:" in s
    assert "ERROR: Etiqueta no definida: fin" in s
    assert "(pista: defina 'fin:')" in s

def test_warning_without_location():
    assert str(warning("Etiqueta redefinida: x")) == "ADVERTENCIA: Etiqueta redefinida: x"

def test_has_errors():
    assert not has_errors([warning("a")])
    assert has_errors([warning("a"), error("b", line=1)])

def test_location_with_column():
    d = error("Etiqueta no definida: fin", line=3, col=5, file="prog.s")
    assert d.location == "prog.s:3:5"
    assert str(d) == "prog.s:3:5: ERROR: Etiqueta no definida: fin"

def test_column_needs_line():
    assert warning("x", col=4, file="prog.s").location == "prog.s"
