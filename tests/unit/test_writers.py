from src.thumb_asm.encoding import Encoded
from src.thumb_asm.writers import HEADER, to_hex_tokens, to_image, write_image

WORDS = [
    Encoded(word=0x2005, index=0, line=1, mnemonic="MOV", variant="MOV"),
    Encoded(word=0, index=1, line=2, mnemonic="FOO", variant="UNKNOWN_INSTRUCTION"),
    Encoded(word=0xDE00, index=2, line=3, mnemonic="B", variant="B"),
]

def test_tokens_and_image():
    assert HEADER == "v2.0 raw\n"
    assert to_hex_tokens(WORDS) == ["2005", "0", "de00"]
    assert to_image(WORDS) == "v2.0 raw\n2005 0 de00 "
    assert to_image([]) == HEADER

def test_write_image(tmp_path):
    out = tmp_path / "rom.ini"
    write_image(WORDS, str(out))
    assert out.read_text(encoding="utf-8") == "v2.0 raw\n2005 0 de00 "
