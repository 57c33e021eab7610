'''
tabla formal del subconjunto Thumb (variantes, formas de operandos, codificadores)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Literal, Tuple

from .ast import LineMatch
from . import encoding as enc

Category = Literal["data-processing", "shift", "branch", "other"]

@dataclass(frozen=True)
class Variant:
    """Especificación de una variante de instrucción.

    - name: identificador único ('LSL_I', 'ADD_R', ...)
    - mnemonic: texto tal y como se escribe en el fuente ('LSL', 'ADD', ...)
    - category: 'data-processing', 'shift', 'branch' u 'other'
    - shape: campos de operando que deben estar presentes, ni más ni menos
    - encoder: produce la cadena de bits a partir de la línea reconocida

    Un mismo mnemónico puede dar varias variantes (LSL con registro o con
    inmediato); la forma es lo único que las distingue.
    """
    name: str
    mnemonic: str
    category: Category
    shape: FrozenSet[str]
    encoder: enc.Encoder

    def encode(self, m: LineMatch) -> str:
        return enc.zero_fill(self.encoder(m))

    @property
    def is_branch(self) -> bool:
        return self.category == "branch"

# Formas de operandos
RR   = frozenset({"reg1", "reg2"})                   # Rd, Rm
RRR  = frozenset({"reg1", "reg2", "reg3"})           # Rd, Rn, Rm
RRI  = frozenset({"reg1", "reg2", "imm3"})           # Rd, Rn, #imm
RI   = frozenset({"reg1", "imm2"})                   # Rd, #imm
RMEM = frozenset({"reg1", "base", "offset"})         # Rt, [Rn, #imm]
LBL  = frozenset({"target"})                         # label
CLBL = frozenset({"cond", "target"})                 # <cond> label

CATALOG: List[Variant] = []
_BY_SIGNATURE: Dict[Tuple[str, FrozenSet[str]], Variant] = {}

def _add(name: str, encoder: enc.Encoder, shape: FrozenSet[str], *,
         mnemonic: str | None = None, category: Category = "data-processing") -> None:
    v = Variant(name=name, mnemonic=mnemonic or name, category=category, shape=shape, encoder=encoder)
    key = (v.mnemonic.upper(), v.shape)
    if key in _BY_SIGNATURE:
        raise ValueError(f"Firma duplicada en el catálogo: {v.mnemonic} {sorted(v.shape)}")
    _BY_SIGNATURE[key] = v
    CATALOG.append(v)

# Procesamiento de datos: 010000 op Rm Rdn
_add("AND",   enc.data_processing(0),  RR)
_add("EOR",   enc.data_processing(1),  RR)
_add("LSL_R", enc.data_processing(2),  RR,  mnemonic="LSL", category="shift")
_add("LSR_R", enc.data_processing(3),  RR,  mnemonic="LSR", category="shift")
_add("ASR_R", enc.data_processing(4),  RR,  mnemonic="ASR", category="shift")
_add("ADC",   enc.data_processing(5),  RR)
_add("SBC",   enc.data_processing(6),  RR)
_add("ROR",   enc.data_processing(7),  RR,  category="shift")
_add("TST",   enc.data_processing(8),  RR)
_add("RSB",   enc.data_processing(9),  RRI)   # RSB Rd, Rn, #0
_add("CMP",   enc.data_processing(10), RR)
_add("CMN",   enc.data_processing(11), RR)
_add("ORR",   enc.data_processing(12), RR)
_add("MUL",   enc.data_processing(13), RRR)   # MUL Rdm, Rn, Rdm
_add("BIC",   enc.data_processing(14), RR)
_add("MVN",   enc.data_processing(15), RR)

# Desplazamientos con inmediato: 000 op imm5 Rm Rd
_add("LSL_I", enc.shift_immediate(0), RRI, mnemonic="LSL", category="shift")
_add("LSR_I", enc.shift_immediate(1), RRI, mnemonic="LSR", category="shift")
_add("ASR_I", enc.shift_immediate(2), RRI, mnemonic="ASR", category="shift")

# Suma / resta
_add("ADD_R", enc.add_sub_register(0), RRR, mnemonic="ADD", category="other")
_add("ADD_I", enc.add_immediate(),     RRI, mnemonic="ADD", category="other")
_add("SUB",   enc.add_sub_register(1), RRR, category="other")

# Movimiento y memoria
_add("MOV",   enc.move_immediate(),         RI,   category="other")
_add("STR_I", enc.load_store(0, "imm2"),    RI,   mnemonic="STR", category="other")
_add("STR_R", enc.load_store(0, "offset"),  RMEM, mnemonic="STR", category="other")
_add("LDR_I", enc.load_store(1, "imm2"),    RI,   mnemonic="LDR", category="other")
_add("LDR_R", enc.load_store(1, "offset"),  RMEM, mnemonic="LDR", category="other")

# Saltos (el destino de 8 bits se añade al traducir)
_add("B",  enc.branch(),             LBL,  category="branch")
_add("BC", enc.branch_conditional(), CLBL, mnemonic="B", category="branch")

# Centinela: no está en el catálogo, nunca se selecciona por firma
UNKNOWN_INSTRUCTION = Variant(name="UNKNOWN_INSTRUCTION", mnemonic="UNKNOWN_INSTRUCTION",
                              category="other", shape=frozenset(), encoder=enc.unknown())

def select(mnemonic: str, shape: FrozenSet[str]) -> Variant:
    """Devuelve la variante cuyo (mnemónico, forma) coincide exactamente.

    La forma se compara por igualdad de conjuntos, no por inclusión. Si no
    hay ninguna, devuelve UNKNOWN_INSTRUCTION (se codifica como 0).
    """
    return _BY_SIGNATURE.get((mnemonic.upper(), frozenset(shape)), UNKNOWN_INSTRUCTION)

def mnemonics() -> List[str]:
    """Mnemónicos distintos del catálogo, en orden de definición."""
    out: List[str] = []
    for v in CATALOG:
        if v.mnemonic not in out:
            out.append(v.mnemonic)
    return out

def of_category(category: Category) -> List[Variant]:
    return [v for v in CATALOG if v.category == category]
