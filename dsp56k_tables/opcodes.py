"""The DSP56300 opcode table: templates, fixed-bit masks and lookup."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from .fields import OPCODE_BITS, Field, FieldInfo, field_info


class ExtensionWordType(Enum):
    """What kind of extension word, if any, follows an opcode."""

    NONE = auto()
    ImmediateData = auto()
    PCRelativeAddressExt = auto()
    EffectiveAddress = auto()
    AbsoluteAddressExt = auto()
    EAandID = auto()


_E = ExtensionWordType

# Note: all 'o' bits are '0' in the docs, but setting them to 1 still yields
# valid instructions according to the reference simulator's disassembler.
_TABLE: Tuple[Tuple[str, str, str, ExtensionWordType], ...] = (
    ("Abs", "????????????????0010d110", "ABS D", _E.NONE),
    ("ADC", "????????????????001Jd001", "ADC S,D", _E.NONE),
    ("Add_SD", "????????????????0JJJd000", "ADD S,D", _E.NONE),
    ("Add_xx", "0000000101iiiiii10ood000", "ADD #xx,D", _E.NONE),
    ("Add_xxxx", "0000000101ooooo011ood000", "ADD #xxxx,D", _E.ImmediateData),
    ("Addl", "????????????????0001d010", "ADDL S,D", _E.NONE),
    ("Addr", "????????????????0000d010", "ADDR S,D", _E.NONE),
    ("And_SD", "????????????????01JJd110", "AND S,D", _E.NONE),
    ("And_xx", "0000000101iiiiii10ood110", "AND #xx,D", _E.NONE),
    ("And_xxxx", "0000000101ooooo011ood110", "AND #xxxx,D", _E.ImmediateData),
    ("Andi", "00000000iiiiiiii101110EE", "AND(I) #xx,D", _E.NONE),
    ("Asl_D", "????????????????0011d010", "ASL D", _E.NONE),
    ("Asl_ii", "0000110000011101SiiiiiiD", "ASL #ii,S2,D", _E.NONE),
    ("Asl_S1S2D", "0000110000011110010SsssD", "ASL S1,S2,D", _E.NONE),
    ("Asr_D", "????????????????0010d010", "ASR D", _E.NONE),
    ("Asr_ii", "0000110000011100SiiiiiiD", "ASR #ii,S2,D", _E.NONE),
    ("Asr_S1S2D", "0000110000011110011SsssD", "ASR S1,S2,D", _E.NONE),
    ("Bcc_xxxx", "00001101000100000100CCCC", "Bcc xxxx", _E.PCRelativeAddressExt),
    ("Bcc_xxx", "00000101CCCC01aaaa0aaaaa", "Bcc xxx", _E.NONE),
    ("Bcc_Rn", "0000110100011RRR0100CCCC", "Bcc Rn", _E.NONE),
    ("Bchg_ea", "0000101101MMMRRR0S0bbbbb", "BCHG #n,[X or Y]:ea", _E.EffectiveAddress),
    ("Bchg_aa", "0000101100aaaaaa0S0bbbbb", "BCHG #n,[X or Y]:aa", _E.NONE),
    ("Bchg_pp", "0000101110pppppp0S0bbbbb", "BCHG #n,[X or Y]:pp", _E.NONE),
    ("Bchg_qq", "0000000101qqqqqq0S0bbbbb", "BCHG #n,[X or Y]:qq", _E.NONE),
    ("Bchg_D", "0000101111DDDDDD010bbbbb", "BCHG #n,D", _E.NONE),
    ("Bclr_ea", "0000101001MMMRRR0S0bbbbb", "BCLR #n,[X or Y]:ea", _E.EffectiveAddress),
    ("Bclr_aa", "0000101000aaaaaa0S0bbbbb", "BCLR #n,[X or Y]:aa", _E.NONE),
    ("Bclr_pp", "0000101010pppppp0S0bbbbb", "BCLR #n,[X or Y]:pp", _E.NONE),
    ("Bclr_qq", "0000000100qqqqqq0S0bbbbb", "BCLR #n,[X or Y]:qq", _E.NONE),
    ("Bclr_D", "0000101011DDDDDD010bbbbb", "BCLR #n,D", _E.NONE),
    ("Bra_xxxx", "000011010001000011000000", "BRA xxxx", _E.PCRelativeAddressExt),
    ("Bra_xxx", "00000101000011aaaa0aaaaa", "BRA xxx", _E.NONE),
    ("Bra_Rn", "0000110100011RRR11000000", "BRA Rn", _E.NONE),
    ("Brclr_ea", "0000110010MMMRRR0S0bbbbb", "BRCLR #n,[X or Y]:ea,xxxx", _E.PCRelativeAddressExt),
    ("Brclr_aa", "0000110010aaaaaa1S0bbbbb", "BRCLR #n,[X or Y]:aa,xxxx", _E.PCRelativeAddressExt),
    ("Brclr_pp", "0000110011pppppp0S0bbbbb", "BRCLR #n,[X or Y]:pp,xxxx", _E.PCRelativeAddressExt),
    ("Brclr_qq", "0000010010qqqqqq0S0bbbbb", "BRCLR #n,[X or Y]:qq,xxxx", _E.PCRelativeAddressExt),
    ("Brclr_S", "0000110011DDDDDD100bbbbb", "BRCLR #n,S,xxxx", _E.PCRelativeAddressExt),
    ("BRKcc", "00000000000000100001CCCC", "BRKcc", _E.NONE),
    ("Brset_ea", "0000110010MMMRRR0S1bbbbb", "BRSET #n,[X or Y]:ea,xxxx", _E.PCRelativeAddressExt),
    ("Brset_aa", "0000110010aaaaaa1S1bbbbb", "BRSET #n,[X or Y]:aa,xxxx", _E.PCRelativeAddressExt),
    ("Brset_pp", "0000110011pppppp0S1bbbbb", "BRSET #n,[X or Y]:pp,xxxx", _E.PCRelativeAddressExt),
    ("Brset_qq", "0000010010qqqqqq0S1bbbbb", "BRSET #n,[X or Y]:qq,xxxx", _E.PCRelativeAddressExt),
    ("Brset_S", "0000110011DDDDDD101bbbbb", "BRSET #n,S,xxxx", _E.PCRelativeAddressExt),
    ("BScc_xxxx", "00001101000100000000CCCC", "BScc xxxx", _E.PCRelativeAddressExt),
    ("BScc_xxx", "00000101CCCC00aaaa0aaaaa", "BScc xxx", _E.NONE),
    ("BScc_Rn", "0000110100011RRR0000CCCC", "BScc Rn", _E.NONE),
    ("Bsclr_ea", "0000110110MMMRRR0S0bbbbb", "BSCLR #n,[X or Y]:ea,xxxx", _E.PCRelativeAddressExt),
    ("Bsclr_aa", "0000110110aaaaaa1S0bbbbb", "BSCLR #n,[X or Y]:aa,xxxx", _E.PCRelativeAddressExt),
    ("Bsclr_pp", "0000110111pppppp0S0bbbbb", "BSCLR #n,[X or Y]:pp,xxxx", _E.PCRelativeAddressExt),
    ("Bsclr_qq", "0000010010qqqqqq1S0bbbbb", "BSCLR #n,[X or Y]:qq,xxxx", _E.PCRelativeAddressExt),
    ("Bsclr_S", "0000110111DDDDDD100bbbbb", "BSCLR #n,S,xxxx", _E.PCRelativeAddressExt),
    ("Bset_ea", "0000101001MMMRRR0S1bbbbb", "BSET #n,[X or Y]:ea", _E.EffectiveAddress),
    ("Bset_aa", "0000101000aaaaaa0S1bbbbb", "BSET #n,[X or Y]:aa", _E.NONE),
    ("Bset_pp", "0000101010pppppp0S1bbbbb", "BSET #n,[X or Y]:pp", _E.NONE),
    ("Bset_qq", "0000000100qqqqqq0S1bbbbb", "BSET #n,[X or Y]:qq", _E.NONE),
    ("Bset_D", "0000101011DDDDDD011bbbbb", "BSET #n,D", _E.NONE),
    ("Bsr_xxxx", "000011010001000010000000", "BSR xxxx", _E.PCRelativeAddressExt),
    ("Bsr_xxx", "00000101000010aaaa0aaaaa", "BSR xxx", _E.NONE),
    ("Bsr_Rn", "0000110100011RRR10000000", "BSR Rn", _E.NONE),
    ("Bsset_ea", "0000110110MMMRRR0S1bbbbb", "BSSET #n,[X or Y]:ea,xxxx", _E.PCRelativeAddressExt),
    ("Bsset_aa", "0000110110aaaaaa1S1bbbbb", "BSSET #n,[X or Y]:aa,xxxx", _E.PCRelativeAddressExt),
    ("Bsset_pp", "0000110111pppppp0S1bbbbb", "BSSET #n,[X or Y]:pp,xxxx", _E.PCRelativeAddressExt),
    ("Bsset_qq", "0000010010qqqqqq1S1bbbbb", "BSSET #n,[X or Y]:qq,xxxx", _E.PCRelativeAddressExt),
    ("Bsset_S", "0000110111DDDDDD101bbbbb", "BSSET #n,S,xxxx", _E.PCRelativeAddressExt),
    ("Btst_ea", "0000101101MMMRRR0S1bbbbb", "BTST #n,[X or Y]:ea", _E.EffectiveAddress),
    ("Btst_aa", "0000101100aaaaaa0S1bbbbb", "BTST #n,[X or Y]:aa", _E.NONE),
    ("Btst_pp", "0000101110pppppp0S1bbbbb", "BTST #n,[X or Y]:pp", _E.NONE),
    ("Btst_qq", "0000000101qqqqqq0S1bbbbb", "BTST #n,[X or Y]:qq", _E.NONE),
    ("Btst_D", "0000101111DDDDDD011bbbbb", "BTST #n,D", _E.NONE),
    ("Clb", "0000110000011110000000SD", "CLB S,D", _E.NONE),
    ("Clr", "????????????????0001d011", "CLR D", _E.NONE),
    ("Cmp_S1S2", "????????????????0JJJd101", "CMP S1, S2", _E.NONE),
    ("Cmp_xxS2", "0000000101iiiiii10ood101", "CMP #xx, S2", _E.NONE),
    ("Cmp_xxxxS2", "0000000101ooooo011ood101", "CMP #xxxx,S2", _E.ImmediateData),
    ("Cmpm_S1S2", "????????????????0JJJd111", "CMPM S1, S2", _E.NONE),
    ("Cmpu_S1S2", "00001100000111111111gggd", "CMPU S1, S2", _E.NONE),
    ("Debug", "000000000000001000000000", "DEBUG", _E.NONE),
    ("Debugcc", "00000000000000110000CCCC", "DEBUGcc", _E.NONE),
    ("Dec", "00000000000000000000101d", "DEC D", _E.NONE),
    ("Div", "0000000110oooooo01JJdooo", "DIV S,D", _E.NONE),
    ("Dmac", "000000010010010s1SdkQQQQ", "DMAC (+/-)S1,S2,D", _E.NONE),
    ("Do_ea", "0000011001MMMRRR0S000000", "DO [X or Y]:ea, expr", _E.AbsoluteAddressExt),
    ("Do_aa", "0000011000aaaaaa0S000000", "DO [X or Y]:aa, expr", _E.AbsoluteAddressExt),
    ("Do_xxx", "00000110iiiiiiii1000hhhh", "DO #xxx, expr", _E.AbsoluteAddressExt),
    ("Do_S", "0000011011DDDDDD00000000", "DO S, expr", _E.AbsoluteAddressExt),
    ("DoForever", "000000000000001000000011", "DO FOREVER", _E.AbsoluteAddressExt),
    ("Dor_ea", "0000011001MMMRRR0S010000", "DOR [X or Y]:ea,label", _E.PCRelativeAddressExt),
    ("Dor_aa", "0000011000aaaaaa0S010000", "DOR [X or Y]:aa,label", _E.PCRelativeAddressExt),
    ("Dor_xxx", "00000110iiiiiiii1001hhhh", "DOR #xxx, label", _E.PCRelativeAddressExt),
    ("Dor_S", "0000011011DDDDDD00010000", "DOR S, label", _E.PCRelativeAddressExt),
    ("DorForever", "000000000000001000000010", "DOR FOREVER", _E.PCRelativeAddressExt),
    ("Enddo", "00000000000000001o0o1100", "ENDDO", _E.NONE),
    ("Eor_SD", "????????????????01JJd011", "EOR S,D", _E.NONE),
    ("Eor_xx", "0000000101iiiiii10ood011", "EOR #xx,D", _E.NONE),
    ("Eor_xxxx", "0000000101ooooo011ood011", "EOR #xxxx,D", _E.ImmediateData),
    ("Extract_S1S2", "0000110000011010000sSSSD", "EXTRACT S1,S2,D", _E.NONE),
    ("Extract_CoS2", "0000110000011000000s000D", "EXTRACT #CO,S2,D", _E.ImmediateData),
    ("Extractu_S1S2", "0000110000011010100sSSSD", "EXTRACTU S1,S2,D", _E.NONE),
    ("Extractu_CoS2", "0000110000011000100s000D", "EXTRACTU #CO,S2,D", _E.ImmediateData),
    ("Ifcc", "001000000010CCCC????????", "IFcc", _E.NONE),
    ("Ifcc_U", "001000000011CCCC????????", "IFcc.U", _E.NONE),
    ("Illegal", "000000000000000000000101", "ILLEGAL", _E.NONE),
    ("Inc", "00000000000000000000100d", "INC D", _E.NONE),
    ("Insert_S1S2", "00001100000110110qqqSSSD", "INSERT S1,S2,D", _E.NONE),
    ("Insert_CoS2", "00001100000110010qqq000D", "INSERT #CO,S2,D", _E.ImmediateData),
    ("Jcc_xxx", "00001110CCCCaaaaaaaaaaaa", "Jcc xxx", _E.NONE),
    ("Jcc_ea", "0000101011MMMRRR1010CCCC", "Jcc ea", _E.EffectiveAddress),
    ("Jclr_ea", "0000101001MMMRRR1S0bbbbb", "JCLR #n,[X or Y]:ea,xxxx", _E.AbsoluteAddressExt),
    ("Jclr_aa", "0000101000aaaaaa1S0bbbbb", "JCLR #n,[X or Y]:aa,xxxx", _E.AbsoluteAddressExt),
    ("Jclr_pp", "0000101010pppppp1S0bbbbb", "JCLR #n,[X or Y]:pp,xxxx", _E.AbsoluteAddressExt),
    ("Jclr_qq", "0000000110qqqqqq1S0bbbbb", "JCLR #n,[X or Y]:qq,xxxx", _E.AbsoluteAddressExt),
    ("Jclr_S", "0000101011DDDDDD000bbbbb", "JCLR #n,S,xxxx", _E.AbsoluteAddressExt),
    ("Jmp_ea", "0000101011MMMRRR10000000", "JMP ea", _E.EffectiveAddress),
    ("Jmp_xxx", "000011000000aaaaaaaaaaaa", "JMP xxx", _E.NONE),
    ("Jscc_xxx", "00001111CCCCaaaaaaaaaaaa", "JScc xxx", _E.NONE),
    ("Jscc_ea", "0000101111MMMRRR1010CCCC", "JScc ea", _E.EffectiveAddress),
    ("Jsclr_ea", "0000101101MMMRRR1S0bbbbb", "JSCLR #n,[X or Y]:ea,xxxx", _E.AbsoluteAddressExt),
    ("Jsclr_aa", "0000101100aaaaaa1S0bbbbb", "JSCLR #n,[X or Y]:aa,xxxx", _E.AbsoluteAddressExt),
    ("Jsclr_pp", "0000101110pppppp1S0bbbbb", "JSCLR #n,[X or Y]:pp,xxxx", _E.AbsoluteAddressExt),
    ("Jsclr_qq", "0000000111qqqqqq1S0bbbbb", "JSCLR #n,[X or Y]:qq,xxxx", _E.AbsoluteAddressExt),
    ("Jsclr_S", "0000101111DDDDDD000bbbbb", "JSCLR #n,S,xxxx", _E.AbsoluteAddressExt),
    ("Jset_ea", "0000101001MMMRRR1S1bbbbb", "JSET #n,[X or Y]:ea,xxxx", _E.AbsoluteAddressExt),
    ("Jset_aa", "0000101000aaaaaa1S1bbbbb", "JSET #n,[X or Y]:aa,xxxx", _E.AbsoluteAddressExt),
    ("Jset_pp", "0000101010pppppp1S1bbbbb", "JSET #n,[X or Y]:pp,xxxx", _E.AbsoluteAddressExt),
    ("Jset_qq", "0000000110qqqqqq1S1bbbbb", "JSET #n,[X or Y]:qq,xxxx", _E.AbsoluteAddressExt),
    ("Jset_S", "0000101011DDDDDD001bbbbb", "JSET #n,S,xxxx", _E.AbsoluteAddressExt),
    ("Jsr_ea", "0000101111MMMRRR10000000", "JSR ea", _E.EffectiveAddress),
    ("Jsr_xxx", "000011010000aaaaaaaaaaaa", "JSR xxx", _E.NONE),
    ("Jsset_ea", "0000101101MMMRRR1S1bbbbb", "JSSET #n,[X or Y]:ea,xxxx", _E.AbsoluteAddressExt),
    ("Jsset_aa", "0000101100aaaaaa1S1bbbbb", "JSSET #n,[X or Y]:aa,xxxx", _E.AbsoluteAddressExt),
    ("Jsset_pp", "0000101110pppppp1S1bbbbb", "JSSET #n,[X or Y]:pp,xxxx", _E.AbsoluteAddressExt),
    ("Jsset_qq", "0000000111qqqqqq1S1bbbbb", "JSSET #n,[X or Y]:qq,xxxx", _E.AbsoluteAddressExt),
    ("Jsset_S", "0000101111DDDDDD001bbbbb", "JSSET #n,S,xxxx", _E.AbsoluteAddressExt),
    ("Lra_Rn", "0000010011000RRR000ddddd", "LRA Rn,D", _E.NONE),
    ("Lra_xxxx", "0000010001oooooo010ddddd", "LRA xxxx,D", _E.PCRelativeAddressExt),
    ("Lsl_D", "????????????????0011D011", "LSL D", _E.NONE),
    ("Lsl_ii", "000011000001111010iiiiiD", "LSL #ii,D", _E.NONE),
    ("Lsl_SD", "00001100000111100001sssD", "LSL S,D", _E.NONE),
    ("Lsr_D", "????????????????0010D011", "LSR D", _E.NONE),
    ("Lsr_ii", "000011000001111011iiiiiD", "LSR #ii,D", _E.NONE),
    ("Lsr_SD", "00001100000111100011sssD", "LSR S,D", _E.NONE),
    ("Lua_ea", "00000100010MMRRR000ddddd", "LUA/LEA ea,D", _E.NONE),
    ("Lua_Rn", "0000010000aaaRRRaaaadddd", "LUA/LEA (Rn + aa),D", _E.NONE),
    ("Mac_S1S2", "????????????????1QQQdk10", "MAC (+/-)S1,S2,D / MAC (+/-)S2,S1,D", _E.NONE),
    ("Mac_S", "00000001000sssss11QQdk10", "MAC (+/-)S,#n,D", _E.NONE),
    ("Maci_xxxx", "0000000101ooooo111qqdk10", "MACI (+/-)#xxxx,S,D", _E.ImmediateData),
    ("Macsu", "00000001001001101sdkQQQQ", "MACsu (+/-)S1,S2,D / MACuu (+/-)S1,S2,D", _E.NONE),
    ("Macr_S1S2", "????????????????1QQQdk11", "MACR (+/-)S1,S2,D / MACR (+/-)S2,S1,D", _E.NONE),
    ("Macr_S", "00000001000sssss11QQdk11", "MACR (+/-)S,#n,D", _E.NONE),
    ("Macri_xxxx", "0000000101ooooo111qqdk11", "MACRI (+/-)#xxxx,S,D", _E.ImmediateData),
    ("Max", "????????????????00011101", "MAX A, B", _E.NONE),
    ("Maxm", "????????????????00010101", "MAXM A, B", _E.NONE),
    ("Merge", "00001100000110111000SSSD", "MERGE S,D", _E.NONE),
    ("Move_Nop", "0010000000000000????????", "MOVE S,D", _E.NONE),
    ("Move_xx", "001dddddiiiiiiii????????", "(...) #xx,D", _E.NONE),
    ("Mover", "001000eeeeeddddd????????", "(...) S,D", _E.NONE),
    ("Move_ea", "00100000010MMRRR????????", "(...) ea", _E.NONE),
    ("Movex_ea", "01dd0dddW1MMMRRR????????",
     "(...) X:ea,D / (...) S,X:ea / (...) #xxxxxx,D", _E.EAandID),
    ("Movex_aa", "01dd0dddW0aaaaaa????????", "(...) X:aa,D / (...) S,X:aa", _E.NONE),
    ("Movex_Rnxxxx", "0000101001110RRR1WDDDDDD",
     "MOVE X:(Rn + xxxx),D / MOVE S,X:(Rn + xxxx)", _E.PCRelativeAddressExt),
    ("Movex_Rnxxx", "0000001aaaaaaRRR1a0WDDDD",
     "MOVE X:(Rn + xxx),D / MOVE S,X:(Rn + xxx)", _E.NONE),
    ("Movexr_ea", "0001ffdFW0MMMRRR????????",
     "(...) X:ea,D1 S2,D2 / (...) S1,X:ea S2, D2 / (...) #xxxx,D1 S2,D2", _E.EAandID),
    ("Movexr_A", "0000100d00MMMRRR????????",
     "(...) A -> X:ea X0 -> A / (...) B -> X:ea X0 -> B", _E.EAandID),
    ("Movey_ea", "01dd1dddW1MMMRRR????????",
     "(...) Y:ea,D / (...) S,Y:ea / (...) #xxxx,D", _E.EAandID),
    ("Movey_aa", "01dd1dddW0aaaaaa????????", "(...) Y:aa,D / (...) S,Y:aa", _E.NONE),
    ("Movey_Rnxxxx", "0000101101110RRR1WDDDDDD",
     "MOVE Y:(Rn + xxxx),D / MOVE D,Y:(Rn + xxxx)", _E.PCRelativeAddressExt),
    ("Movey_Rnxxx", "0000001aaaaaaRRR1a1WDDDD",
     "MOVE Y:(Rn + xxx),D / MOVE D,Y:(Rn + xxx)", _E.NONE),
    ("Moveyr_ea", "0001deffW1MMMRRR????????",
     "(...) S1,D1 Y:ea,D2 / (...) S1,D1 S2,Y:ea / (...) S1,D1 #xxxx,D2", _E.EAandID),
    ("Moveyr_A", "0000100d10MMMRRR????????",
     "(...) Y0 -> A A -> Y:ea / (...) Y0 -> B B -> Y:ea", _E.EAandID),
    ("Movel_ea", "0100L0LLW1MMMRRR????????", "(...) L:ea,D / (...) S,L:ea", _E.EAandID),
    ("Movel_aa", "0100L0LLW0aaaaaa????????", "(...) L:aa,D / (...) S,L:aa", _E.NONE),
    ("Movexy", "1wmmeeffWrrMMRRR????????",
     "(...) X:<eax>,D1 Y:<eay>,D2 / (...) X:<eax>,D1 S2,Y:<eay> / "
     "(...) S1,X:<eax> Y:<eay>,D2 / (...) S1,X:<eax> S2,Y:<eay>", _E.NONE),
    ("Movec_ea", "00000101W1MMMRRR0S1DDDDD",
     "MOVE(C) [X or Y]:ea,D1 / MOVE(C) S1,[X or Y]:ea / MOVE(C) #xxxx,D1", _E.EAandID),
    ("Movec_aa", "00000101W0aaaaaa0S1DDDDD",
     "MOVE(C) [X or Y]:aa,D1 / MOVE(C) S1,[X or Y]:aa", _E.NONE),
    ("Movec_S1D2", "00000100W1eeeeee1o1DDDDD", "MOVE(C) S1,D2 / MOVE(C) S2,D1", _E.NONE),
    ("Movec_xx", "00000101iiiiiiii101DDDDD", "MOVE(C) #xx,D1", _E.NONE),
    ("Movem_ea", "00000111W1MMMRRR10dddddd", "MOVE(M) S,P:ea / MOVE(M) P:ea,D", _E.EffectiveAddress),
    ("Movem_aa", "00000111W0aaaaaa00dddddd", "MOVE(M) S,P:aa / MOVE(M) P:aa,D", _E.NONE),
    ("Movep_ppea", "0000100sW1MMMRRR1Spppppp",
     "MOVEP [X or Y]:pp,[X or Y]:ea / MOVEP [X or Y]:ea,[X or Y]:pp", _E.EAandID),
    ("Movep_Xqqea", "00000111W1MMMRRR0Sqqqqqq",
     "MOVEP X:qq,[X or Y]:ea / MOVEP [X or Y]:ea,X:qq", _E.EAandID),
    ("Movep_Yqqea", "00000111W0MMMRRR1Sqqqqqq",
     "MOVEP Y:qq,[X or Y]:ea / MOVEP [X or Y]:ea,Y:qq", _E.EAandID),
    ("Movep_eapp", "0000100sW1MMMRRR01pppppp",
     "MOVEP P:ea,[X or Y]:pp / MOVEP [X or Y]:pp,P:ea", _E.EAandID),
    ("Movep_eaqq", "000000001WMMMRRR0Sqqqqqq",
     "MOVEP P:ea,[X or Y]:qq / MOVEP [X or Y]:qq,P:ea", _E.EAandID),
    ("Movep_Spp", "0000100sW1dddddd00pppppp",
     "MOVEP S,[X or Y]:pp / MOVEP [X or Y]:pp,D", _E.NONE),
    ("Movep_SXqq", "00000100W1dddddd1q0qqqqq", "MOVEP S,X:qq / MOVEP X:qq,D", _E.NONE),
    ("Movep_SYqq", "00000100W1dddddd0q1qqqqq", "MOVEP S,Y:qq / MOVEP Y:qq,D", _E.NONE),
    ("Mpy_S1S2D", "????????????????1QQQdk00", "MPY (+/-)S1,S2,D / MPY (+/-)S2,S1,D", _E.NONE),
    ("Mpy_SD", "00000001000sssss11QQdk00", "MPY (+/-)S,#n,D", _E.NONE),
    ("Mpy_su", "00000001001001111sdkQQQQ", "MPY su (+/-)S1,S2,D / MPY uu (+/-)S1,S2,D", _E.NONE),
    ("Mpyi", "0000000101ooooo111qqdk00", "MPYI (+/-)#xxxx,S,D", _E.ImmediateData),
    ("Mpyr_S1S2D", "????????????????1QQQdk01", "MPYR (+/-)S1,S2,D / MPYR (+/-)S2,S1,D", _E.NONE),
    ("Mpyr_SD", "00000001000sssss11QQdk01", "MPYR (+/-)S,#n,D", _E.NONE),
    ("Mpyri", "0000000101ooooo111qqdk01", "MPYRI (+/-)#xxxx,S,D", _E.ImmediateData),
    ("Neg", "????????????????0011d110", "NEG D", _E.NONE),
    ("Nop", "000000000000000000000000", "NOP", _E.NONE),
    ("Norm", "0000000111011RRR0001d101", "NORM Rn,D", _E.NONE),
    ("Normf", "00001100000111100010sssD", "NORMF S,D", _E.NONE),
    ("Not", "????????????????0001d111", "NOT D", _E.NONE),
    ("Or_SD", "????????????????01JJd010", "OR S,D", _E.NONE),
    ("Or_xx", "0000000101iiiiii10ood010", "OR #xx,D", _E.NONE),
    ("Or_xxxx", "0000000101ooooo011ood010", "OR #xxxx,D", _E.ImmediateData),
    ("Ori", "00000000iiiiiiii111110EE", "OR(I) #xx,D", _E.NONE),
    ("Pflush", "000000000000000000000011", "PFLUSH", _E.NONE),
    ("Pflushun", "000000000000000000000001", "PFLUSHUN", _E.NONE),
    ("Pfree", "000000000000000000000010", "PFREE", _E.NONE),
    ("Plock", "0000101111MMMRRR10000001", "PLOCK ea", _E.EAandID),
    ("Plockr", "000000000000000000001111", "PLOCKR xxxx", _E.PCRelativeAddressExt),
    ("Punlock", "0000101011MMMRRR10000001", "PUNLOCK ea", _E.EAandID),
    ("Punlockr", "000000000000000000001110", "PUNLOCKR xxxx", _E.PCRelativeAddressExt),
    ("Rep_ea", "0000011001MMMRRR0S100000", "REP [X or Y]:ea", _E.NONE),
    ("Rep_aa", "0000011000aaaaaa0S100000", "REP [X or Y]:aa", _E.NONE),
    ("Rep_xxx", "00000110iiiiiiii1o1ohhhh", "REP #xxx", _E.NONE),
    ("Rep_S", "0000011011dddddd00100000", "REP S", _E.NONE),
    ("Reset", "00000000000000001o0o0100", "RESET", _E.NONE),
    ("Rnd", "????????????????0001d001", "RND D", _E.NONE),
    ("Rol", "????????????????0011d111", "ROL D", _E.NONE),
    ("Ror", "????????????????0010d111", "ROR D", _E.NONE),
    ("Rti", "000000000000000000000100", "RTI", _E.NONE),
    ("Rts", "000000000000000000001100", "RTS", _E.NONE),
    ("Sbc", "????????????????001Jd101", "SBC S,D", _E.NONE),
    ("Stop", "00000000000000001o0o0111", "STOP", _E.NONE),
    ("Sub_SD", "????????????????0JJJd100", "SUB S,D", _E.NONE),
    ("Sub_xx", "0000000101iiiiii10ood100", "SUB #xx,D", _E.NONE),
    ("Sub_xxxx", "0000000101ooooo011ood100", "SUB #xxxx,D", _E.ImmediateData),
    ("Subl", "????????????????0001d110", "SUBL S,D", _E.NONE),
    ("subr", "????????????????0000d110", "SUBR S,D", _E.NONE),
    ("Tcc_S1D1", "00000010CCCC0ooo0JJJdooo", "Tcc S1,D1", _E.NONE),
    ("Tcc_S1D1S2D2", "00000011CCCCottt0JJJdTTT", "Tcc S1,D1 S2,D2", _E.NONE),
    ("Tcc_S2D2", "00000010CCCC1ttt0ooooTTT", "Tcc S2,D2", _E.NONE),
    ("Tfr", "????????????????0JJJd001", "TFR S,D", _E.NONE),
    ("Trap", "000000000000000000000110", "TRAP", _E.NONE),
    ("Trapcc", "00000000000000000001CCCC", "TRAPcc", _E.NONE),
    ("Tst", "????????????????0000d011", "TST S", _E.NONE),
    ("Vsl", "0000101S11MMMRRR110i0000", "VSL S,i,L:ea", _E.NONE),
    ("Wait", "00000000000000001o0o0110", "WAIT", _E.NONE),
    # placeholders used by the decoder cache, never decoded from a word
    ("ResolveCache", "000000000000000000000000", "ResolveCache", _E.NONE),
    ("Parallel", "000000000000000000000000", "Parallel", _E.NONE),
)

Instruction = Enum("Instruction", [name for name, _, _, _ in _TABLE], module=__name__)
Instruction.__doc__ = "Every DSP56300 instruction form known to the opcode table."

_WORD_MASK = (1 << OPCODE_BITS) - 1


def create_mask(opcode: str, c: str, c2: Optional[str] = None) -> int:
    """Return a mask with a bit set wherever the template holds ``c`` or ``c2``.

    The leftmost of the 24 template characters is bit 23.
    """
    if len(opcode) < OPCODE_BITS:
        raise ValueError(f"opcode template must have {OPCODE_BITS} characters, got {len(opcode)}")
    mask = 0
    for position, char in enumerate(opcode[:OPCODE_BITS]):
        if char == c or (c2 is not None and char == c2):
            mask |= 1 << (OPCODE_BITS - 1 - position)
    return mask


@dataclass(frozen=True)
class OpcodeInfo:
    """One opcode template with its fixed-zero and fixed-one bit masks."""

    instruction: Instruction
    opcode: str
    assembly: str
    extension_word_type: ExtensionWordType = ExtensionWordType.NONE
    mask0: int = dataclass_field(init=False)
    mask1: int = dataclass_field(init=False)

    def __post_init__(self) -> None:
        if len(self.opcode) != OPCODE_BITS:
            raise ValueError(
                f"opcode template must have {OPCODE_BITS} characters, got {len(self.opcode)}"
            )
        object.__setattr__(self, "mask0", create_mask(self.opcode, "0"))
        object.__setattr__(self, "mask1", create_mask(self.opcode, "1"))

    @staticmethod
    def is_parallel_opcode(word: int) -> bool:
        """Whether ``word`` encodes an instruction with a parallel move."""
        return word >= 0x100000 or (word & 0xFE4000) == 0x080000

    def matches(self, word: int) -> bool:
        """Whether every fixed bit of the template agrees with ``word``."""
        word &= _WORD_MASK
        return (word & (self.mask0 | self.mask1)) == self.mask1

    def field(self, field: Field) -> FieldInfo:
        """Locate ``field`` in this opcode's template."""
        return field_info(self.opcode, field)


OPCODES: Tuple[OpcodeInfo, ...] = tuple(
    OpcodeInfo(Instruction[name], opcode, assembly, extension)
    for name, opcode, assembly, extension in _TABLE
)

_BY_INSTRUCTION: Dict[Instruction, OpcodeInfo] = {info.instruction: info for info in OPCODES}
_PLACEHOLDERS = frozenset({Instruction.ResolveCache, Instruction.Parallel})


def find_opcodes(word: int) -> List[OpcodeInfo]:
    """Return every opcode whose fixed bits match ``word``, in table order."""
    return [
        info
        for info in OPCODES
        if info.instruction not in _PLACEHOLDERS and info.matches(word)
    ]


def opcode_for(instruction: Instruction) -> OpcodeInfo:
    """Return the table entry for ``instruction``."""
    try:
        return _BY_INSTRUCTION[instruction]
    except KeyError:
        raise KeyError(f"no opcode entry for {instruction!r}") from None