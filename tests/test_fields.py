import pytest

from dsp56k_tables.fields import (
    OPCODE_BITS,
    Field,
    FieldInfo,
    FieldParseConfig,
    field_info,
    init_field,
)

TEMPLATES = [
    ("????????????????0010d110", Field.d),
    ("????????????????0010d110", Field.MoveOperation),
    ("001000000010CCCC????????", Field.CCCC),
    ("001000000010CCCC????????", Field.AluOperation),
    ("0000101101MMMRRR0S0bbbbb", Field.MMM),
    ("0000101101MMMRRR0S0bbbbb", Field.RRR),
    ("0000101101MMMRRR0S0bbbbb", Field.S),
    ("0000101101MMMRRR0S0bbbbb", Field.bbbbb),
    ("00001110CCCCaaaaaaaaaaaa", Field.aaaaaaaaaaaa),
    ("0000000101ooooo011ood000", Field.ooooo),
    ("0000000101ooooo011ood000", Field.oo),
    ("1wmmeeffWrrMMRRR????????", Field.mm),
    ("1wmmeeffWrrMMRRR????????", Field.rr),
]


def _segment(opcode, info):
    start = OPCODE_BITS - info.bit - info.length
    return opcode[start:OPCODE_BITS - info.bit]


@pytest.mark.parametrize("opcode,field", TEMPLATES)
def test_located_field_covers_its_run(opcode, field):
    info = field_info(opcode, field)
    assert info.length == field.value.count
    assert _segment(opcode, info) == field.value.ch * field.value.count
    assert info.bit + info.length <= OPCODE_BITS


def test_move_operation_occupies_upper_sixteen_bits():
    info = field_info("????????????????0010d110", Field.MoveOperation)
    assert info.bit == 8


def test_run_length_must_match_exactly():
    # runs of 4 and 5 'a' characters, but never a lone one
    assert init_field("00000101CCCC01aaaa0aaaaa", "a", 1) == FieldInfo()


def test_later_run_found_when_first_has_wrong_length():
    opcode = "0000000101ooooo011ood000"
    five = field_info(opcode, Field.ooooo)
    two = field_info(opcode, Field.oo)
    assert two.bit < five.bit
    assert _segment(opcode, two) == "oo"


def test_missing_field_has_empty_mask():
    info = field_info("000000000000000000000000", Field.d)
    assert info == FieldInfo()
    assert info.extract(0xFFFFFF) == 0


def test_mask_matches_length():
    assert FieldInfo(0, 4).mask == 0b1111


@pytest.mark.parametrize("bit,length", [(0, 1), (5, 3), (8, 16), (12, 12)])
def test_extract_round_trip(bit, length):
    info = FieldInfo(bit, length)
    for value in (0, 1, info.mask, info.mask >> 1):
        word = value << bit
        assert info.extract(word) == value
        noise = ~(info.mask << bit) & 0xFFFFFF
        assert info.extract(word | noise) == value


def test_extract_from_opcode_word():
    opcode = "0000101101MMMRRR0S0bbbbb"
    info = field_info(opcode, Field.bbbbb)
    assert info.extract(0x0B4000 | 0x1F) == info.mask


def test_short_template_rejected():
    with pytest.raises(ValueError):
        init_field("0010d110", "d", 1)


def test_field_value_is_parse_config():
    assert Field.QQQQ.value == FieldParseConfig("Q", 4)