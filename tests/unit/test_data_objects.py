import pytest
from src.rvasm.assembler import parse_asm
from src.rvasm.data import extract_data_objects
from src.rvasm.ast import Label, Directive, Instruction, StringLiteral, Number, Symbol, Difference
from src.rvasm.diagnostics import MissingObjectData, DuplicateWordAssignment

def _obj(name):
    return Directive(".type", (Symbol(name), Symbol("@object")))

def _ascii(data, d=".ascii"):
    return Directive(d, (StringLiteral(data),))

def _word(*args):
    return Directive(".word", args)

def test_ascii_appends_in_order():
    stmts = [_obj("X"), Label("X"), _ascii(b"AB"), _ascii(b"C")]
    assert extract_data_objects(stmts) == {"X": b"ABC"}

def test_asciz_has_no_implicit_terminator():
    stmts = parse_asm('.type s, @object\ns:\n  .asciz "hi"\n  .asciz "\\000"\n')
    assert extract_data_objects(stmts) == {"s": b"hi\x00"}

def test_word_little_endian():
    stmts = [_obj("X"), Label("X"), _word(Number(1))]
    assert extract_data_objects(stmts) == {"X": bytes([0x01, 0x00, 0x00, 0x00])}

def test_word_several_values_and_truncation():
    stmts = [_obj("T"), Label("T"), _word(Number(0x12345678), Number(-1), Number(0x1_0000_0002))]
    assert extract_data_objects(stmts) == {
        "T": b"\x78\x56\x34\x12" + b"\xff\xff\xff\xff" + b"\x02\x00\x00\x00"
    }

def test_word_indirect_reference_is_zero_placeholder():
    stmts = [_obj("P"), Label("P"), _word(Symbol("main"), Number(2), Difference("a", "b"))]
    assert extract_data_objects(stmts) == {"P": bytes(4) + b"\x02\x00\x00\x00" + bytes(4)}

def test_announced_but_never_filled():
    with pytest.raises(MissingObjectData) as info:
        extract_data_objects([_obj("Y")])
    assert info.value.name == "Y"
    assert "Y" in str(info.value)

def test_word_twice_fails():
    stmts = [_obj("X"), Label("X"), _word(Number(1)), _word(Number(2))]
    with pytest.raises(DuplicateWordAssignment):
        extract_data_objects(stmts)

def test_word_after_ascii_fails():
    stmts = [_obj("X"), Label("X"), _ascii(b"a"), _word(Number(2))]
    with pytest.raises(DuplicateWordAssignment):
        extract_data_objects(stmts)

def test_ascii_after_word_appends():
    stmts = [_obj("X"), Label("X"), _word(Number(1)), _ascii(b"z")]
    assert extract_data_objects(stmts) == {"X": b"\x01\x00\x00\x00z"}

def test_redeclaration_keeps_existing_content():
    stmts = [_obj("X"), Label("X"), _ascii(b"keep"), _obj("X")]
    assert extract_data_objects(stmts) == {"X": b"keep"}

def test_redeclaration_does_not_allow_second_word():
    stmts = [_obj("X"), Label("X"), _word(Number(1)), _obj("X"), Label("X"), _word(Number(2))]
    with pytest.raises(DuplicateWordAssignment):
        extract_data_objects(stmts)

def test_unregistered_label_and_no_label_are_ignored():
    stmts = [_ascii(b"orphan"), _word(Number(3)), Label("f"), _ascii(b"x"), _word(Number(4))]
    assert extract_data_objects(stmts) == {}

def test_current_label_survives_other_statements():
    stmts = [
        _obj("msg"), Label("msg"), Directive(".p2align", (Number(2),)),
        Instruction("nop"), _ascii(b"hi"),
    ]
    assert extract_data_objects(stmts) == {"msg": b"hi"}

def test_object_can_be_announced_after_its_label():
    stmts = [Label("late"), _obj("late"), _ascii(b"ok")]
    assert extract_data_objects(stmts) == {"late": b"ok"}

def test_other_types_and_multi_string_ascii_are_ignored():
    stmts = [
        Directive(".type", (Symbol("f"), Symbol("@function"))), Label("f"), _ascii(b"no"),
        _obj("X"), Label("X"), Directive(".ascii", (StringLiteral(b"a"), StringLiteral(b"b"))),
        _ascii(b"c"),
    ]
    assert extract_data_objects(stmts) == {"X": b"c"}

def test_output_sorted_by_name():
    stmts = [_obj("b"), _obj("a"), Label("b"), _ascii(b"B"), Label("a"), _ascii(b"A")]
    assert list(extract_data_objects(stmts)) == ["a", "b"]

def test_empty_string_counts_as_content():
    stmts = [_obj("E"), Label("E"), _ascii(b"")]
    assert extract_data_objects(stmts) == {"E": b""}
