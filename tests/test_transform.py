import sys

import pytest
from minicomp.codegen import generate_code, CodegenError
from minicomp.parser import parse
from minicomp.transform import transform, TransformError
from minicomp.types import AST, ASTNode, NodeKind


def test_transform_literals():
    assert transform(parse("42 add")) == [42, "add"]


def test_transform_reference_program():
    assert transform(parse("(123 234 456) add (123)")) == [
        [123, 234, 456],
        "add",
        [123],
    ]


def test_transform_nested():
    assert transform(parse("(add 2 (subtract 4 2) x)")) == [
        ["add", 2, ["subtract", 4, 2], "x"],
    ]


def test_transform_empty():
    assert transform(parse("")) == []


def test_transform_leaves_ast_untouched():
    ast = parse("(a 1)")
    transform(ast)
    assert ast.expressions[0].children[0].value == "1"


def test_generate_code():
    assert generate_code([["add", 2, ["subtract", 4, 2]], "x", 7]) == "(add 2 (subtract 4 2)) x 7"


def test_generate_code_empty():
    assert generate_code([]) == ""


def test_round_trip_normalises_spacing():
    src = "(add   2 ( subtract 4 2 ) )   end"
    assert generate_code(transform(parse(src))) == "(add 2 (subtract 4 2)) end"


def test_round_trip_reference_program():
    src = "(123 234 456) add (123)"
    assert generate_code(transform(parse(src))) == src


def test_generate_code_rejects_bool():
    with pytest.raises(CodegenError, match="cannot render True"):
        generate_code([True])


def test_generate_code_rejects_float():
    with pytest.raises(CodegenError):
        generate_code([["add", 1.5]])


def _digit_limit():
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    return get_limit() if get_limit else 0


@pytest.mark.skipif(_digit_limit() == 0, reason="int() has no digit limit here")
def test_transform_oversized_number():
    src = "1" * (_digit_limit() + 1)
    with pytest.raises(TransformError, match="cannot convert number literal"):
        transform(parse(src))


@pytest.mark.skipif(_digit_limit() == 0, reason="int() has no digit limit here")
def test_transform_oversized_call_head():
    src = "(" + "9" * (_digit_limit() + 1) + " x)"
    with pytest.raises(TransformError):
        transform(parse(src))


def test_transform_head_kind():
    assert transform(parse("(12 a) (ab 1)")) == [[12, "a"], ["ab", 1]]


def test_transform_by_node_kind():
    # a word never becomes an int, whatever its characters
    ast = AST([ASTNode(NodeKind.ROOT), ASTNode(NodeKind.WORD_OPERATOR, "²")])
    assert transform(ast) == ["²"]


def test_generate_code_rejects_non_words():
    for bad in ["a b", "(", "", "12", "x1"]:
        with pytest.raises(CodegenError):
            generate_code([bad])


def test_generate_code_rejects_negative():
    with pytest.raises(CodegenError, match="cannot render -1"):
        generate_code([["sub", -1]])
