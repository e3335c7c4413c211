from pathlib import Path

import pytest
from minicomp import generate_code, parse, transform, traverse
from minicomp.types import NodeKind

PROGRAMS_DIR = Path(__file__).resolve().parent.parent / "examples" / "programs"


def load_program(name: str) -> str:
    path = PROGRAMS_DIR / name
    if not path.exists():
        pytest.skip(f"example program not found: {path}")
    return path.read_text().strip()


def test_reference_program_pipeline():
    src = load_program("reference.mc")
    ast = parse(src)
    assert len(ast.expressions) == 3

    numbers = []
    traverse(ast, {NodeKind.NUMBER_LITERAL: lambda n, p: numbers.append(n.value)})
    assert numbers == ["234", "456"]

    assert generate_code(transform(ast)) == src


def test_nested_program_pipeline():
    src = load_program("nested.mc")
    tree = transform(parse(src))
    assert tree == [
        ["add", 2, ["subtract", 40, 2]],
        ["print", ["concat", "Hello", "World"], 0],
    ]
    assert generate_code(tree) == src
