import pytest

from codimoji.sim.errors import InvalidPrint
from codimoji.sim.parser import (
    Assign,
    Direction,
    Move,
    Noop,
    Print,
    parse_program,
    parse_statement,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("x = 5", Assign(name="x", value="5")),
        ("steps=y", Assign(name="steps", value="y")),
        ("print('Hello')", Print(token="Hello", quoted=True)),
        ('print("Hi there")', Print(token="Hi there", quoted=True)),
        ("print(x)", Print(token="x", quoted=False)),
        ("move_right()", Move(direction=Direction.RIGHT, argument=None)),
        ("move_left(3)", Move(direction=Direction.LEFT, argument="3")),
        ("move_up( n )", Move(direction=Direction.UP, argument="n")),
        ("move_down (2)", Move(direction=Direction.DOWN, argument="2")),
        ("x == 5", Noop(text="x == 5")),
        ("jump()", Noop(text="jump()")),
        ("move_right", Noop(text="move_right")),
        ("move_right(1, 2)", Noop(text="move_right(1, 2)")),
    ],
)
def test_statement_classification(text: str, expected: object) -> None:
    assert parse_statement(text) == expected


def test_assignment_takes_priority_over_print() -> None:
    statement = parse_statement("print('a=b')")
    assert isinstance(statement, Assign)
    assert statement.name == "print('a"


def test_malformed_print_raises() -> None:
    with pytest.raises(InvalidPrint):
        parse_statement("print()")
    with pytest.raises(InvalidPrint):
        parse_statement("print('')")


def test_parse_program_drops_blank_lines_and_keeps_line_numbers() -> None:
    lines = parse_program("\n  x = 1  \n\n\tprint(x)\n   \n")
    assert [line.text for line in lines] == ["x = 1", "print(x)"]
    assert [line.index for line in lines] == [0, 1]
    assert [line.line_number for line in lines] == [1, 3]


def test_direction_deltas() -> None:
    assert Direction.RIGHT.delta == (1, 0)
    assert Direction.LEFT.delta == (-1, 0)
    assert Direction.UP.delta == (0, -1)
    assert Direction.DOWN.delta == (0, 1)
