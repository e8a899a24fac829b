from app.tree_printer import format_rows, print_tree
from core.flatten import flatten
from core.ids import IdAllocator, allocator
from models.node import example_tree


def test_format_rows(sample_data):
    text = format_rows(flatten(sample_data, allocator=IdAllocator()))
    assert text.splitlines() == [
        "> Root",
        "  - A",
        "  > B",
        "    - C",
    ]


def test_print_tree_open_marker(capsys):
    print_tree(example_tree())
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "+ Root"
    assert out[1] == "  > Top Category 1"
    assert out[-1] == "  - Top Category 2"


def test_print_tree_keeps_process_ids(capsys):
    before = allocator.peek()
    print_tree(example_tree())
    assert allocator.peek() == before


def test_print_empty(capsys):
    print_tree(None)
    assert capsys.readouterr().out == "(empty)\n"
