"""Tests for the editor schema registry."""

import pytest

from pathviewer.editor.registry import (
    EDITOR_ROWS,
    FLAG_SLOTS,
    VALUE_SLOTS,
    EditorRegistry,
    EditorRow,
    build_command,
    decompose,
    describe_for,
    get_registry,
)
from pathviewer.path.commands import LAYOUTS, CommandKind, EllipticalArc, Line, Move, Role
from pathviewer.path.parser import parse_path
from tests.conftest import ALL_KINDS_PATH


def test_every_kind_registered():
    reg = get_registry()
    assert reg.count == 10
    assert [row.kind for row in reg.all()] == list(CommandKind)


def test_value_fields_follow_wire_order():
    for kind, layout in LAYOUTS.items():
        row = get_registry().get(kind)
        assert row.value_fields == tuple(s.name for s in layout if s.role is not Role.FLAG)


def test_absolute_flag_first_except_close():
    for row in EDITOR_ROWS:
        if row.kind is CommandKind.CLOSE:
            assert row.flag_count == 0
        else:
            assert row.flag_fields[0] == "is_absolute"


def test_describe_move():
    desc = describe_for(CommandKind.MOVE)
    assert desc.value_labels == ("X", "Y", None, None, None, None)
    assert desc.flag_labels == ("Absolute Position", None, None)
    assert (desc.value_count, desc.flag_count) == (2, 1)


def test_describe_arc():
    desc = describe_for(CommandKind.ELLIPTICAL_ARC)
    assert desc.value_labels == ("Size X", "Size Y", "Rotation Angle", "End X", "End Y", None)
    assert desc.flag_labels == ("Absolute Position", "Large Arc", "Positive Sweep Direction")


def test_describe_close():
    desc = describe_for(CommandKind.CLOSE)
    assert desc.value_count == 0
    assert desc.flag_count == 0
    assert desc.value_labels == (None,) * VALUE_SLOTS
    assert desc.flag_labels == (None,) * FLAG_SLOTS


def test_build_line():
    cmd = build_command(CommandKind.LINE, [10, 20, 0, 0, 0, 0], [True, False, False])
    assert cmd == Line(10, 20, is_absolute=True)


def test_build_ignores_trailing_slots():
    cmd = build_command(CommandKind.MOVE, [1, 2, 99, 99, 99, 99], [False, True, True])
    assert cmd == Move(1, 2)


def test_build_pads_short_lists():
    assert build_command(CommandKind.LINE, [5], []) == Line(5, 0)


def test_build_arc():
    cmd = build_command(
        CommandKind.ELLIPTICAL_ARC,
        [10, 20, 45, 50, 60, 0],
        [True, True, False],
    )
    assert cmd == EllipticalArc(10, 20, 45, True, False, 50, 60, True)


def test_decompose_line():
    kind, values, flags = decompose(Line(10, 20, is_absolute=True))
    assert kind is CommandKind.LINE
    assert values == [10, 20, 0, 0, 0, 0]
    assert flags == [True, False, False]


def test_build_decompose_round_trip():
    for cmd in parse_path(ALL_KINDS_PATH).commands:
        kind, values, flags = decompose(cmd)
        assert len(values) == VALUE_SLOTS
        assert len(flags) == FLAG_SLOTS
        assert build_command(kind, values, flags) == cmd


def test_row_decompose_wrong_kind():
    with pytest.raises(ValueError):
        get_registry().get(CommandKind.LINE).decompose(Move(1, 2))


def test_register_duplicate():
    reg = EditorRegistry()
    reg.register(EditorRow(kind=CommandKind.CLOSE))
    with pytest.raises(ValueError):
        reg.register(EditorRow(kind=CommandKind.CLOSE))


def test_register_over_capacity():
    names = tuple(f"v{i}" for i in range(VALUE_SLOTS + 1))
    row = EditorRow(kind=CommandKind.LINE, value_fields=names, value_labels=names)
    with pytest.raises(ValueError):
        EditorRegistry().register(row)


def test_register_mismatched_labels():
    row = EditorRow(kind=CommandKind.LINE, value_fields=("end_x", "end_y"), value_labels=("X",))
    with pytest.raises(ValueError):
        EditorRegistry().register(row)
