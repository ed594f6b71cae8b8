from __future__ import annotations

import copy

import pytest

from printbuf import BufferedFailure, Describable, PrintBuf


class LoadFail(BufferedFailure):
    pass


class SaveFail(BufferedFailure):
    pass


def test_uninitialized_failure_has_empty_text() -> None:
    err = LoadFail()

    assert err.text() == ""
    assert str(err) == ""


def test_preamble_and_tail() -> None:
    err = LoadFail()
    err.init("Preamble of message:")
    err.sprintf("tail")

    assert str(err) == "Preamble of message:tail"


def test_fluent_build_returns_subclass_instance() -> None:
    err = LoadFail("Load failed: ").sprintf("file %s", "a.txt")

    assert isinstance(err, LoadFail)
    assert err.text() == "Load failed: file a.txt"


def test_raise_and_classify_by_type() -> None:
    with pytest.raises(LoadFail, match="^Load failed: file a.txt$"):
        raise LoadFail("Load failed: ").sprintf("file %s", "a.txt")


def test_kinds_are_distinct() -> None:
    err: Exception = SaveFail("disk full")

    match err:
        case LoadFail():
            kind = "load"
        case SaveFail():
            kind = "save"
        case _:
            kind = "other"

    assert kind == "save"
    assert not isinstance(err, LoadFail)


def test_each_failure_owns_its_buffer() -> None:
    first = LoadFail("a")
    second = LoadFail("a")

    first.sprintln("only first")

    assert first.text() == "aonly first\n"
    assert second.text() == "a"
    assert first.buffer is not second.buffer


def test_buffer_property_exposes_accumulator() -> None:
    err = LoadFail("x")
    err.write("y")

    assert isinstance(err.buffer, PrintBuf)
    assert err.buffer.text() == "xy"


def test_repr_names_subclass() -> None:
    assert repr(LoadFail("oops")) == "LoadFail('oops')"


def test_failure_is_describable() -> None:
    assert isinstance(LoadFail(), Describable)


def test_mixed_format_args_rejected_on_failure() -> None:
    err = LoadFail("kept")

    with pytest.raises(TypeError):
        err.sprintf("%s", "x", a=1)

    assert err.text() == "kept"


def test_copied_failure_owns_its_buffer() -> None:
    original = LoadFail("Load failed: ")
    shallow = copy.copy(original)
    deep = copy.deepcopy(original)

    shallow.sprintf("file %s", "a.txt")
    deep.sprintln("deep")

    assert isinstance(shallow, LoadFail)
    assert isinstance(deep, LoadFail)
    assert original.text() == "Load failed: "
    assert shallow.text() == "Load failed: file a.txt"
    assert deep.text() == "Load failed: deep\n"
    assert shallow.buffer is not original.buffer
