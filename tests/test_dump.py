import datetime as dt
from dataclasses import dataclass

import numpy as np
import pytest

from yamlbridge import dump, load
from yamlbridge.encode.emit import flow_style_option
from yamlbridge.errors import (
    FlowStyleSelectionFailed,
    HigherDimensionsNotSupported,
    InvalidStyleArgument,
    NullPlaceholderNotAllowed,
    TypeNotSupported,
)
from yamlbridge.utils.types import NULL_PLACEHOLDER


DATA = {"a": 1.0, "b": ["text", False]}


def test_auto_style_matches_default_heuristic():
    assert dump(DATA) == "a: 1.0\nb: [text, false]\n"


def test_block_style():
    assert dump(DATA, "block") == "a: 1.0\nb:\n- text\n- false\n"


def test_flow_style():
    assert dump(DATA, "flow") == "{a: 1.0, b: [text, false]}\n"


def test_flow_and_block_decode_to_the_same_value():
    data = {"m": [[1, 2], [3, 4]], "s": ["a", None], "n": {"x": True}}
    flow = dump(data, "flow")
    block = dump(data, "block")
    assert flow != block
    assert load(flow, convert_to_array=False) == load(block, convert_to_array=False) == data


def test_invalid_style_is_rejected_before_conversion():
    with pytest.raises(InvalidStyleArgument):
        dump(object(), "inline")
    with pytest.raises(InvalidStyleArgument):
        dump(DATA, "Flow")


def test_flow_style_option_unknown_style():
    assert flow_style_option("flow") is True
    with pytest.raises(FlowStyleSelectionFailed, match="sideways"):
        flow_style_option("sideways")


def test_null_alone_renders_null():
    assert dump(None) == "null\n"


@pytest.mark.parametrize("style", ["auto", "block", "flow"])
def test_no_placeholder_left_in_output(style):
    data = {"k": None, "seq": [None, "x", None], "nested": {"deep": [None]}}
    text = dump(data, style)
    assert NULL_PLACEHOLDER not in text
    assert "'null'" not in text
    assert load(text, convert_to_array=False) == data


def test_null_in_flow_sequence_is_plain():
    assert dump([None, "x"], "flow") == "[null, x]\n"
    assert dump([None, "x"], "block") == "- null\n- x\n"


def test_placeholder_in_data_is_rejected():
    with pytest.raises(NullPlaceholderNotAllowed):
        dump({"a": ["ok", "bad " + NULL_PLACEHOLDER]})


@pytest.mark.parametrize("empty", [[], (), np.array([]), np.zeros((0, 2))])
def test_empty_input_renders_empty_sequence(empty):
    assert dump(empty) == "[]\n"
    assert dump(empty, "block") == "[]\n"
    assert dump({"e": empty}, "flow") == "{e: []}\n"


def test_empty_dict_renders_empty_mapping():
    assert dump({}) == "{}\n"


def test_array_nesting_depth_matches_dimensions():
    assert dump(np.array([1, 2]), "flow") == "[1, 2]\n"
    assert dump(np.array([[1, 2], [3, 4]]), "flow") == "[[1, 2], [3, 4]]\n"
    assert dump(np.arange(8).reshape(2, 2, 2), "flow") == "[[[0, 1], [2, 3]], [[4, 5], [6, 7]]]\n"
    with pytest.raises(HigherDimensionsNotSupported):
        dump(np.zeros((2, 2, 2, 2)))


def test_matrix_auto_style_uses_inline_rows():
    assert dump(np.array([[1, 2], [3, 4]])) == "- [1, 2]\n- [3, 4]\n"


def test_root_scalars_have_no_document_end_marker():
    assert dump("text") == "text\n"
    assert dump(3) == "3\n"
    assert dump(1.0) == "1.0\n"
    assert dump(True) == "true\n"


def test_strings_that_look_like_other_types_are_quoted():
    assert dump("null") == "'null'\n"
    assert dump("123") == "'123'\n"
    assert dump("") == "''\n"


def test_unsigned_max_is_written_as_plain_integer():
    assert dump(np.uint64(2**64 - 1)) == "18446744073709551615\n"


def test_timestamp_is_written_as_plain_yaml_timestamp():
    assert dump(dt.datetime(2024, 1, 2, 3, 4, 5, 678000)) == "2024-01-02T03:04:05.678\n"
    assert dump({"t": dt.date(2024, 1, 2)}, "block") == "t: 2024-01-02T00:00:00.000\n"
    assert load(dump([dt.datetime(2024, 1, 2, 3, 4, 5, 678000)], "flow")) == [dt.datetime(2024, 1, 2, 3, 4, 5, 678000)]


def test_dataclass_field_order_is_kept():

    @dataclass
    class Run:
        name: str
        energy: float
        ok: bool

    assert dump(Run("r1", 12.5, True), "block") == "name: r1\nenergy: 12.5\nok: true\n"
    assert dump(Run("r1", 12.5, True)) == "{name: r1, energy: 12.5, ok: true}\n"


def test_unicode_is_written_as_is():
    assert dump("héllo") == "héllo\n"


def test_unsupported_type_propagates_unchanged():
    with pytest.raises(TypeNotSupported, match="complex"):
        dump({"a": [1, 2j]})


def test_early_years_round_trip():
    value = dt.datetime(999, 1, 2, 3, 4, 5)
    assert dump(value) == "0999-01-02T03:04:05.000\n"
    assert load(dump(value)) == value


def test_str_enum_is_written_as_its_value():
    from yamlbridge.config import FlowStyle

    assert dump(FlowStyle.FLOW) == "flow\n"
    assert dump({FlowStyle.AUTO: 1}, "block") == "auto: 1\n"


def test_unicode_line_separators_are_double_quoted():
    text = dump("a\u2028b")
    assert text.startswith('"')
    assert load(text) == "a\u2028b"
