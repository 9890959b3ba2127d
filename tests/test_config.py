import pytest

from yamlbridge.config import DumpOptions, FlowStyle, LoadOptions
from yamlbridge.errors import InvalidStyleArgument


def test_flow_style_parse():
    assert FlowStyle.parse("auto") is FlowStyle.AUTO
    assert FlowStyle.parse("block") is FlowStyle.BLOCK
    assert FlowStyle.parse(FlowStyle.FLOW) is FlowStyle.FLOW


@pytest.mark.parametrize("style", ["", "Flow", "inline", None, 1])
def test_flow_style_parse_rejects_unknown(style):
    with pytest.raises(InvalidStyleArgument) as exc:
        FlowStyle.parse(style)
    assert exc.value.identifier == "yaml:dump:InvalidStyleArgument"
    assert isinstance(exc.value, ValueError)


def test_dump_options_dict_round_trip():
    opts = DumpOptions.from_dict({"style": "flow", "indent": 4})
    assert opts.style is FlowStyle.FLOW
    assert opts.indent == 4
    assert DumpOptions.from_dict(opts.to_dict()) == opts
    assert DumpOptions.from_dict({}) == DumpOptions()


def test_dump_options_validate():
    with pytest.raises(ValueError):
        DumpOptions(indent=1).validate()
    with pytest.raises(ValueError):
        DumpOptions(width=4).validate()
    with pytest.raises(InvalidStyleArgument):
        DumpOptions.from_dict({"style": "sideways"})


def test_load_options():
    assert LoadOptions.from_dict({}).to_dict() == {"convert_to_array": True, "max_array_ndim": 3}
    with pytest.raises(ValueError):
        LoadOptions.from_dict({"max_array_ndim": 4})
