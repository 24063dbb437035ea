"""Tests for fileroute.__init__ — lazy imports cover all public names."""

import pytest

import fileroute


@pytest.mark.parametrize("name", fileroute.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(fileroute, name)
    assert obj is not None, f"fileroute.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        fileroute.__getattr__("ThisDoesNotExist")
