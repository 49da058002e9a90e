"""Tests for assembler discovery utilities."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from soapgen.assemblers import (
    Assembler,
    ClientConstructorAssembler,
    GetterAssembler,
    PropertyAssembler,
    ResultProviderAssembler,
    discover_assemblers,
)
from soapgen.config import PropertyConfig, ResultProviderConfig, SoapGenConfig
from soapgen.context import Context, TypeContext


class DummyAssembler(Assembler):
    """Test assembler used for plugin discovery validation."""

    context_type = TypeContext

    def assemble(self, context: Context) -> None:  # pragma: no cover - unused
        self._expect(context, TypeContext)


def _entry_points(*entries: SimpleNamespace):
    class DummyEntryPoints(list):
        def select(self, **kwargs):
            if kwargs.get("group") == "soapgen.assemblers":
                return self
            return []

    return lambda: DummyEntryPoints(entries)


def test_discover_assemblers_returns_builtins() -> None:
    assemblers = discover_assemblers()
    classes = {type(assembler) for assembler in assemblers}

    assert ClientConstructorAssembler in classes
    assert PropertyAssembler in classes
    assert len(assemblers) >= 10


def test_discover_assemblers_respects_order_and_filter() -> None:
    assemblers = discover_assemblers(["Getter", "property", "getter"])

    assert [type(assembler) for assembler in assemblers] == [GetterAssembler, PropertyAssembler]


def test_discover_assemblers_applies_config(tmp_path: Path) -> None:
    config = SoapGenConfig(
        root=tmp_path,
        property_options=PropertyConfig(visibility="protected", optional_value=True),
        result_provider=ResultProviderConfig(wrapper_class="App\\Result"),
    )

    property_assembler, result_provider = discover_assemblers(
        ["property", "result_provider"], config=config
    )

    assert property_assembler.options.visibility == "protected"
    assert property_assembler.options.optional_value is True
    assert result_provider.wrapper_class == "App\\Result"
    assert isinstance(result_provider, ResultProviderAssembler)


def test_discover_assemblers_loads_entry_points(monkeypatch) -> None:
    monkeypatch.setattr(
        "soapgen.assemblers.metadata.entry_points",
        _entry_points(SimpleNamespace(name="dummy", load=lambda: DummyAssembler)),
        raising=False,
    )

    assemblers = discover_assemblers(["dummy"])
    assert len(assemblers) == 1
    assert isinstance(assemblers[0], DummyAssembler)


def test_entry_points_cannot_shadow_builtins(monkeypatch) -> None:
    monkeypatch.setattr(
        "soapgen.assemblers.metadata.entry_points",
        _entry_points(SimpleNamespace(name="getter", load=lambda: DummyAssembler)),
        raising=False,
    )

    (assembler,) = discover_assemblers(["getter"])
    assert isinstance(assembler, GetterAssembler)


def test_entry_point_must_provide_an_assembler(monkeypatch) -> None:
    monkeypatch.setattr(
        "soapgen.assemblers.metadata.entry_points",
        _entry_points(SimpleNamespace(name="broken", load=lambda: object())),
        raising=False,
    )

    with pytest.raises(TypeError):
        discover_assemblers(["broken"])


def test_discover_assemblers_raises_for_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown assemblers requested: missing"):
        discover_assemblers(["missing"])
