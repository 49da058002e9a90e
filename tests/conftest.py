from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from soapgen.code import ClassGenerator
from soapgen.models import Property, Type, TypeMeta
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_soapgen_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog keeps seeing soapgen records."""
    yield
    logger = logging.getLogger("soapgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def class_() -> ClassGenerator:
    return ClassGenerator("MyType", "MyNamespace")


@pytest.fixture
def address_type() -> Type:
    return Type(
        namespace="MyNamespace",
        name="Address",
        properties=(
            Property.from_meta("MyNamespace", "street", "string"),
            Property.from_meta("MyNamespace", "number", "int"),
        ),
    )


@pytest.fixture
def list_type() -> Type:
    return Type(
        namespace="MyNamespace",
        name="MyType",
        properties=(
            Property.from_meta(
                "MyNamespace",
                "items",
                "Item",
                TypeMeta(is_list=True, min_occurs=0, max_occurs=-1),
            ),
            Property.from_meta("MyNamespace", "count", "int"),
        ),
    )
