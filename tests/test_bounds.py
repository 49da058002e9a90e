"""Tests for soapgen.bounds."""

from __future__ import annotations

from soapgen.bounds import UNBOUNDED, ArrayBounds, ArrayBoundsCalculator
from soapgen.models import TypeMeta


def test_unbounded_collection_uses_max_sentinel() -> None:
    bounds = ArrayBoundsCalculator()(TypeMeta(is_list=True, min_occurs=0, max_occurs=UNBOUNDED))

    assert bounds == ArrayBounds(0, None)
    assert bounds.is_unbounded
    assert str(bounds) == "int<0,max>"


def test_explicit_bounds_are_kept() -> None:
    bounds = ArrayBoundsCalculator()(TypeMeta(is_list=True, min_occurs=1, max_occurs=5))

    assert str(bounds) == "int<1,5>"
    assert not bounds.is_unbounded


def test_missing_bounds_default_to_open_range() -> None:
    assert str(ArrayBoundsCalculator()(TypeMeta())) == "int<0,max>"
    assert str(ArrayBoundsCalculator()(TypeMeta(min_occurs=-3, max_occurs=2))) == "int<0,2>"
