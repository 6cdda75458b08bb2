"""Tests for introspect/models.py - method descriptors."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass

import pytest

from beanprobe.introspect.models import MISSING, MethodInfo, MethodKind, ParameterInfo


class Sample:
    label = "data attribute"

    def getName(self) -> str:
        return "sample"

    def setTags(self, tags: list[str]) -> None:
        pass

    def untyped(self, value):  # type: ignore[no-untyped-def]
        return value

    def getLater(self) -> Unknown:  # type: ignore[name-defined]  # noqa: F821
        return None

    def setLimit(self, limit: int) -> Unknown:  # type: ignore[name-defined]  # noqa: F821
        return None

    @staticmethod
    def create(name: str) -> Sample:
        return Sample()

    @classmethod
    def build(cls) -> Sample:
        return cls()

    @property
    def size(self) -> int:
        return 0

    class Nested:
        pass


class TestFromMember:
    """MethodInfo.from_member tests."""

    def test_given_instance_method_when_described_then_self_dropped(self) -> None:
        """Instance methods lose their bound self parameter."""
        # When
        info = MethodInfo.from_member(Sample, "getName", vars(Sample)["getName"])

        # Then
        assert info is not None
        assert info.kind is MethodKind.INSTANCE
        assert info.parameters == ()
        assert info.return_type is str
        assert info.is_static is False
        assert info.synthetic is False

    def test_given_static_method_when_described_then_keeps_all_params(self) -> None:
        """Static methods have no bound parameter to drop."""
        info = MethodInfo.from_member(Sample, "create", vars(Sample)["create"])

        assert info is not None
        assert info.kind is MethodKind.STATIC
        assert info.parameters == (ParameterInfo(name="name", annotation=str),)
        assert info.return_type is Sample
        assert info.is_static is True

    def test_given_class_method_when_described_then_cls_dropped(self) -> None:
        """Class methods lose cls and count as static."""
        info = MethodInfo.from_member(Sample, "build", vars(Sample)["build"])

        assert info is not None
        assert info.kind is MethodKind.CLASS
        assert info.parameters == ()
        assert info.is_static is True

    @pytest.mark.parametrize("name", ["label", "size", "Nested"])
    def test_given_non_method_attribute_when_described_then_none(self, name: str) -> None:
        """Data attributes, properties and nested classes are not methods."""
        assert MethodInfo.from_member(Sample, name, vars(Sample)[name]) is None

    def test_given_unannotated_method_when_described_then_missing_types(self) -> None:
        """Missing annotations are reported as MISSING."""
        info = MethodInfo.from_member(Sample, "untyped", vars(Sample)["untyped"])

        assert info is not None
        assert info.param_types == (MISSING,)
        assert info.return_type is MISSING

    def test_given_generic_annotation_when_described_then_resolved(self) -> None:
        """Generic annotations are resolved to comparable objects."""
        info = MethodInfo.from_member(Sample, "setTags", vars(Sample)["setTags"])

        assert info is not None
        assert info.param_types == (list[str],)
        assert info.returns_none is True

    def test_given_unresolvable_annotation_when_described_then_raw_string(self) -> None:
        """Forward references that cannot be resolved keep their raw text."""
        info = MethodInfo.from_member(Sample, "getLater", vars(Sample)["getLater"])

        assert info is not None
        assert info.return_type == "Unknown"

    def test_given_one_unresolvable_slot_when_described_then_others_resolved(self) -> None:
        """A bad return annotation leaves resolvable parameter types intact."""
        info = MethodInfo.from_member(Sample, "setLimit", vars(Sample)["setLimit"])

        assert info is not None
        assert info.param_types == (int,)
        assert info.return_type == "Unknown"

    def test_given_dataclass_when_described_then_generated_methods_synthetic(self) -> None:
        """Methods generated by dataclasses are flagged synthetic."""
        # Given
        @dataclass
        class Point:
            x: int

        # When
        info = MethodInfo.from_member(Point, "__init__", vars(Point)["__init__"])

        # Then
        assert info is not None
        assert info.synthetic is True

    def test_given_namedtuple_when_described_then_generated_methods_synthetic(self) -> None:
        """Methods generated by namedtuple are flagged synthetic."""
        Pair = namedtuple("Pair", ["left", "right"])

        info = MethodInfo.from_member(Pair, "__new__", vars(Pair)["__new__"])

        assert info is not None
        assert info.synthetic is True


class TestRendering:
    """MethodInfo display helpers."""

    def test_given_getter_when_signature_then_renders_types(self) -> None:
        """Signature shows owner, parameters and return type."""
        info = MethodInfo.from_member(Sample, "create", vars(Sample)["create"])

        assert info is not None
        assert info.signature() == "Sample.create(name: str) -> Sample"

    def test_given_untyped_method_when_signature_then_bare_names(self) -> None:
        """Unannotated parameters and returns are left bare."""
        info = MethodInfo.from_member(Sample, "untyped", vars(Sample)["untyped"])

        assert info is not None
        assert info.signature() == "Sample.untyped(value)"
        assert info.qualname == "Sample.untyped"
