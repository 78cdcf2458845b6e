"""Tests for TypeTag classification."""

from decimal import Decimal
from fractions import Fraction

import pytest

from reactcell import TypeTag


class TestTypeTagOf:
    @pytest.mark.parametrize(
        "value, tag",
        [
            (None, TypeTag.NONE),
            (True, TypeTag.BOOLEAN),
            (False, TypeTag.BOOLEAN),
            (0, TypeTag.NUMBER),
            (2.5, TypeTag.NUMBER),
            (Fraction(1, 2), TypeTag.NUMBER),
            (Decimal("1.5"), TypeTag.NUMBER),
            ("", TypeTag.STRING),
            (b"raw", TypeTag.STRING),
            (len, TypeTag.FUNCTION),
            (lambda: None, TypeTag.FUNCTION),
            ([], TypeTag.TABLE),
            ({"a": 1}, TypeTag.TABLE),
            (object(), TypeTag.TABLE),
        ],
    )
    def test_classifies(self, value, tag):
        assert TypeTag.of(value) is tag

    def test_bool_is_not_number(self):
        assert TypeTag.of(True) is not TypeTag.NUMBER


class TestCoerce:
    def test_passes_tags_through(self):
        assert TypeTag.coerce(TypeTag.STRING) is TypeTag.STRING

    def test_accepts_names(self):
        assert TypeTag.coerce("function") is TypeTag.FUNCTION

    def test_rejects_unknown(self):
        with pytest.raises(ValueError, match="expected one of"):
            TypeTag.coerce("nil")

    def test_tags_compare_to_names(self):
        assert TypeTag.TABLE == "table"
