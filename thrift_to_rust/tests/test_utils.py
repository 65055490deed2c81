import pytest

from thrift_to_rust.utils import RUST_RESERVED_KEYWORDS, field_case, type_case, underscore


class TestTypeCase:
    """Test conversion of Thrift identifiers to Rust type names"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a_multi_word", "AMultiWord"),
            ("some_name", "SomeName"),
            ("name", "Name"),
            ("GREEN", "Green"),
            ("SharedService", "SharedService"),
            ("getStruct", "GetStruct"),
            ("DIVIDE_BY_ZERO", "DivideByZero"),
        ],
    )
    def test_type_case(self, name, expected):
        assert type_case(name) == expected

    def test_leading_and_double_underscores_are_dropped(self):
        assert type_case("_private__name") == "PrivateName"


class TestFieldCase:
    """Test conversion of Thrift identifiers to Rust field names"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("getStruct", "get_struct"),
            ("whatOp", "what_op"),
            ("HTTPCode", "http_code"),
            ("num1", "num1"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_underscore(self, name, expected):
        assert underscore(name) == expected

    def test_reserved_word_is_escaped(self):
        assert field_case("type") == "type_"

    def test_plain_word_is_unchanged(self):
        assert field_case("thing") == "thing"

    def test_escaping_applies_after_case_conversion(self):
        # "Type" only becomes a keyword once lowered
        assert field_case("Type") == "type_"
        assert field_case("Self") == "self_"

    def test_escaping_is_applied_once(self):
        assert field_case("type_") == "type_"

    def test_every_keyword_escapes(self):
        for keyword in RUST_RESERVED_KEYWORDS:
            assert field_case(keyword) == keyword + "_"
