"""
Identifier normalization for the Rust backend.

Thrift identifiers are converted to Rust naming conventions: PascalCase for
type-level names and snake_case for fields, with Rust keywords escaped.
"""

import re

# Rust keywords (including reserved-for-future-use words) that cannot be used as field names
RUST_RESERVED_KEYWORDS = {
    "abstract",
    "alignof",
    "as",
    "async",
    "await",
    "be",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "offsetof",
    "override",
    "priv",
    "pub",
    "pure",
    "ref",
    "return",
    "self",
    "sizeof",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}

RESERVED_WORD_SUFFIX = "_"

# Boundaries where a snake_case underscore must be inserted
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _capitalize_segment(segment: str) -> str:
    """Capitalize one underscore-separated segment.

    All-caps segments are lowered after their first letter, anything else keeps
    its inner casing so that already PascalCased names pass through untouched.
    """
    if not segment:
        return ""
    if segment.isupper():
        return segment.capitalize()
    return segment[0].upper() + segment[1:]


def type_case(name: str) -> str:
    """Convert a Thrift identifier to a Rust type name.

    Examples:
        "a_multi_word" -> "AMultiWord"
        "some_name" -> "SomeName"
        "GREEN" -> "Green"
        "SharedService" -> "SharedService"
    """
    return "".join(_capitalize_segment(segment) for segment in name.split("_"))


def underscore(name: str) -> str:
    """Convert camelCase or PascalCase to lower snake_case.

    Examples:
        "getStruct" -> "get_struct"
        "HTTPCode" -> "http_code"
        "num1" -> "num1"
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


def is_reserved(name: str) -> bool:
    return name in RUST_RESERVED_KEYWORDS


def field_case(name: str) -> str:
    """Convert a Thrift identifier to a Rust field name.

    The keyword check runs on the converted name, so "Type" escapes to "type_"
    just like "type" does.
    """
    converted = underscore(name)
    if is_reserved(converted):
        return converted + RESERVED_WORD_SUFFIX
    return converted
