"""
AST (Abstract Syntax Tree) node definitions for Thrift programs.

These nodes represent an already-parsed, validated Thrift program. The
generator treats them as read-only input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class BaseKind(Enum):
    """Kind of a Thrift base type."""

    VOID = "void"
    BOOL = "bool"
    BYTE = "byte"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    DOUBLE = "double"
    STRING = "string"
    BINARY = "binary"


class StructKind(Enum):
    """Flavour of a Thrift object declaration."""

    STRUCT = "struct"
    UNION = "union"
    EXCEPTION = "exception"


@dataclass
class TypeNode:
    """Base class for all type nodes."""


@dataclass
class BaseType(TypeNode):
    """A primitive type (bool, i32, string, ...)."""

    kind: BaseKind = BaseKind.VOID


@dataclass
class EnumRef(TypeNode):
    """Reference to an enum declaration."""

    name: str = ""
    # Referenced declarations can be recursive, keep them out of repr/eq
    definition: EnumDef | None = field(default=None, repr=False, compare=False)


@dataclass
class StructRef(TypeNode):
    """Reference to a struct, union or exception declaration."""

    name: str = ""
    definition: StructDef | None = field(default=None, repr=False, compare=False)


@dataclass
class TypedefRef(TypeNode):
    """Reference to a typedef, a one-step alias for another type."""

    name: str = ""
    definition: TypedefDef | None = field(default=None, repr=False, compare=False)


@dataclass
class ListType(TypeNode):
    """list<T>"""

    elem_type: TypeNode | None = None


@dataclass
class SetType(TypeNode):
    """set<T>"""

    elem_type: TypeNode | None = None


@dataclass
class MapType(TypeNode):
    """map<K, V>"""

    key_type: TypeNode | None = None
    value_type: TypeNode | None = None


@dataclass
class EnumValue:
    """A single enum constant."""

    name: str = ""
    value: int = 0


@dataclass
class EnumDef:
    """An enum declaration."""

    name: str = ""
    values: list[EnumValue] = field(default_factory=list)


@dataclass
class TypedefDef:
    """A typedef declaration."""

    name: str = ""
    type: TypeNode | None = None


@dataclass
class FieldDef:
    """A field of a struct, an argument or a declared exception."""

    name: str = ""
    type: TypeNode | None = None
    key: int = 0  # Ordinal tag used on the wire


@dataclass
class StructDef:
    """A struct, union or exception declaration."""

    name: str = ""
    kind: StructKind = StructKind.STRUCT
    members: list[FieldDef] = field(default_factory=list)


@dataclass
class ConstDef:
    """A constant declaration. Parsed but never emitted."""

    name: str = ""
    type: TypeNode | None = None
    value: Any = None


@dataclass
class FunctionDef:
    """A service method."""

    name: str = ""
    arguments: list[FieldDef] = field(default_factory=list)
    return_type: TypeNode | None = None
    exceptions: list[FieldDef] = field(default_factory=list)


@dataclass
class ServiceDef:
    """A service declaration with an optional parent service."""

    name: str = ""
    functions: list[FunctionDef] = field(default_factory=list)
    extends: ServiceDef | None = field(default=None, repr=False, compare=False)

    # Name of the program (document) that declares this service
    program_name: str = ""


@dataclass
class Program:
    """Root of a parsed Thrift program."""

    name: str = ""
    enums: list[EnumDef] = field(default_factory=list)
    typedefs: list[TypedefDef] = field(default_factory=list)
    consts: list[ConstDef] = field(default_factory=list)

    # Structs, unions and exceptions in declaration order
    objects: list[StructDef] = field(default_factory=list)

    services: list[ServiceDef] = field(default_factory=list)
    includes: list[Program] = field(default_factory=list, repr=False)
