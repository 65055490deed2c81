"""
Schema AST module.

Contains the Thrift program AST nodes and the program document parser.
"""

from __future__ import annotations

from .nodes import (
    BaseKind,
    BaseType,
    ConstDef,
    EnumDef,
    EnumRef,
    EnumValue,
    FieldDef,
    FunctionDef,
    ListType,
    MapType,
    Program,
    ServiceDef,
    SetType,
    StructDef,
    StructKind,
    StructRef,
    TypedefDef,
    TypedefRef,
    TypeNode,
)
from .parser import ProgramParser

__all__ = [
    "BaseKind",
    "BaseType",
    "ConstDef",
    "EnumDef",
    "EnumRef",
    "EnumValue",
    "FieldDef",
    "FunctionDef",
    "ListType",
    "MapType",
    "Program",
    "ProgramParser",
    "ServiceDef",
    "SetType",
    "StructDef",
    "StructKind",
    "StructRef",
    "TypedefDef",
    "TypedefRef",
    "TypeNode",
]
