"""
Analyzer module.

Contains type mapping, inheritance linearization, and IR building.
"""

from __future__ import annotations

from .analyzer import ProgramAnalyzer
from .inheritance import MAX_CHAIN_DEPTH, ChainLevel, linearize
from .ir_nodes import (
    IR,
    AliasDecl,
    ComposedField,
    EnumDecl,
    EnumVariant,
    FieldSpec,
    GenericBound,
    MethodDescriptor,
    ServiceDecl,
    StructDecl,
)
from .type_mapper import TypeMapper, true_type

__all__ = [
    "IR",
    "AliasDecl",
    "ChainLevel",
    "ComposedField",
    "EnumDecl",
    "EnumVariant",
    "FieldSpec",
    "GenericBound",
    "MAX_CHAIN_DEPTH",
    "MethodDescriptor",
    "ProgramAnalyzer",
    "ServiceDecl",
    "StructDecl",
    "TypeMapper",
    "linearize",
    "true_type",
]
