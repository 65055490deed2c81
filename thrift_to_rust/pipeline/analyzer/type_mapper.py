"""
Mapping of Thrift types onto Rust type expressions.
"""

from __future__ import annotations

from ...utils import type_case
from ..errors import UnsupportedTypeError
from ..schema_ast.nodes import (
    BaseKind,
    BaseType,
    EnumRef,
    ListType,
    MapType,
    SetType,
    StructRef,
    TypedefRef,
    TypeNode,
)


def true_type(type_node: TypeNode) -> TypeNode:
    """Follow typedef indirection until a non-alias type is reached."""
    while isinstance(type_node, TypedefRef):
        type_node = type_node.definition.type
    return type_node


class TypeMapper:
    """Renders Thrift type nodes as Rust type expressions."""

    TYPE_MAP = {
        BaseKind.VOID: "()",
        BaseKind.BOOL: "bool",
        BaseKind.BYTE: "i8",
        BaseKind.I16: "i16",
        BaseKind.I32: "i32",
        BaseKind.I64: "i64",
        BaseKind.DOUBLE: "f64",
        BaseKind.STRING: "String",
        BaseKind.BINARY: "Vec<u8>",
    }

    def render(self, type_node: TypeNode) -> str:
        """
        Render a type as Rust.

        Typedefs are always resolved first, so an alias and its target
        render identically.

        Args:
            type_node: The type to render

        Returns:
            Rust type expression

        Raises:
            UnsupportedTypeError: If the node is not part of the Thrift type system
        """
        type_node = true_type(type_node)

        if isinstance(type_node, BaseType):
            if type_node.kind not in self.TYPE_MAP:
                raise UnsupportedTypeError(f"Unsupported base type: {type_node.kind!r}")
            return self.TYPE_MAP[type_node.kind]

        if isinstance(type_node, (EnumRef, StructRef)):
            return type_case(type_node.name)

        if isinstance(type_node, ListType):
            return f"Vec<{self.render(type_node.elem_type)}>"

        if isinstance(type_node, SetType):
            return f"HashSet<{self.render(type_node.elem_type)}>"

        if isinstance(type_node, MapType):
            return f"HashMap<{self.render(type_node.key_type)}, {self.render(type_node.value_type)}>"

        raise UnsupportedTypeError(f"Unsupported type in Rust backend: {type_node!r}")
