"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed program, ready for code generation.
All names are normalized and all types are rendered as Rust expressions.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FieldSpec:
    """A tagged field, argument or declared exception."""

    name: str = ""  # Normalized Rust field name
    type: str = ""  # Rendered Rust type
    tag: int = 0  # Thrift field id, verbatim


@dataclass
class EnumVariant:
    """An enum variant with its literal discriminant."""

    name: str = ""
    value: int = 0


@dataclass
class EnumDecl:
    """An enum ready for the enom! macro."""

    name: str = ""
    original_name: str = ""
    variants: list[EnumVariant] = field(default_factory=list)
    default: str = ""


@dataclass
class AliasDecl:
    """A typedef ready to be emitted as a Rust type alias."""

    name: str = ""
    original_name: str = ""
    target: str = ""


@dataclass
class StructDecl:
    """A struct, union or exception ready for the strukt! macro."""

    name: str = ""
    original_name: str = ""
    kind: str = "struct"
    fields: list[FieldSpec] = field(default_factory=list)


@dataclass
class MethodDescriptor:
    """A service method as dispatched by the generated processor."""

    args_name: str = ""  # e.g. CalculatorAddArgs
    result_name: str = ""  # e.g. CalculatorAddResult
    receiver: str = ""  # Field letter of the chain level that declares the method
    name: str = ""  # Method name, verbatim
    args: list[FieldSpec] = field(default_factory=list)
    return_type: str = ""
    exceptions: list[FieldSpec] = field(default_factory=list)


@dataclass
class GenericBound:
    """A generic parameter bound to one level's service trait."""

    param: str = ""  # A, B, ...
    bound: str = ""  # Trait name


@dataclass
class ComposedField:
    """A processor field holding one level's implementation."""

    name: str = ""  # a, b, ...
    param: str = ""  # Matching generic parameter


@dataclass
class ServiceDecl:
    """A service ready for the service! macro."""

    trait_name: str = ""
    processor_name: str = ""
    client_name: str = ""
    original_name: str = ""

    # Methods declared by the service itself, always received by field "a"
    service_methods: list[MethodDescriptor] = field(default_factory=list)

    # Methods declared by ancestors, in ancestor order
    parent_methods: list[MethodDescriptor] = field(default_factory=list)

    bounds: list[GenericBound] = field(default_factory=list)
    fields: list[ComposedField] = field(default_factory=list)


@dataclass
class IR:
    """The complete Intermediate Representation of one program."""

    program_name: str = ""

    # Namespaces of ancestor services declared in other programs
    uses: list[str] = field(default_factory=list)

    enums: list[EnumDecl] = field(default_factory=list)
    aliases: list[AliasDecl] = field(default_factory=list)

    # Structs, unions and exceptions in declaration order
    structs: list[StructDecl] = field(default_factory=list)

    services: list[ServiceDecl] = field(default_factory=list)

    # Generation comment
    generation_comment: str = ""
