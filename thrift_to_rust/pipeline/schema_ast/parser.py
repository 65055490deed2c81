"""
Program document parser that builds an AST.

Phase 1 of the pipeline: turn the JSON serialization of an already-parsed
Thrift program into AST nodes, resolving named references against the
program's own declarations and its includes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import ProgramParseError
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

logger = logging.getLogger(__name__)


class ProgramParser:
    """Parses program documents into Program ASTs."""

    # Base type spellings accepted in type expressions
    BASE_TYPES = {
        "void": BaseKind.VOID,
        "bool": BaseKind.BOOL,
        "byte": BaseKind.BYTE,
        "i8": BaseKind.BYTE,
        "i16": BaseKind.I16,
        "i32": BaseKind.I32,
        "i64": BaseKind.I64,
        "double": BaseKind.DOUBLE,
        "string": BaseKind.STRING,
        "binary": BaseKind.BINARY,
    }

    def __init__(self) -> None:
        # Programs already loaded from disk, keyed by resolved path
        self._loaded: dict[Path, Program] = {}
        # Paths whose includes are still being loaded
        self._loading: set[Path] = set()

    def parse_file(self, path: Path, name: str | None = None) -> Program:
        """
        Load a program document and, recursively, the documents it includes.

        Args:
            path: Path to the JSON program document
            name: Program name override (defaults to the document's name or the file stem)

        Returns:
            The parsed Program
        """
        path = Path(path).resolve()
        if path in self._loaded and name is None:
            return self._loaded[path]
        if path in self._loading:
            raise ProgramParseError(f"Include cycle through {path.name}")

        with open(path, encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise ProgramParseError(f"{path.name} is not valid JSON: {e}") from e
        if not isinstance(document, dict):
            raise ProgramParseError(f"{path.name} does not hold a program document")

        self._loading.add(path)
        try:
            includes = []
            for include in document.get("includes", []):
                include_path = path.parent / include
                if not include_path.exists():
                    raise ProgramParseError(f"Include '{include}' of {path.name} not found")
                logger.debug(f"Loading include {include_path}")
                includes.append(self.parse_file(include_path))
        finally:
            self._loading.discard(path)

        program = self.parse(document, name or document.get("name") or path.stem, includes)
        # Renamed programs must not shadow the document for later includes
        if name is None:
            self._loaded[path] = program
        return program

    def parse(self, document: dict[str, Any], name: str | None = None, includes: list[Program] | None = None) -> Program:
        """
        Parse a program document into an AST.

        Declarations are registered before any type expression is resolved,
        so references may point forward and structs may be recursive.

        Args:
            document: The program document dictionary
            name: Program name (defaults to the document's "name")
            includes: Already parsed programs this document includes

        Returns:
            Program with every reference resolved
        """
        program = Program(name=name or document.get("name", ""), includes=list(includes or []))
        if not program.name:
            raise ProgramParseError("Program document has no name")

        # Register declarations first
        for enum_doc in document.get("enums", []):
            program.enums.append(self._parse_enum(enum_doc))
        for typedef_doc in document.get("typedefs", []):
            program.typedefs.append(TypedefDef(name=self._require(typedef_doc, "name", "typedef")))
        for struct_doc in document.get("structs", []):
            program.objects.append(self._parse_struct_shell(struct_doc))
        for service_doc in document.get("services", []):
            program.services.append(
                ServiceDef(name=self._require(service_doc, "name", "service"), program_name=program.name)
            )

        # Then resolve bodies
        for typedef, typedef_doc in zip(program.typedefs, document.get("typedefs", [])):
            typedef.type = self._parse_type(self._require(typedef_doc, "type", f"typedef {typedef.name}"), program)
        for struct, struct_doc in zip(program.objects, document.get("structs", [])):
            struct.members = [
                self._parse_field(f, program, f"{struct.name}") for f in struct_doc.get("fields", [])
            ]
        for service, service_doc in zip(program.services, document.get("services", [])):
            self._parse_service_body(service, service_doc, program)
        for const_doc in document.get("consts", []):
            program.consts.append(
                ConstDef(
                    name=self._require(const_doc, "name", "const"),
                    type=self._parse_type(self._require(const_doc, "type", "const"), program),
                    value=const_doc.get("value"),
                )
            )

        self._check_typedef_cycles(program)
        self._check_service_cycles(program)
        return program

    def _require(self, doc: dict[str, Any], key: str, what: str) -> Any:
        if key not in doc:
            raise ProgramParseError(f"Missing '{key}' in {what} declaration")
        return doc[key]

    def _require_int(self, doc: dict[str, Any], key: str, what: str) -> int:
        value = self._require(doc, key, what)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ProgramParseError(f"'{key}' of {what} must be an integer, got {value!r}") from e

    def _parse_enum(self, doc: dict[str, Any]) -> EnumDef:
        name = self._require(doc, "name", "enum")
        values = []
        for value_doc in doc.get("values", []):
            values.append(
                EnumValue(
                    name=self._require(value_doc, "name", f"enum {name}"),
                    value=self._require_int(value_doc, "value", f"enum {name}"),
                )
            )
        return EnumDef(name=name, values=values)

    def _parse_struct_shell(self, doc: dict[str, Any]) -> StructDef:
        name = self._require(doc, "name", "struct")
        try:
            kind = StructKind(doc.get("kind", "struct"))
        except ValueError:
            raise ProgramParseError(f"Unknown object kind '{doc['kind']}' for {name}") from None
        return StructDef(name=name, kind=kind)

    def _parse_field(self, doc: dict[str, Any], program: Program, owner: str) -> FieldDef:
        name = self._require(doc, "name", f"field of {owner}")
        return FieldDef(
            name=name,
            type=self._parse_type(self._require(doc, "type", f"field {owner}.{name}"), program),
            key=self._require_int(doc, "id", f"field {owner}.{name}"),
        )

    def _parse_service_body(self, service: ServiceDef, doc: dict[str, Any], program: Program) -> None:
        parent_name = doc.get("extends")
        if parent_name:
            service.extends = self._lookup_service(parent_name, program)

        for function_doc in doc.get("functions", []):
            function_name = self._require(function_doc, "name", f"function of service {service.name}")
            owner = f"{service.name}.{function_name}"
            service.functions.append(
                FunctionDef(
                    name=function_name,
                    arguments=[self._parse_field(a, program, owner) for a in function_doc.get("args", [])],
                    return_type=self._parse_type(function_doc.get("returns", "void"), program),
                    exceptions=[self._parse_field(e, program, owner) for e in function_doc.get("throws", [])],
                )
            )

    def _parse_type(self, expr: Any, program: Program) -> TypeNode:
        """
        Parse a type expression.

        Args:
            expr: A base type or declaration name, or a container object
            program: Program used to resolve named references

        Returns:
            The matching TypeNode
        """
        if isinstance(expr, str):
            if expr in self.BASE_TYPES:
                return BaseType(kind=self.BASE_TYPES[expr])
            return self._lookup_named_type(expr, program)

        if isinstance(expr, dict):
            if "list" in expr:
                return ListType(elem_type=self._parse_type(expr["list"], program))
            if "set" in expr:
                return SetType(elem_type=self._parse_type(expr["set"], program))
            if "map" in expr:
                map_doc = expr["map"]
                if not isinstance(map_doc, dict) or "key" not in map_doc or "value" not in map_doc:
                    raise ProgramParseError(f"Map type needs 'key' and 'value': {expr}")
                return MapType(
                    key_type=self._parse_type(map_doc["key"], program),
                    value_type=self._parse_type(map_doc["value"], program),
                )

        raise ProgramParseError(f"Invalid type expression: {expr!r}")

    def _scope_for(self, name: str, program: Program) -> tuple[Program, str]:
        """Split "include.Name" into the included program and the bare name."""
        if "." not in name:
            return program, name
        scope, bare_name = name.split(".", 1)
        for include in program.includes:
            if include.name == scope:
                return include, bare_name
        raise ProgramParseError(f"Unknown include '{scope}' in reference '{name}'")

    def _lookup_named_type(self, name: str, program: Program) -> TypeNode:
        scope, bare_name = self._scope_for(name, program)
        for enum in scope.enums:
            if enum.name == bare_name:
                return EnumRef(name=enum.name, definition=enum)
        for typedef in scope.typedefs:
            if typedef.name == bare_name:
                return TypedefRef(name=typedef.name, definition=typedef)
        for struct in scope.objects:
            if struct.name == bare_name:
                return StructRef(name=struct.name, definition=struct)
        raise ProgramParseError(f"Unknown type '{name}' in program {program.name}")

    def _lookup_service(self, name: str, program: Program) -> ServiceDef:
        scope, bare_name = self._scope_for(name, program)
        for service in scope.services:
            if service.name == bare_name:
                return service
        raise ProgramParseError(f"Unknown parent service '{name}' in program {program.name}")

    def _check_typedef_cycles(self, program: Program) -> None:
        """Reject typedefs that reach themselves, directly or through containers.

        Struct and enum references end the walk: recursive structs are valid.
        """
        for typedef in program.typedefs:
            seen: set[int] = set()
            pending = [typedef.type]
            while pending:
                target = pending.pop()
                if isinstance(target, TypedefRef):
                    if target.definition is typedef:
                        raise ProgramParseError(f"Typedef cycle through '{typedef.name}'")
                    if id(target.definition) not in seen:
                        seen.add(id(target.definition))
                        pending.append(target.definition.type)
                elif isinstance(target, (ListType, SetType)):
                    pending.append(target.elem_type)
                elif isinstance(target, MapType):
                    pending.extend((target.key_type, target.value_type))

    def _check_service_cycles(self, program: Program) -> None:
        for service in program.services:
            seen = {id(service)}
            parent = service.extends
            while parent is not None:
                if id(parent) in seen:
                    raise ProgramParseError(f"Service inheritance cycle through '{service.name}'")
                seen.add(id(parent))
                parent = parent.extends
