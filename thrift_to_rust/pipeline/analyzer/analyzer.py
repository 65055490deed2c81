"""
Program analyzer.

Phase 2 of the pipeline: walk a parsed Program and build the IR consumed by
the Rust backend. Every name is normalized and every type rendered here, so
the backend only has to lay the declarations out.
"""

from __future__ import annotations

import logging

from ...utils import field_case, type_case, underscore
from ..config import CodeGeneratorConfig
from ..errors import CodeGenerationError
from ..schema_ast.nodes import EnumDef, FieldDef, Program, ServiceDef, StructDef, TypedefDef
from .inheritance import ChainLevel, linearize
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
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class ProgramAnalyzer:
    """Builds the IR of a program for the Rust backend."""

    def __init__(self, config: CodeGeneratorConfig | None = None):
        self.config = config or CodeGeneratorConfig()
        self.type_mapper = TypeMapper()

    def analyze(self, program: Program) -> IR:
        """
        Analyze a program.

        Declarations keep the program's order within each group: enums,
        typedefs, objects (structs, unions and exceptions interleaved as
        declared), then services.

        Args:
            program: The parsed program

        Returns:
            The IR of the program
        """
        ir = IR(program_name=program.name)
        ignored = set(self.config.ignore_definitions)

        services = [s for s in program.services if s.name not in ignored]
        ir.uses = self.collect_uses(program, services)

        ir.enums = [self.analyze_enum(e) for e in program.enums if e.name not in ignored]
        ir.aliases = [self.analyze_typedef(t) for t in program.typedefs if t.name not in ignored]
        ir.structs = [self.analyze_struct(s) for s in program.objects if s.name not in ignored]

        if program.consts:
            logger.debug(f"Skipping {len(program.consts)} constant(s) in {program.name}: constants are not generated")

        ir.services = [self.analyze_service(s) for s in services]
        return ir

    def collect_uses(self, program: Program, services: list[ServiceDef]) -> list[str]:
        """Namespaces to glob-import for ancestors declared in other programs."""
        uses: list[str] = []
        for service in services:
            for level in linearize(service)[1:]:
                if level.service.program_name == program.name:
                    continue
                namespace = underscore(level.service.program_name)
                if namespace not in uses:
                    uses.append(namespace)
        return uses

    def analyze_enum(self, enum: EnumDef) -> EnumDecl:
        """Build an enum declaration, defaulting to the first declared variant."""
        if not enum.values:
            raise CodeGenerationError(f"Enum '{enum.name}' has no values")

        variants = [EnumVariant(name=type_case(v.name), value=v.value) for v in enum.values]
        return EnumDecl(
            name=type_case(enum.name),
            original_name=enum.name,
            variants=variants,
            default=variants[0].name,
        )

    def analyze_typedef(self, typedef: TypedefDef) -> AliasDecl:
        return AliasDecl(
            name=type_case(typedef.name),
            original_name=typedef.name,
            target=self.type_mapper.render(typedef.type),
        )

    def analyze_struct(self, struct: StructDef) -> StructDecl:
        return StructDecl(
            name=type_case(struct.name),
            original_name=struct.name,
            kind=struct.kind.value,
            fields=self.analyze_fields(struct.members),
        )

    def analyze_fields(self, fields: list[FieldDef]) -> list[FieldSpec]:
        """Render fields in declaration order, keeping their tags untouched."""
        return [FieldSpec(name=field_case(f.name), type=self.type_mapper.render(f.type), tag=f.key) for f in fields]

    def analyze_service(self, service: ServiceDef) -> ServiceDecl:
        """
        Build a service declaration.

        The composed processor is generic over one implementation per
        chain level. Methods declared by the service itself go to the
        trait; inherited ones are dispatched to the field of the level
        that declared them.

        Args:
            service: The service being emitted

        Returns:
            Service declaration with its methods, bounds and fields
        """
        levels = linearize(service)
        trait_name = type_case(service.name)

        decl = ServiceDecl(
            trait_name=trait_name,
            processor_name=f"{trait_name}Processor",
            client_name=f"{trait_name}Client",
            original_name=service.name,
        )
        decl.service_methods = self.analyze_methods(levels[0])
        for level in levels[1:]:
            decl.parent_methods.extend(self.analyze_methods(level))

        decl.bounds = [GenericBound(param=level.generic, bound=type_case(level.service.name)) for level in levels]
        decl.fields = [ComposedField(name=level.field, param=level.generic) for level in levels]
        return decl

    def analyze_methods(self, level: ChainLevel) -> list[MethodDescriptor]:
        """Describe the methods declared directly at one chain level."""
        service_name = type_case(level.service.name)
        methods = []
        for function in level.service.functions:
            prefix = service_name + type_case(function.name)
            methods.append(
                MethodDescriptor(
                    args_name=f"{prefix}Args",
                    result_name=f"{prefix}Result",
                    receiver=level.field,
                    name=function.name,
                    args=self.analyze_fields(function.arguments),
                    return_type=self.type_mapper.render(function.return_type),
                    exceptions=self.analyze_fields(function.exceptions),
                )
            )
        return methods
