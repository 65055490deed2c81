"""
Pipeline - Thrift program to Rust code generator.

This module provides a multi-phase architecture for generating the Rust
module of a Thrift program:

1. Phase 1 (Parser): Load a program document into a Program AST
2. Phase 2 (Analyzer): Normalize names, render types and linearize services into IR
3. Phase 3 (Backend): Render the IR through Jinja2 templates
"""

from __future__ import annotations

from .config import CodeGeneratorConfig
from .errors import (
    CodeGenerationError,
    InheritanceDepthError,
    ProgramParseError,
    UnsupportedTypeError,
)
from .generator import PipelineGenerator
from .schema_ast import ProgramParser

__all__ = [
    "PipelineGenerator",
    "ProgramParser",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "InheritanceDepthError",
    "ProgramParseError",
    "UnsupportedTypeError",
]
