"""Thrift to Rust Generator

A Python package for generating the Rust module of a parsed Thrift program.
Maps Thrift types onto Rust types and encodes service inheritance chains
as generic composed processors.
"""

__version__ = "0.1.0"

from .pipeline import (
    CodeGenerationError,
    CodeGeneratorConfig,
    InheritanceDepthError,
    PipelineGenerator,
    ProgramParseError,
    ProgramParser,
    UnsupportedTypeError,
)

__all__ = [
    "PipelineGenerator",
    "ProgramParser",
    "CodeGeneratorConfig",
    "CodeGenerationError",
    "InheritanceDepthError",
    "ProgramParseError",
    "UnsupportedTypeError",
]
