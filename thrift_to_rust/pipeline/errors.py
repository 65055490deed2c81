"""
Exceptions raised by the code generation pipeline.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for all generation failures.

    Generation never recovers from these: the whole run is aborted and
    no partial output is written.
    """


class ProgramParseError(CodeGenerationError):
    """Raised when a program document cannot be turned into an AST.

    This can happen when:
    - A type or parent service name cannot be resolved
    - The document is not valid JSON
    - An include cannot be found, or includes form a cycle
    - Typedefs or service inheritance form a cycle
    - A required key is missing or an id is not an integer
    """


class UnsupportedTypeError(CodeGenerationError):
    """Raised when a type node falls outside the closed Thrift type system."""


class InheritanceDepthError(CodeGenerationError):
    """Raised when a service inheritance chain has more levels than generic letters."""
