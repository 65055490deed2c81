"""
Pipeline generator orchestrating the code generation phases.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import __version__
from .analyzer import ProgramAnalyzer
from .backends import CodeBackend, RustBackend
from .config import CodeGeneratorConfig
from .schema_ast import Program, ProgramParser

logger = logging.getLogger(__name__)

GENERATOR_NAME = "thrift_to_rust"


class PipelineGenerator:
    """Generates the Rust module of one Thrift program.

    Usage:
        program = ProgramParser().parse_file(Path("tutorial.json"))
        code = PipelineGenerator(program).generate()
    """

    def __init__(self, program: Program, config: CodeGeneratorConfig | None = None):
        self.program = program
        self.config = config or CodeGeneratorConfig()

    @classmethod
    def from_file(cls, path: Path, config: CodeGeneratorConfig | None = None, name: str | None = None) -> PipelineGenerator:
        """Build a generator for a program document on disk."""
        return cls(ProgramParser().parse_file(path, name=name), config)

    def generate(self) -> str:
        """
        Run the analyzer and the backend.

        Returns:
            Generated Rust source

        Raises:
            CodeGenerationError: If the program cannot be mapped to Rust
        """
        logger.debug(f"Generating Rust module for program {self.program.name}")

        ir = ProgramAnalyzer(self.config).analyze(self.program)
        ir.generation_comment = self.generation_comment()

        backend: CodeBackend = RustBackend(self.config)
        return backend.generate(ir)

    @staticmethod
    def generation_comment() -> str:
        return f"Autogenerated by {GENERATOR_NAME} ({__version__})"
