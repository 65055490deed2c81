"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Add generation banner at top of file
    add_generation_comment: bool = True

    # Extra `use` paths appended to the import preamble (e.g. "std::rc::Rc")
    additional_uses: list[str] = field(default_factory=list)

    # Thrift names of enums, typedefs, objects or services to leave out
    ignore_definitions: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "additional_uses": self.additional_uses,
            "ignore_definitions": self.ignore_definitions,
        }
