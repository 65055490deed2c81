"""
Rust code generation backend.

Generates macro invocations (enom!, strukt!, service!) and type aliases from
IR. The macros themselves are provided by the Thrift Rust runtime crate.
"""

from __future__ import annotations

from ..analyzer.ir_nodes import IR, ServiceDecl
from .base import CodeBackend


class RustBackend(CodeBackend):
    """Rust code generation backend."""

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"
    TEMPLATE_KINDS = ("prefix", "uses", "enum", "typedef", "struct", "service")

    def generate(self, ir: IR) -> str:
        """Generate one Rust module from IR, blocks separated by a blank line."""
        blocks = [
            self.render(
                "prefix",
                generation_comment=ir.generation_comment if self.config.add_generation_comment else "",
                additional_uses=self.config.additional_uses,
            )
        ]

        if ir.uses:
            blocks.append(self.render("uses", namespaces=ir.uses))

        blocks.extend(self.render("enum", enum=enum) for enum in ir.enums)
        blocks.extend(self.render("typedef", alias=alias) for alias in ir.aliases)
        blocks.extend(self.render("struct", struct=struct) for struct in ir.structs)
        blocks.extend(self.render("service", **self._prepare_service_context(service)) for service in ir.services)

        return "\n\n".join(blocks) + "\n"

    def _prepare_service_context(self, service: ServiceDecl) -> dict:
        """
        Prepare the template context for a service.

        Args:
            service: The service declaration

        Returns:
            Dictionary of template variables
        """
        return {
            "service": service,
            "method_sections": [
                ("service_methods", service.service_methods),
                ("parent_methods", service.parent_methods),
            ],
            "bounds": [f"{b.param}: {b.bound}" for b in service.bounds],
            "fields": [f"{f.name}: {f.param}" for f in service.fields],
        }
