"""
Linearization of service inheritance chains.

Rust has no trait inheritance that a generated processor could lean on, so a
service and each of its ancestors become one generic parameter and one field
of the composed processor type. Level 0 is the service itself, level 1 its
parent, and so on; each level gets a letter in alphabetical order.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from ..errors import InheritanceDepthError
from ..schema_ast.nodes import ServiceDef

logger = logging.getLogger(__name__)

MAX_CHAIN_DEPTH = len(string.ascii_uppercase)


@dataclass
class ChainLevel:
    """One service in a linearized inheritance chain."""

    index: int
    service: ServiceDef

    @property
    def generic(self) -> str:
        """Generic parameter letter for this level (A, B, ...)."""
        return string.ascii_uppercase[self.index]

    @property
    def field(self) -> str:
        """Field letter holding this level's implementation (a, b, ...)."""
        return string.ascii_lowercase[self.index]


def linearize(service: ServiceDef) -> list[ChainLevel]:
    """
    Walk the parent chain of a service, self first.

    Args:
        service: The service being emitted

    Returns:
        Chain levels, level 0 being the service itself

    Raises:
        InheritanceDepthError: If the chain has more than MAX_CHAIN_DEPTH levels
    """
    levels: list[ChainLevel] = []
    current: ServiceDef | None = service
    while current is not None:
        if len(levels) == MAX_CHAIN_DEPTH:
            raise InheritanceDepthError(
                f"Service '{service.name}' has more than {MAX_CHAIN_DEPTH} levels of inheritance"
            )
        levels.append(ChainLevel(index=len(levels), service=current))
        current = current.extends

    logger.debug(f"Linearized service {service.name} into {len(levels)} level(s)")
    return levels
