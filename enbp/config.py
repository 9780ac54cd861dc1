"""Configuration for the path cover solver."""

import logging
from dataclasses import dataclass

from enbp.types import NodeOrder


@dataclass
class SolverConfig:
    """Options controlling validation and diagnostics of a solve."""

    # Interpretation of node indices; INDEX requires edges to go low -> high
    node_order: NodeOrder = NodeOrder.INDEX

    # Reject cyclic input up front instead of relying on the enumeration guard
    check_cycles: bool = True

    # Emit progress messages at INFO instead of DEBUG
    verbose: bool = False

    @property
    def progress_level(self) -> int:
        """Logging level used for diagnostic progress messages."""
        return logging.INFO if self.verbose else logging.DEBUG


# Global default configuration instance
DEFAULT_CONFIG = SolverConfig()
