"""Address graph: connected components of the sender/recipient graph."""

from txn_synth.network.components import (
    ComponentSummary,
    extract_largest_component,
    label_components,
    largest_component,
)

__all__ = [
    "ComponentSummary",
    "extract_largest_component",
    "label_components",
    "largest_component",
]
