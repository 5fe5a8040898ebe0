"""Composable quantum gate expressions dispatched to a pluggable, logging simulator."""

__version__ = "0.1.0"
__all__ = ["gatemath", "simulator", "qasm", "main"]