"""Game input handling: action bindings, commands, conflict strategies and simulated device adapters."""

__version__ = "0.1.0"