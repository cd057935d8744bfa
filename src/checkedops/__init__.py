"""CHECKEDOPS

A catalog of small, stateless operations that validate their inputs and
signal every rejected input with a structured error and a fixed message.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
