"""Query interpretation on top of an index adapter."""

from indexbridge.core.interpreter import QueryInterpreter

__all__ = ["QueryInterpreter"]
