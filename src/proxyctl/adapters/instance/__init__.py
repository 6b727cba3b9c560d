"""Instance lifecycle adapters."""

from .memory import InMemoryInstance
from .process import ProcessInstance

__all__ = ["InMemoryInstance", "ProcessInstance"]
