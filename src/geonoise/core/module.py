"""Base classes and protocols for noise modules."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Evaluable(Protocol):
    """Protocol for anything that can be sampled in 3D.

    Any class with an evaluate() method returning a float satisfies this
    protocol, so third-party samplers can be plugged into a module tree.
    """

    def evaluate(self, x: float, y: float, z: float) -> float:
        """Return the value at (x, y, z)."""
        ...


class Module(ABC):
    """Abstract base class for noise modules.

    A module is a pure function of a 3D coordinate. Generators have no
    source modules, modifiers and transformers wrap one, combiners and
    selectors take two or more. Source modules are plain attributes; the
    same module object may feed several parents.
    """

    @abstractmethod
    def evaluate(self, x: float, y: float, z: float) -> float:
        """Return the output value at (x, y, z).

        Returns:
            The module's value at the given coordinate
        """
        pass

    def __call__(self, x: float, y: float, z: float) -> float:
        return self.evaluate(x, y, z)

    def sources(self) -> list[Evaluable]:
        """Source modules this module reads from, in evaluation order."""
        return []
