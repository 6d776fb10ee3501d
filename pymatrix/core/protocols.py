"""
Core protocols for pymatrix.

These define structural interfaces that element types and compute backends
must satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that builtin numbers, fractions, decimals and numpy scalars all
qualify without registration.

Design Principles:
    - One cohesive capability bundle for elements, not per-operation bounds
    - Backends are stateless apart from construction-time settings
"""

from typing import Any, Callable, Protocol, runtime_checkable

Grid = list[list[Any]]


@runtime_checkable
class Numeric(Protocol):
    """
    Capability set required of matrix elements.

    An element type qualifies when it supports:
        - addition (``a + b``); ``+=`` falls back to it when no ``__iadd__``
        - multiplication (``a * b``); ``*=`` falls back the same way
        - zero construction, supplied by the matrix's ``dtype`` factory
          (``int()``, ``Fraction()``, ``numpy.int8()``, ...)
        - duplication via ``copy.copy``

    Only the operator half of the bundle can be checked structurally;
    ``isinstance(x, Numeric)`` is True for int, float, complex, Fraction,
    Decimal and numpy scalars.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for matrix compute backends.

    Backends operate on raw row-major grids (lists of row lists) and always
    return freshly built rows. They never mutate their inputs.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cpu', 'threads'
        """
        ...

    def transpose(self, values: Grid, rows: int, cols: int) -> Grid:
        """Return the (cols x rows) transpose of ``values``."""
        ...

    def map(self, values: Grid, func: Callable[[Any], Any]) -> Grid:
        """Apply ``func`` to every element, preserving positions."""
        ...

    def matmul(
        self,
        a: Grid,
        b: Grid,
        n: int,
        m: int,
        q: int,
        zero: Callable[[], Any],
    ) -> Grid:
        """
        Dense product of an (n x m) grid and an (m x q) grid.

        Each output cell starts from ``zero()`` and accumulates with ``+=``.
        """
        ...
