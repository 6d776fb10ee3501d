"""
Backend selection policy.

Defines when the 'auto' backend choice switches from the sequential CPU
reference to the thread-pool backend, and the default pool size.

Used by Matrix.mapped(), Matrix.multiply() and the test suite.
"""

from dataclasses import dataclass

from pymatrix.core.validation import check_backend_choice


@dataclass(frozen=True)
class BackendConfig:
    """Policy for resolving backend='auto' and sizing worker pools."""
    min_parallel_elements: int = 4096
    max_workers: int | None = None


DEFAULT_CONFIG = BackendConfig()


def select_backend_name(
    backend: str,
    n_elements: int,
    config: BackendConfig = DEFAULT_CONFIG,
) -> str:
    """
    Resolve a backend choice to a concrete backend name.

    'cpu' and 'threads' resolve to themselves. 'auto' resolves to 'threads'
    once the amount of work reaches config.min_parallel_elements, and to
    'cpu' below that.
    """
    check_backend_choice(backend)
    if backend != 'auto':
        return backend
    if n_elements >= config.min_parallel_elements:
        return 'threads'
    return 'cpu'
