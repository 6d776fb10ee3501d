"""
Tests for backend selection policy.
"""

import dataclasses

import pytest

from pymatrix.core.config import BackendConfig, DEFAULT_CONFIG, select_backend_name
from pymatrix.core.exceptions import ValidationError


class TestBackendConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.min_parallel_elements == 4096
        assert DEFAULT_CONFIG.max_workers is None

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_workers = 4


class TestSelectBackendName:

    def test_explicit_choices_pass_through(self):
        assert select_backend_name('cpu', 10**9) == 'cpu'
        assert select_backend_name('threads', 1) == 'threads'

    def test_auto_small_is_cpu(self):
        assert select_backend_name('auto', 4095) == 'cpu'

    def test_auto_large_is_threads(self):
        assert select_backend_name('auto', 4096) == 'threads'

    def test_auto_respects_config(self):
        config = BackendConfig(min_parallel_elements=4)
        assert select_backend_name('auto', 4, config) == 'threads'
        assert select_backend_name('auto', 3, config) == 'cpu'

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError):
            select_backend_name('cuda', 100)
