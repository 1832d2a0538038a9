"""Root-level pytest fixtures for the hmpi test suite.

Provides shared configuration, standards and sample fixtures following the
Pydantic-based architecture. Tests use these fixtures instead of building
raw dict configs.
"""

import logging

import pytest

from hmpi.indices import IndexEngine
from hmpi.reference import StandardsOverlay
from hmpi.schemas import ParamConfig, UserConfig, SampleInput, SampleMeta, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_precision(make_config):
    ...     config = make_config(DISPLAY_PRECISION=4)
    ...     assert config.report.precision == 4
    """
    def _make(**user_overrides):
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides))
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Standards and Engine Fixtures
# =============================================================================

@pytest.fixture
def default_standards():
    """Registry defaults with no overrides."""
    return StandardsOverlay().resolve()


@pytest.fixture
def engine(default_standards):
    """Index engine over registry defaults."""
    return IndexEngine(default_standards)


# =============================================================================
# Sample Fixtures
# =============================================================================

@pytest.fixture
def make_sample():
    """Factory for SampleInput with a given ID and concentrations."""
    def _make(concentrations, sample_id="WQ-001", **meta):
        return SampleInput(
            meta=SampleMeta(sample_id=sample_id, **meta),
            concentrations=dict(concentrations),
        )

    return _make


@pytest.fixture
def pb_cu_concentrations():
    """Worked example: Pb at twice its standard, Cu at half of it."""
    return {"Pb": 0.02, "Cu": 1.0}


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
