"""
Pytest configuration and shared fixtures for the tagcloud test suite.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'tagcloud' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Render without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tagcloud.core.geometry import Point  # noqa: E402
from tagcloud.core.layouter import CircularCloudLayouter  # noqa: E402
from tagcloud.utils.config_loader import clear_config_cache  # noqa: E402
from tagcloud_render import render_to_file  # noqa: E402

FAILED_LAYOUTS_DIR = PROJECT_ROOT / "tests" / "failed_layouts"

CLOUD_CENTER = Point(720, 720)

LAYOUT_CFG = {
    "center": [720, 720],
    "spiral": {"angle_step": 0.1, "radius_step": 0.1},
    "compaction": {"enabled": True, "step": 1},
    "search": {"max_candidates": 500_000},
}


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the test item (rep_setup, rep_call, ...)."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_layout_config_dict():
    """
    Fixture providing a complete valid layout configuration dictionary.
    """
    return {
        "center": list(LAYOUT_CFG["center"]),
        "spiral": dict(LAYOUT_CFG["spiral"]),
        "compaction": dict(LAYOUT_CFG["compaction"]),
        "search": dict(LAYOUT_CFG["search"]),
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_layout_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_layout_config_dict, f)

    yield temp_yaml_file


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def layouter(request):
    """Layouter centered on CLOUD_CENTER.

    When the test using it fails, the session's rectangles are rendered to
    tests/failed_layouts/<test name>.png for inspection.
    """
    session = CircularCloudLayouter(CLOUD_CENTER)
    yield session

    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed or not session.rectangles:
        return

    path = render_to_file(session.rectangles, FAILED_LAYOUTS_DIR / f"{request.node.name}.png")
    print(f"Layout image saved to {path}")


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "render: tests that need PySide6")
