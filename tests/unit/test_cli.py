import logging

import pytest

from twconfig.cli import main

from tests.conftest import SITE_DESCRIPTOR


@pytest.fixture(autouse=True)
def restore_logging():
    package_logger = logging.getLogger("twconfig")
    handlers, level, propagate = package_logger.handlers[:], package_logger.level, package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


def test_main_success(site_dir, tmp_path, write_descriptor):
    path = write_descriptor(SITE_DESCRIPTOR)
    exit_code = main([
        "-c", str(path),
        "-b", str(site_dir),
        "-o", str(tmp_path / "build"),
        "-f", "js", "markdown",
        "-l", "WARNING",
    ])

    assert exit_code == 0
    assert (tmp_path / "build" / "tailwind.config.js").exists()
    assert list((tmp_path / "build").glob("twconfig_report_*.md"))


def test_main_missing_descriptor(tmp_path):
    exit_code = main(["-c", str(tmp_path / "missing.yaml"), "-b", str(tmp_path), "-o", str(tmp_path / "build")])

    assert exit_code == 1


def test_main_malformed_descriptor(tmp_path, write_descriptor):
    path = write_descriptor({"content": "templates"})
    exit_code = main(["-c", str(path), "-b", str(tmp_path), "-o", str(tmp_path / "build")])

    assert exit_code == 1


def test_main_rejects_non_json_theme_value(tmp_path, write_descriptor):
    path = write_descriptor("content: []\ntheme:\n  extend:\n    released: 2024-01-01\n")
    exit_code = main(["-c", str(path), "-b", str(tmp_path), "-o", str(tmp_path / "build"), "-f", "js"])

    assert exit_code == 1
    assert not (tmp_path / "build" / "tailwind.config.js").exists()
