import json
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

SITE_DESCRIPTOR = {
    "content": ["./templates/**/*.{html,tera}"],
    "theme": {"extend": {}},
    "plugins": ["forms", "typography"],
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep TWCONFIG_* variables out of the tests, including ones a .env file sets."""
    for name in ("TWCONFIG_PATH", "TWCONFIG_BASE_DIR", "TWCONFIG_OUTPUT_DIR",
                 "TWCONFIG_LOG_LEVEL", "TWCONFIG_EXPORT_FORMATS"):
        # setenv first so teardown always restores the pre-test state
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def write_descriptor(tmp_path: Path) -> Callable[..., Path]:
    """Write descriptor data to a YAML (default) or JSON file and return its path."""

    def _write(data: Any, name: str = "tailwind.config.yaml") -> Path:
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(data), encoding="utf-8")
        elif isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A site with Tera templates, matching SITE_DESCRIPTOR content."""
    templates = tmp_path / "site" / "templates"
    (templates / "posts").mkdir(parents=True)
    (templates / "base.html.tera").write_text("<body class=\"prose\">{% block content %}{% endblock %}</body>")
    (templates / "index.html").write_text("<div class=\"mx-auto max-w-2xl\"></div>")
    (templates / "posts" / "show.tera").write_text("<article class=\"prose lg:prose-xl\"></article>")
    (templates / "posts" / "notes.txt").write_text("not a template")
    return tmp_path / "site"
