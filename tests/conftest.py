import json

import pytest

from svelte_icons.config import get_generator_config
from svelte_icons.log import log

GITHUB_PATH = "M12 .297c-6.63 0-12 5.373-12 12 0 5.303 3.438 9.8 8.205 11.385z"
GITLAB_PATH = "m23.6 9.593-.033-.086L20.3.98a.851.851 0 0 0-.336-.405z"


@pytest.fixture(autouse=True)
def _reset_logger(monkeypatch):
    for name in ("SVELTE_ICONS_LOG", "ICONS_SOURCE", "ICONS_LIB_DIR", "ICONS_OUTPUT_DIR",
                 "ICONS_MANIFEST", "ICONS_PREFIX", "ICONS_EXTENSION", "ICONS_STRICT_SOURCE"):
        monkeypatch.delenv(name, raising=False)
    handlers = list(log.handlers)
    yield
    for handler in list(log.handlers):
        if handler not in handlers:
            log.removeHandler(handler)


@pytest.fixture
def dataset():
    return {
        "siPrefix": "si",
        "siGithub": {"title": "GitHub", "path": GITHUB_PATH, "hex": "181717", "source": "https://github.com"},
        "siGitlab": {"title": "GitLab", "path": GITLAB_PATH, "hex": "FC6D26"},
    }


@pytest.fixture
def write_source(tmp_path):
    def _write(data, name="icons.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_config(tmp_path):
    def _make(source_path, **kwargs):
        kwargs.setdefault("lib_dir", tmp_path / "src" / "lib")
        return get_generator_config(source_path=source_path, **kwargs)

    return _make
