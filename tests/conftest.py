# tests/conftest.py
import pytest

from prompt_context.config import ExclusionConfig, load_config
from prompt_context.core.filesystem import LocalFileSystem


class RecordingProgress:
    """Progress sink that records messages and cancels after N checks."""

    def __init__(self, cancel_after=None):
        self.messages = []
        self.checks = 0
        self.cancel_after = cancel_after

    def report(self, message):
        self.messages.append(message)

    def is_cancelled(self):
        self.checks += 1
        return self.cancel_after is not None and self.checks > self.cancel_after


class FailingFileSystem(LocalFileSystem):
    """Local filesystem that raises for chosen paths."""

    def __init__(self, fail_stat=(), fail_read=(), fail_list=()):
        self.fail_stat = {str(p) for p in fail_stat}
        self.fail_read = {str(p) for p in fail_read}
        self.fail_list = {str(p) for p in fail_list}

    def stat(self, path):
        if str(path) in self.fail_stat:
            raise PermissionError(f"stat denied: {path}")
        return super().stat(path)

    def read_file(self, path):
        if str(path) in self.fail_read:
            raise PermissionError(f"read denied: {path}")
        return super().read_file(path)

    def read_directory(self, path):
        if str(path) in self.fail_list:
            raise PermissionError(f"list denied: {path}")
        return super().read_directory(path)


@pytest.fixture
def fs():
    return LocalFileSystem()


@pytest.fixture
def progress():
    return RecordingProgress()


@pytest.fixture
def config() -> ExclusionConfig:
    return load_config(excluded_extensions=[".png", ".jpg"])


@pytest.fixture
def project(tmp_path):
    """
    tmp_path/
      README.md
      src/main.py
      src/utils/helper.py
      assets/logo.png
      node_modules/dep/index.js
    """
    src = tmp_path / "src"
    (src / "utils").mkdir(parents=True)
    (src / "main.py").write_text("print('main')\n", encoding="utf-8")
    (src / "utils" / "helper.py").write_text("def helper(): pass\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# Project", encoding="utf-8")

    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")

    dep = tmp_path / "node_modules" / "dep"
    dep.mkdir(parents=True)
    (dep / "index.js").write_text("module.exports = 1;", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_progress():
    return RecordingProgress


@pytest.fixture
def make_failing_fs():
    return FailingFileSystem
