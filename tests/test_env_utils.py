"""Tests for environment utilities."""

from sessionboot.utils import env_utils
from sessionboot.utils.env_utils import detect_core_count, is_running_in_docker


class TestDetectCoreCount:
    """Tests for detect_core_count function."""

    def test_uses_cpu_count(self, monkeypatch):
        monkeypatch.setattr(env_utils.os, "cpu_count", lambda: 12)
        assert detect_core_count() == 12

    def test_unknown_count_falls_back_to_one(self, monkeypatch):
        monkeypatch.setattr(env_utils.os, "cpu_count", lambda: None)
        assert detect_core_count() == 1


class TestIsRunningInDocker:
    """Tests for is_running_in_docker function."""

    def test_marker_file(self, tmp_path):
        marker = tmp_path / ".dockerenv"
        marker.touch()
        assert is_running_in_docker(str(marker)) is True

    def test_no_marker_file(self, tmp_path):
        assert is_running_in_docker(str(tmp_path / ".dockerenv")) is False
