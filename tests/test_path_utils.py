"""Tests for path utilities."""

from pathlib import Path

from sessionboot.utils.path_utils import ProjectLayout, is_real_project, resolve_cache_dir


class TestProjectLayout:
    """Tests for ProjectLayout paths."""

    def test_paths_relative_to_root(self):
        """Test every consulted path hangs off the root."""
        layout = ProjectLayout.for_root("/work/analysis")

        assert layout.lockfile == Path("/work/analysis/requirements.lock")
        assert layout.activation_script == Path("/work/analysis/lockenv/activate.py")
        assert layout.library_dir == Path("/work/analysis/lockenv/library")
        assert layout.default_cache_dir == Path("/work/analysis/lockenv/cache")
        assert layout.project_descriptor == Path("/work/analysis/pyproject.toml")
        assert layout.local_override == Path("/work/analysis/.sessionrc.py")

    def test_layout_is_hashable(self):
        """Test frozen layouts compare by root."""
        assert ProjectLayout.for_root("/a") == ProjectLayout(root=Path("/a"))
        assert len({ProjectLayout.for_root("/a"), ProjectLayout.for_root("/a")}) == 1


class TestResolveCacheDir:
    """Tests for resolve_cache_dir function."""

    def test_override_used(self, layout):
        assert resolve_cache_dir("/var/cache/pkgs", layout) == Path("/var/cache/pkgs")

    def test_override_whitespace_trimmed(self, layout):
        assert resolve_cache_dir("  /var/cache/pkgs  ", layout) == Path("/var/cache/pkgs")

    def test_user_home_expanded(self, layout, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_cache_dir("~/pkgs", layout) == tmp_path / "pkgs"

    def test_default_when_missing(self, layout):
        """Test None and blank overrides fall back to the project cache."""
        assert resolve_cache_dir(None, layout) == layout.default_cache_dir
        assert resolve_cache_dir("", layout) == layout.default_cache_dir
        assert resolve_cache_dir("   ", layout) == layout.default_cache_dir


class TestIsRealProject:
    """Tests for is_real_project function."""

    def test_descriptor_present(self, layout, tmp_path):
        layout.project_descriptor.write_text("[project]\n")
        assert is_real_project(layout, str(tmp_path / "missing")) is True

    def test_descriptor_directory_does_not_count(self, layout, tmp_path):
        """Test a directory named like the descriptor is not a descriptor."""
        layout.project_descriptor.mkdir()
        assert is_real_project(layout, str(tmp_path / "missing")) is False

    def test_known_path_present(self, layout, tmp_path):
        assert is_real_project(layout, str(tmp_path)) is True

    def test_neither(self, layout, tmp_path):
        assert is_real_project(layout, str(tmp_path / "missing")) is False
        assert is_real_project(layout, None) is False
        assert is_real_project(layout, "") is False
