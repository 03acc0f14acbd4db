"""Tests for the lock manager registry."""

import pytest
from conftest import RecordingLockManager

from sessionboot.managers import registry
from sessionboot.managers.registry import (
    create_manager,
    list_managers,
    register_manager,
    unregister_manager,
)
from sessionboot.utils.exceptions import ConfigurationError


@pytest.fixture
def empty_registry(monkeypatch):
    """Run against a private registry so the pip manager stays registered."""
    monkeypatch.setattr(registry, "_manager_registry", {})


@pytest.mark.usefixtures("empty_registry")
class TestRegistry:
    """Tests for manager registration."""

    def test_register_and_create(self, tmp_path):
        register_manager("recording")(RecordingLockManager)

        manager = create_manager("recording", cache_dir=tmp_path)

        assert isinstance(manager, RecordingLockManager)
        assert manager.cache_dir == tmp_path
        assert list_managers() == ["recording"]

    def test_names_are_case_insensitive(self):
        """LOCK_MANAGER=Recording selects the manager registered as recording."""
        register_manager("Recording")(RecordingLockManager)

        assert list_managers() == ["recording"]
        assert isinstance(create_manager(" RECORDING "), RecordingLockManager)

    def test_empty_name_rejected(self):
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            register_manager("  ")
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            create_manager("")

    def test_reregistering_same_class_is_silent(self, caplog):
        register_manager("recording")(RecordingLockManager)
        register_manager("RECORDING")(RecordingLockManager)

        assert "already registered" not in caplog.text

    def test_replacing_class_warns(self, caplog):
        """Registering another class under a taken name keeps the latest one."""

        class OtherManager(RecordingLockManager):
            pass

        register_manager("recording")(RecordingLockManager)
        register_manager("recording")(OtherManager)

        assert isinstance(create_manager("recording"), OtherManager)
        assert "replacing with OtherManager" in caplog.text

    def test_unregister(self):
        register_manager("recording")(RecordingLockManager)

        assert unregister_manager("Recording") is True
        assert unregister_manager("recording") is False
        assert list_managers() == []

    def test_create_unknown(self):
        """Unknown names raise ConfigurationError listing what is available."""
        register_manager("recording")(RecordingLockManager)
        register_manager("pip")(RecordingLockManager)

        with pytest.raises(
            ConfigurationError, match=r"'poetry' is not registered \(available: pip, recording\)"
        ):
            create_manager("poetry")
