import pytest
from pydantic import ValidationError

from itempipe.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_log_level(self) -> None:
        s = Settings()
        assert s.log_level == "INFO"

    def test_default_max_category_transitions(self) -> None:
        s = Settings()
        assert s.max_category_transitions == 16

    def test_default_decompress_extensions(self) -> None:
        s = Settings()
        assert s.decompress_extensions == [".jpg", ".json", ".zip"]

    def test_default_random_seed_is_none(self) -> None:
        s = Settings()
        assert s.random_seed is None

    def test_default_batch_max_workers(self) -> None:
        s = Settings()
        assert s.batch_max_workers == 1

    def test_default_acquisition(self) -> None:
        s = Settings()
        assert s.acquisition_read_payload is False
        assert s.files_root == "."
        assert s.http_timeout_seconds == 30


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_max_category_transitions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CATEGORY_TRANSITIONS", "4")
        s = Settings()
        assert s.max_category_transitions == 4

    def test_loads_decompress_extensions_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DECOMPRESS_EXTENSIONS", '[".json"]')
        s = Settings()
        assert s.decompress_extensions == [".json"]

    def test_loads_random_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDOM_SEED", "1234")
        s = Settings()
        assert s.random_seed == 1234

    def test_loads_read_payload_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACQUISITION_READ_PAYLOAD", "true")
        s = Settings()
        assert s.acquisition_read_payload is True

    def test_init_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BATCH_MAX_WORKERS", "2")
        s = Settings(batch_max_workers=8)
        assert s.batch_max_workers == 8


class TestSettingsValidation:
    def test_negative_transitions_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CATEGORY_TRANSITIONS", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_non_numeric_transitions_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CATEGORY_TRANSITIONS", "many")
        with pytest.raises(ValidationError):
            Settings()

    def test_empty_extensions_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(decompress_extensions=[])

    def test_unknown_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Settings()

    def test_log_level_is_uppercased(self) -> None:
        assert Settings(log_level="warning").log_level == "WARNING"

    def test_zero_workers_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings(batch_max_workers=0)
