"""Unit tests for SignatureCacheConfig."""

from pathlib import Path

import pytest

from src.config.signature_cache_config import (
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_SIGNATURE_CACHE_CONFIG,
    DEFAULT_STORE_TIMEOUT_SECONDS,
    DEVELOPMENT_SIGNATURE_CACHE_CONFIG,
    MAX_CACHE_TTL_SECONDS,
    MAX_STORE_TIMEOUT_SECONDS,
    MIN_CACHE_TTL_SECONDS,
    MIN_STORE_TIMEOUT_SECONDS,
    SignatureCacheConfig,
)

ENV_VARS = (
    "SIGNATURE_CACHE_TTL_SECONDS",
    "SIGNATURE_STORE_BASE_URL",
    "SIGNATURE_STORE_TIMEOUT_SECONDS",
    "SIGNATURE_STORE_API_KEY",
    "SIGNATURE_MIRROR_DIR",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove signature settings inherited from the shell."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default values."""

    def test_default_config(self) -> None:
        config = SignatureCacheConfig()

        assert config.cache_ttl_seconds == DEFAULT_CACHE_TTL_SECONDS == 5.0
        assert config.store_timeout_seconds == DEFAULT_STORE_TIMEOUT_SECONDS
        assert config.store_base_url is None
        assert config.mirror_dir is None
        assert config.environment == "production"
        assert config.uses_remote_store is False

    def test_module_level_configs(self) -> None:
        assert DEFAULT_SIGNATURE_CACHE_CONFIG == SignatureCacheConfig()
        assert DEVELOPMENT_SIGNATURE_CACHE_CONFIG.environment == "development"

    def test_config_is_frozen(self) -> None:
        config = SignatureCacheConfig()

        with pytest.raises(AttributeError):
            config.cache_ttl_seconds = 10.0  # type: ignore[misc]


class TestValidation:
    """Tests for __post_init__ range checks."""

    @pytest.mark.parametrize("ttl", [0.0, -1.0, MAX_CACHE_TTL_SECONDS + 1])
    def test_ttl_out_of_range_rejected(self, ttl: float) -> None:
        with pytest.raises(ValueError, match="cache_ttl_seconds"):
            SignatureCacheConfig(cache_ttl_seconds=ttl)

    @pytest.mark.parametrize("timeout", [0.0, MAX_STORE_TIMEOUT_SECONDS + 1])
    def test_timeout_out_of_range_rejected(self, timeout: float) -> None:
        with pytest.raises(ValueError, match="store_timeout_seconds"):
            SignatureCacheConfig(store_timeout_seconds=timeout)

    def test_bounds_are_inclusive(self) -> None:
        SignatureCacheConfig(
            cache_ttl_seconds=MIN_CACHE_TTL_SECONDS,
            store_timeout_seconds=MIN_STORE_TIMEOUT_SECONDS,
        )
        SignatureCacheConfig(
            cache_ttl_seconds=MAX_CACHE_TTL_SECONDS,
            store_timeout_seconds=MAX_STORE_TIMEOUT_SECONDS,
        )


class TestFromEnvironment:
    """Tests for environment loading."""

    def test_empty_environment_gives_defaults(self) -> None:
        assert SignatureCacheConfig.from_environment() == SignatureCacheConfig()

    def test_reads_every_variable(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("SIGNATURE_CACHE_TTL_SECONDS", "2.5")
        monkeypatch.setenv("SIGNATURE_STORE_BASE_URL", "https://docs.example.com/v1")
        monkeypatch.setenv("SIGNATURE_STORE_TIMEOUT_SECONDS", "3")
        monkeypatch.setenv("SIGNATURE_STORE_API_KEY", "token")
        monkeypatch.setenv("SIGNATURE_MIRROR_DIR", str(tmp_path))
        monkeypatch.setenv("ENVIRONMENT", "development")

        config = SignatureCacheConfig.from_environment()

        assert config.cache_ttl_seconds == 2.5
        assert config.store_base_url == "https://docs.example.com/v1"
        assert config.store_timeout_seconds == 3.0
        assert config.store_api_key == "token"
        assert config.mirror_dir == tmp_path
        assert config.environment == "development"
        assert config.uses_remote_store is True

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", MIN_CACHE_TTL_SECONDS), ("-4", MIN_CACHE_TTL_SECONDS), ("9000", MAX_CACHE_TTL_SECONDS)],
    )
    def test_ttl_is_clamped(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: float
    ) -> None:
        monkeypatch.setenv("SIGNATURE_CACHE_TTL_SECONDS", raw)

        assert SignatureCacheConfig.from_environment().cache_ttl_seconds == expected

    def test_timeout_is_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIGNATURE_STORE_TIMEOUT_SECONDS", "0.01")

        config = SignatureCacheConfig.from_environment()

        assert config.store_timeout_seconds == MIN_STORE_TIMEOUT_SECONDS

    def test_invalid_number_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIGNATURE_CACHE_TTL_SECONDS", "five")

        assert SignatureCacheConfig.from_environment().cache_ttl_seconds == 5.0

    def test_blank_strings_are_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIGNATURE_STORE_BASE_URL", "   ")
        monkeypatch.setenv("SIGNATURE_MIRROR_DIR", "")

        config = SignatureCacheConfig.from_environment()

        assert config.store_base_url is None
        assert config.mirror_dir is None
