"""Tests for the command line helpers."""

from pathlib import Path

import pytest

from deterministic_deployer import config as config_module
from deterministic_deployer.cli import main
from deterministic_deployer.registry.address_oracle import hash_content, predict_location
from deterministic_deployer.registry.identity import format_identity
from tests.testing_utils import REGISTRY, SAMPLE_CONTENT


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "registry:\n"
        f"  address: '0x{REGISTRY.hex()}'\n"
        "logging:\n"
        "  level: WARNING\n"
        f"  output_file: '{tmp_path / 'events.jsonl'}'\n"
    )
    return path


class TestHashContent:
    def test_hex_input(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--config", str(config_file), "hash-content", "--hex", "0x" + SAMPLE_CONTENT.hex()])
        assert code == 0
        assert capsys.readouterr().out.strip() == "0x" + hash_content(SAMPLE_CONTENT).hex()

    def test_file_input(
        self, config_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        blob = tmp_path / "Token.bin"
        blob.write_bytes(SAMPLE_CONTENT)
        assert main(["--config", str(config_file), "hash-content", "--file", str(blob)]) == 0
        assert capsys.readouterr().out.strip() == "0x" + hash_content(SAMPLE_CONTENT).hex()


class TestComputeLocation:
    def test_registry_from_config(self, config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([
            "--config", str(config_file),
            "compute-location", "--salt", "1", "--hex", SAMPLE_CONTENT.hex(),
        ])
        assert code == 0
        expected = format_identity(predict_location(REGISTRY, 1, SAMPLE_CONTENT))
        assert capsys.readouterr().out.strip() == expected

    def test_precomputed_hash_and_hex_salt(
        self, config_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        h = hash_content(SAMPLE_CONTENT)
        code = main([
            "--config", str(config_file),
            "compute-location", "--salt", "0x01", "--content-hash", "0x" + h.hex(),
        ])
        assert code == 0
        expected = format_identity(predict_location(REGISTRY, 1, SAMPLE_CONTENT))
        assert capsys.readouterr().out.strip() == expected

    def test_missing_registry(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        code = main(["--config", str(empty), "compute-location", "--salt", "1", "--hex", "00"])
        assert code == 1
        assert "registry.address" in capsys.readouterr().err

    def test_bad_salt_rejected(self, config_file: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--config", str(config_file), "compute-location", "--salt", "-5", "--hex", "00"])

    def test_content_hash_excludes_hex(self, config_file: Path) -> None:
        h = hash_content(SAMPLE_CONTENT)
        with pytest.raises(SystemExit):
            main([
                "--config", str(config_file),
                "compute-location", "--salt", "1",
                "--content-hash", "0x" + h.hex(), "--hex", "00",
            ])

    def test_content_source_required(self, config_file: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--config", str(config_file), "compute-location", "--salt", "1"])


class TestWithoutConfigFile:
    """An installed CLI has no config/ directory next to the package."""

    def test_hash_content_runs_on_defaults(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
        monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)

        assert main(["hash-content", "--hex", "0x00"]) == 0
        assert capsys.readouterr().out.strip() == "0x" + hash_content(b"\x00").hex()

    def test_compute_location_needs_registry_flag(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
        monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)

        assert main(["compute-location", "--salt", "1", "--hex", "00"]) == 1
        assert "registry.address" in capsys.readouterr().err
