from pathlib import Path

import pytest
from pydantic import HttpUrl, ValidationError, WebsocketUrl

from transfersim.config import Settings, load_config_from_file, save_config_to_file


def test_default_settings():
    settings = Settings()
    assert settings.rpc == {}
    assert settings.default_chain_id is None


def test_settings_endpoints():
    settings = Settings.model_validate(
        {
            "default_chain_id": 1,
            "rpc": {
                1: "https://ethereum-rpc.publicnode.com",
                8453: "wss://base.llamarpc.com",
                10: "~/node/geth.ipc",
            },
        }
    )

    assert settings.default_chain_id == 1
    assert isinstance(settings.rpc[1], HttpUrl)
    assert isinstance(settings.rpc[8453], WebsocketUrl)
    assert settings.rpc[10] == Path("~/node/geth.ipc").expanduser().absolute()


def test_settings_rejects_bad_chain_id():
    with pytest.raises(ValidationError):
        Settings.model_validate({"rpc": {"mainnet": "https://ethereum-rpc.publicnode.com"}})


def test_save_and_load_config(tmp_path: Path):
    config_file = tmp_path / "nested" / "config.toml"
    settings = Settings.model_validate(
        {
            "default_chain_id": 1,
            "rpc": {1: "http://localhost:8545"},
        }
    )

    save_config_to_file(settings, config_file)
    assert config_file.exists()
    assert "[rpc]" in config_file.read_text()

    loaded = load_config_from_file(config_file)
    assert loaded == settings
