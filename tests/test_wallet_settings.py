import json

import pytest

from globalcoin.wallet_settings import WalletSettings


def test_default_channel_size():
    assert WalletSettings.default().channel_size == 128


def test_default_equals_no_argument_constructor():
    assert WalletSettings.default() == WalletSettings()


def test_dict_round_trip():
    settings = WalletSettings(channel_size=7)
    assert WalletSettings.from_dict(settings.to_dict()) == settings


def test_json_round_trip():
    settings = WalletSettings(channel_size=42)
    assert WalletSettings.from_json(settings.to_json()) == settings


def test_json_field_name():
    assert json.loads(WalletSettings.default().to_json()) == {"channel_size": 128}


def test_missing_field_rejected():
    with pytest.raises(ValueError):
        WalletSettings.from_dict({})


def test_non_object_json_rejected():
    with pytest.raises(ValueError):
        WalletSettings.from_json("[1, 2]")


def test_negative_channel_size_rejected():
    with pytest.raises(ValueError):
        WalletSettings(channel_size=-1)


def test_non_integer_channel_size_rejected():
    with pytest.raises(TypeError):
        WalletSettings(channel_size="big")