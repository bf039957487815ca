from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from core.config import MonitorConfig, read_token


def test_defaults():
    config = MonitorConfig()
    assert config.target_country == "Poland"
    assert config.channel_marker == "zawody"
    assert config.poll_interval == timedelta(minutes=15)
    assert config.poll_interval_seconds == 900
    assert config.request_timeout is None


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MonitorConfig().target_country = "Germany"


def test_read_token_strips_whitespace(tmp_path):
    path = tmp_path / "token.txt"
    path.write_text("  abc.def.ghi\n", encoding="utf-8")
    assert read_token(path) == "abc.def.ghi"


def test_read_token_rejects_empty_file(tmp_path):
    path = tmp_path / "token.txt"
    path.write_text("\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_token(path)
