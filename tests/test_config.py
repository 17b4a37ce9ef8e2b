# -*- coding: utf-8 -*-
"""
Unit tests for config.py — defaults, serialisation and the global singleton.
"""

import json
from pathlib import Path

import pytest

from config import (
    Config,
    LoggingConfig,
    PathConfig,
    TOPSISConfig,
    ZeroNormPolicy,
    get_config,
    get_default_config,
    reset_config,
    set_config,
)


class TestDefaults:
    def test_topsis_defaults(self):
        cfg = TOPSISConfig()
        assert cfg.zero_norm_policy is ZeroNormPolicy.PROPAGATE
        assert cfg.degenerate_score == 0.5

    def test_paths_derived_from_base(self, tmp_path):
        paths = PathConfig(base_dir=tmp_path)
        assert paths.output_dir == tmp_path / "outputs"
        assert paths.logs_dir == tmp_path / "outputs" / "logs"

    def test_construction_creates_no_directories(self, tmp_path):
        Config(paths=PathConfig(base_dir=tmp_path))
        assert not (tmp_path / "outputs").exists()

    def test_ensure_directories(self, tmp_path):
        paths = PathConfig(base_dir=tmp_path)
        paths.ensure_directories()
        assert paths.logs_dir.is_dir()


class TestSerialisation:
    def test_to_dict_converts_enums_and_paths(self, tmp_path):
        cfg = Config(paths=PathConfig(base_dir=tmp_path))
        d = cfg.to_dict()
        assert d["topsis"]["zero_norm_policy"] == "propagate"
        assert d["paths"]["base_dir"] == str(tmp_path)
        json.dumps(d)

    def test_save_and_load(self, tmp_path):
        cfg = Config(
            paths=PathConfig(base_dir=tmp_path),
            topsis=TOPSISConfig(zero_norm_policy=ZeroNormPolicy.RAISE,
                                degenerate_score=0.25),
            logging=LoggingConfig(level="DEBUG", use_color=False),
        )
        path = tmp_path / "config.json"
        cfg.save(path)
        loaded = Config.load(path)
        assert loaded.topsis.zero_norm_policy is ZeroNormPolicy.RAISE
        assert loaded.topsis.degenerate_score == 0.25
        assert loaded.logging.level == "DEBUG"
        assert loaded.logging.use_color is False
        assert loaded.paths.base_dir == Path(tmp_path)

    def test_from_dict_partial(self):
        cfg = Config.from_dict({"topsis": {"zero_norm_policy": "raise"}})
        assert cfg.topsis.zero_norm_policy is ZeroNormPolicy.RAISE
        assert cfg.logging.debug_json is True

    def test_from_dict_unknown_policy(self):
        with pytest.raises(ValueError):
            Config.from_dict({"topsis": {"zero_norm_policy": "ignore"}})

    def test_summary_mentions_policy(self):
        assert "propagate" in Config().summary()


class TestSingleton:
    def test_get_config_returns_same_instance(self):
        assert get_config() is get_config()

    def test_default_config_is_fresh(self):
        assert get_default_config() is not get_config()

    def test_set_and_reset(self):
        custom = Config(topsis=TOPSISConfig(degenerate_score=0.0))
        set_config(custom)
        assert get_config() is custom
        reset_config()
        assert get_config() is not custom
        assert get_config().topsis.degenerate_score == 0.5
