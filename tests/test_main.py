# -*- coding: utf-8 -*-
"""
Tests for the worked-example entry point in main.py.
"""

import json
import logging

import pytest

import main
from config import Config, LoggingConfig, PathConfig


@pytest.fixture
def example_config(tmp_path):
    return Config(
        paths=PathConfig(base_dir=tmp_path),
        logging=LoggingConfig(level="DEBUG", use_color=False),
    )


class TestRunExample:
    def test_expected_order(self, example_config, capsys):
        ranking = main.run_example(example_config)
        assert [a.id for a in ranking] == main.EXPECTED_ORDER
        out = capsys.readouterr().out
        assert "OK    Ranking" in out
        assert "Closeness" in out

    def test_debug_json_written(self, example_config):
        main.run_example(example_config)
        files = list(example_config.paths.logs_dir.glob("debug_*.json"))
        assert len(files) == 1
        with open(files[0], encoding="utf-8") as fh:
            entries = json.load(fh)
        labels = [e["message"] for e in entries if e["level"] == "DATA"]
        assert labels == ["artifacts", "ranking"]
        messages = [e["message"] for e in entries]
        assert "Starting: TOPSIS ranking" in messages
        assert "TOPSIS on 4 alternatives x 3 criteria" in messages

    def test_pipeline_runs_once(self, example_config, monkeypatch):
        import mcdm
        calls = []
        original = mcdm.compute_topsis

        def counting(*args, **kwargs):
            calls.append(args)
            return original(*args, **kwargs)

        monkeypatch.setattr(mcdm, "compute_topsis", counting)
        ranking = main.run_example(example_config)
        assert len(calls) == 1
        assert [a.id for a in ranking] == main.EXPECTED_ORDER

    def test_logged_ranking_matches_artifacts(self, example_config):
        ranking = main.run_example(example_config)
        path = next(example_config.paths.logs_dir.glob("debug_*.json"))
        with open(path, encoding="utf-8") as fh:
            entries = json.load(fh)
        data = {e["message"]: e["data"] for e in entries if e["level"] == "DATA"}
        closeness = data["artifacts"]["closeness"]
        for item, alt in zip(data["ranking"], ranking):
            assert item["id"] == alt.id
            assert item["score"] == pytest.approx(closeness[alt.id])

    def test_debug_json_disabled(self, example_config):
        example_config.logging.debug_json = False
        main.run_example(example_config)
        assert list(example_config.paths.logs_dir.glob("debug_*.json")) == []
        assert not logging.getLogger("topsis").handlers


class TestMain:
    def test_success_does_not_exit(self, example_config):
        main.main(example_config)

    def test_unexpected_order_exits(self, example_config, monkeypatch, capsys):
        monkeypatch.setattr(main, "EXPECTED_ORDER", [0, 1, 2, 3])
        with pytest.raises(SystemExit) as exc_info:
            main.main(example_config)
        assert exc_info.value.code == 1
        assert "ERROR" in capsys.readouterr().out
