"""
Unit tests for epicfails/cli.py
"""

import logging
from unittest.mock import patch

import pytest

from epicfails.cli import apply_overrides, main, parse_arguments
from epicfails.Config import Config
from epicfails.Video import Video


@pytest.mark.unit
class TestParseArguments:
    """Test command line parsing."""

    def test_defaults(self):
        args = parse_arguments(["7"])
        assert args.epic_rating == 7
        assert args.animals is False
        assert args.trials is None
        assert args.seed is None
        assert args.verbose is False

    def test_all_flags(self):
        args = parse_arguments(["4", "--animals", "--trials", "3", "--seed", "11", "-v"])
        assert args.epic_rating == 4
        assert args.animals is True
        assert args.trials == 3
        assert args.seed == 11
        assert args.verbose is True

    def test_non_integer_rating_exits(self):
        with pytest.raises(SystemExit):
            parse_arguments(["epic"])


@pytest.mark.unit
class TestApplyOverrides:
    """Test that CLI arguments take precedence over the config file."""

    def test_no_overrides_keeps_config(self):
        config = Config(seed=3, trials=2)
        assert apply_overrides(config, parse_arguments(["5"])) == config

    def test_overrides(self):
        config = Config(seed=3, trials=2, show_weekly=False)
        result = apply_overrides(config, parse_arguments(["5", "--seed", "8", "--trials", "6"]))
        assert result.seed == 8
        assert result.trials == 6
        assert result.show_weekly is False


@pytest.mark.unit
class TestMain:
    """Test the full command line flow."""

    def test_single_run(self, config_dirs, caplog):
        caplog.set_level(logging.INFO)
        with patch.object(Video, "random_int", return_value=10):
            main(["4", "--animals"])

        assert "Video: epic rating 4, animals: yes" in caplog.text
        assert "Daily likes: 30" in caplog.text
        assert "Weekly likes: 210" in caplog.text
        assert "Mean daily likes" not in caplog.text

    def test_multiple_trials_report_means(self, config_dirs, caplog):
        caplog.set_level(logging.INFO)
        with patch.object(Video, "random_int", return_value=20):
            main(["7", "--trials", "2"])

        assert "[1/2] Daily likes: 56" in caplog.text
        assert "[2/2] Weekly likes: 392" in caplog.text
        assert "Mean daily likes: 56.00" in caplog.text
        assert "Mean weekly likes: 392.00" in caplog.text

    def test_show_weekly_disabled_by_config(self, config_dirs, caplog):
        (config_dirs["cwd"] / "config.yaml").write_text("show_weekly: false\n", encoding="utf-8")
        caplog.set_level(logging.INFO)
        with patch.object(Video, "random_int", return_value=20):
            main(["7"])

        assert "Daily likes: 56" in caplog.text
        assert "Weekly likes" not in caplog.text

    def test_seeded_runs_are_reproducible(self, config_dirs, caplog):
        caplog.set_level(logging.INFO)
        main(["6", "--seed", "42"])
        first = [r.getMessage() for r in caplog.records if "likes" in r.getMessage()]
        caplog.clear()
        main(["6", "--seed", "42"])
        second = [r.getMessage() for r in caplog.records if "likes" in r.getMessage()]

        assert first
        assert first == second

    @pytest.mark.parametrize("rating", ["0", "11"])
    def test_invalid_rating_exits_with_error(self, config_dirs, caplog, rating):
        with pytest.raises(SystemExit) as exc_info:
            main([rating])

        assert exc_info.value.code == 1
        assert f"Invalid epic rating: {rating}" in caplog.text

    def test_invalid_trials_exits_with_error(self, config_dirs, caplog):
        with pytest.raises(SystemExit) as exc_info:
            main(["5", "--trials", "0"])

        assert exc_info.value.code == 1
        assert "Invalid number of trials: 0" in caplog.text

    def test_bad_config_exits_with_error(self, config_dirs, caplog):
        (config_dirs["cwd"] / "config.yaml").write_text("trials: [oops\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["5"])

        assert exc_info.value.code == 1
        assert "Configuration error" in caplog.text
