"""
Integration Tests for the command line entry point.

Tests cover:
    - Exit code 0 with the rendered widget on stdout
    - Exit code 1 when no quote can be resolved
    - Exit code 2 on configuration problems
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from power_law_gauge import __main__ as cli
from power_law_gauge.adapters.metrics_collector import InMemoryMetricsCollector
from power_law_gauge.adapters.quote_chain import QuoteChain
from power_law_gauge.adapters.static_source import StaticQuoteSource
from power_law_gauge.config.models import WidgetConfig
from power_law_gauge.pipeline.gauge_pipeline import GaugePipeline
from power_law_gauge.valuation.evaluator import ValuationEvaluator
from tests.fixtures.sources import FailingQuoteSource


def _stub_factory(sources: List, captured: dict):
    """Replacement for create_pipeline that keeps the HTTP layer out."""

    def factory(config: WidgetConfig, audit_logger=None, **kwargs) -> GaugePipeline:
        captured["config"] = config
        return GaugePipeline(
            primary_chain=QuoteChain(config.quotes.primary.symbol, sources),
            evaluator=ValuationEvaluator(config.valuation),
            audit_logger=audit_logger,
            metrics_collector=InMemoryMetricsCollector(),
        )

    return factory


class TestMain:
    """Integration tests for main()."""

    def test_prints_widget(self, monkeypatch, tmp_path: Path, capsys) -> None:
        """
        SCENARIO: No config directory, BTC quote available
        EXPECTED: Exit 0, widget printed with built-in defaults
        """
        # Arrange
        captured: dict = {}
        monkeypatch.setattr(
            cli,
            "create_pipeline",
            _stub_factory([StaticQuoteSource("BTC", 97_000.0, change_24h=2.0)], captured),
        )

        # Act
        exit_code = cli.main(["--base-path", str(tmp_path)])

        # Assert
        out = capsys.readouterr().out
        assert exit_code == 0
        assert "₿ Power Law" in out
        assert "$97,000" in out
        assert "+2.0% (24h)" in out
        assert captured["config"] == WidgetConfig()

    def test_uses_project_config_and_profile(
        self,
        monkeypatch,
        project_root: Path,
        capsys,
    ) -> None:
        """
        SCENARIO: --profile dual against the shipped config/
        EXPECTED: Config with two relations handed to the factory
        """
        captured: dict = {}
        monkeypatch.setattr(
            cli,
            "create_pipeline",
            _stub_factory([StaticQuoteSource("BTC", 97_000.0)], captured),
        )

        exit_code = cli.main(["--base-path", str(project_root), "--profile", "dual"])

        assert exit_code == 0
        assert captured["config"].valuation.relation_count == 2

    def test_quotes_unavailable(self, monkeypatch, tmp_path: Path, capsys) -> None:
        """
        SCENARIO: Every BTC source fails
        EXPECTED: Exit 1, nothing rendered
        """
        monkeypatch.setattr(
            cli,
            "create_pipeline",
            _stub_factory([FailingQuoteSource("coingecko")], {}),
        )

        exit_code = cli.main(["--base-path", str(tmp_path)])

        assert exit_code == 1
        assert "Power Law" not in capsys.readouterr().out

    def test_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config file with inverted band multipliers
        EXPECTED: Exit 2
        """
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("valuation:\n  bands:\n    resist_multiplier: 0.5\n")

        assert cli.main(["--config", str(config_file)]) == 2

    def test_feed_without_sources(self, tmp_path: Path) -> None:
        """
        SCENARIO: Primary feed with CoinGecko and Coinbase disabled, no default price
        EXPECTED: Exit 2, no traceback
        """
        config_file = tmp_path / "no_sources.yaml"
        config_file.write_text(
            "quotes:\n  primary:\n    coingecko_id: null\n    coinbase_pair: null\n"
        )

        assert cli.main(["--config", str(config_file)]) == 2

    def test_pipeline_wiring_error(self, monkeypatch, tmp_path: Path) -> None:
        """
        SCENARIO: Config loads but building the pipeline rejects it
        EXPECTED: Exit 2
        """
        def reject(config, **kwargs):
            raise ValueError("No quote sources configured for BTC")

        monkeypatch.setattr(cli, "create_pipeline", reject)

        assert cli.main(["--base-path", str(tmp_path)]) == 2

    def test_missing_config_file(self, tmp_path: Path) -> None:
        assert cli.main(["--config", str(tmp_path / "missing.yaml")]) == 2

    def test_profile_without_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: --profile but no config/default.yaml under base path
        EXPECTED: Exit 2
        """
        assert cli.main(["--base-path", str(tmp_path), "--profile", "dual"]) == 2


class TestParseArgs:
    """Argument parsing."""

    def test_defaults(self) -> None:
        args = cli.parse_args([])

        assert args.config is None
        assert args.profile is None
        assert args.base_path == Path(".")
        assert args.verbose is False

    def test_verbose_short_flag(self) -> None:
        assert cli.parse_args(["-v"]).verbose is True

    def test_unknown_flag(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_args(["--nope"])
