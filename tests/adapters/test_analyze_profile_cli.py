"""Tests for the analyze-profile CLI adapter."""

import json
from unittest.mock import MagicMock

from src.adapters import analyze_profile_cli as cli
from src.application.use_cases.run_analysis import RunAnalysisUseCase
from src.domain.errors import RequestFailure
from src.domain.services.validation import decode_analysis_result


class _StubAnalyzer:
    def __init__(self, result=None, error=None) -> None:
        self.result = result
        self.error = error

    async def execute(self, _profile):
        if self.error is not None:
            raise self.error
        return self.result


def _patch_use_case(monkeypatch, analyzer):
    def _build(store):
        return RunAnalysisUseCase(
            analyzer=analyzer,
            store=store,
            min_dwell_seconds=0,
            logger=MagicMock(),
            usage_logger=MagicMock(),
        )

    monkeypatch.setattr(cli, "build_run_analysis_use_case", _build)
    monkeypatch.setattr(cli, "get_app_logger", MagicMock)


def _write_profile(tmp_path, sample_profile):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_profile.to_payload()), encoding="utf-8")
    return path


def test_main_prints_report(monkeypatch, tmp_path, capsys, sample_profile,
                            analysis_payload):
    path = _write_profile(tmp_path, sample_profile)
    _patch_use_case(
        monkeypatch,
        _StubAnalyzer(result=decode_analysis_result(analysis_payload)),
    )

    exit_code = cli.main([str(path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Financial health score: 72/100" in output
    assert "[High] Pay off the credit card" in output


def test_main_reports_analysis_failure(monkeypatch, tmp_path, capsys,
                                       sample_profile):
    path = _write_profile(tmp_path, sample_profile)
    _patch_use_case(monkeypatch, _StubAnalyzer(error=RequestFailure("down")))

    exit_code = cli.main([str(path)])

    assert exit_code == 1
    assert "Failed to generate analysis" in capsys.readouterr().out


def test_main_uses_profile_file_env(monkeypatch, tmp_path, sample_profile,
                                    analysis_payload):
    path = _write_profile(tmp_path, sample_profile)
    monkeypatch.setenv("PROFILE_FILE", str(path))
    _patch_use_case(
        monkeypatch,
        _StubAnalyzer(result=decode_analysis_result(analysis_payload)),
    )

    assert cli.main([]) == 0


def test_main_rejects_missing_path(monkeypatch):
    monkeypatch.delenv("PROFILE_FILE", raising=False)
    monkeypatch.setattr(cli, "get_app_logger", MagicMock)

    assert cli.main([]) == 1


def test_load_profile_logs_unreadable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    logger = MagicMock()

    assert cli._load_profile(str(path), logger) is None
    logger.error.assert_called_once()


def test_main_rejects_non_object_line_items(monkeypatch, tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(
        json.dumps({"monthlyIncome": 3000, "liabilities": ["x"]}),
        encoding="utf-8",
    )
    logger = MagicMock()
    monkeypatch.setattr(cli, "get_app_logger", lambda: logger)

    assert cli.main([str(path)]) == 1
    assert "liabilities" in logger.error.call_args.args[0]
