import importlib.util
import json
from pathlib import Path

import pytest

from tests.conftest import SCENARIO_A_RESUME

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "analyze_resume.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("analyze_resume", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text(SCENARIO_A_RESUME, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    monkeypatch.setenv("ATS_CONFIG", str(tmp_path / "missing.yaml"))


def test_text_report(cli, resume_file, capsys):
    assert cli.main(["--resume", str(resume_file)]) == 0

    out = capsys.readouterr().out
    assert "ATS COMPATIBILITY REPORT" in out
    assert "Overall ATS Score: 48/100 (NEEDS IMPROVEMENT)" in out


def test_json_output(cli, resume_file, capsys):
    assert cli.main(["--resume", str(resume_file), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["overallScore"] == 48
    assert data["foundKeywords"] == ["javascript", "react", "java", "leadership"]


def test_job_description_and_role(cli, tmp_path, capsys):
    resume = tmp_path / "resume.txt"
    resume.write_text("Python developer. SQL and AWS daily.", encoding="utf-8")
    jd = tmp_path / "jd.txt"
    jd.write_text("We need experience with Python, SQL, and AWS.", encoding="utf-8")

    code = cli.main(["--resume", str(resume), "--job-description", str(jd), "--json"])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["keywordMatch"] == 100


def test_missing_resume_file(cli, tmp_path, capsys):
    assert cli.main(["--resume", str(tmp_path / "nope.txt")]) == 1
    assert "ATS COMPATIBILITY REPORT" not in capsys.readouterr().out


def test_output_file(cli, resume_file, tmp_path, capsys):
    output = tmp_path / "reports" / "report.json"

    assert cli.main(["--resume", str(resume_file), "--json", "--output", str(output)]) == 0

    captured = capsys.readouterr()
    assert json.loads(output.read_text(encoding="utf-8"))["overallScore"] == 48
    assert json.loads(captured.out)["overallScore"] == 48
    assert "Report saved to" in captured.err


def test_resume_is_directory(cli, tmp_path, capsys):
    assert cli.main(["--resume", str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""


def test_invalid_config_file(cli, resume_file, tmp_path, monkeypatch, capsys):
    config = tmp_path / "ats.yaml"
    config.write_text("ats:\n  found_keyword_limit: 5\n", encoding="utf-8")
    monkeypatch.setenv("ATS_CONFIG", str(config))

    assert cli.main(["--resume", str(resume_file)]) == 1
    assert capsys.readouterr().out == ""
