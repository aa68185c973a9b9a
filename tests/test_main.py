import pytest

import main
from computor import config_manager


@pytest.fixture(autouse=True)
def default_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "config.json")


def test_cli_prints_report(capsys):
    assert main.run_cli("x^2 = 4") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ">>> x^2 = 4"
    assert lines[1:4] == ["==> x^2 = 4", "==> x^2 = 4", "==> x^2 - 4 = 0"]
    assert lines[-2:] == ["x = -4 / 2 = -2", "x = 4 / 2 = 2"]


def test_cli_parse_error_draws_caret(capsys):
    assert main.run_cli("x + y = 1") == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "        ^"
    assert lines[2].startswith("Error 3002:")


def test_cli_not_a_polynomial(capsys):
    assert main.run_cli("x*x = 0") == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Not a polynomial!"
    assert len(lines) == 5


def test_cli_unsolvable(capsys):
    assert main.run_cli("x^3 = 1") == 1
    out = capsys.readouterr().out
    assert "Polynomial degree: 3" in out
    assert out.splitlines()[-1] == "I can't solve that!"


def test_main_with_argument_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["computor", "2*x", "=", "4"])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert excinfo.value.code == 0
    assert "x = 4 / 2 = 2" in capsys.readouterr().out


def test_file_check_reports_missing_error_module(tmp_path, monkeypatch, capsys):
    modules_dir = tmp_path / "computor"
    modules_dir.mkdir()
    for name in ("UI.py", "MathEngine.py", "Expression.py", "Parser.py", "Polynomial.py",
                 "Solver.py", "config_manager.py"):
        (modules_dir / name).write_text("", encoding="utf-8")
    (tmp_path / "config.json").write_text("{}", encoding="utf-8")
    (tmp_path / "ui_strings.json").write_text("{}", encoding="utf-8")
    monkeypatch.setattr(main, "PROJECT_ROOT", tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main.check_files_exist()
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.splitlines()[-1] == "- error.py"


def test_file_check_passes_in_the_project():
    main.check_files_exist()
