import pytest

from bulkcast import __version__, cli
from bulkcast.cli import SUCCESS_MESSAGE, build_parser, main
from tests.conftest import make_response


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == __version__ == "1.0.0"


def test_file_and_apikey_are_required():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["-f", "in.csv"])

    assert exc_info.value.code == 2


def test_defaults():
    args = build_parser().parse_args(["-f", "in.csv", "-k", "key"])

    assert args.output == "output.csv"
    assert args.concurrency == 1
    assert args.verbose is False


def test_concurrency_must_be_positive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-f", "in.csv", "-k", "key", "-c", "0"])


def test_main_prints_success(fake_put, write_csv, tmp_path, capsys):
    fake_put(lambda body: make_response(200, {"result": {"success": True}}))
    source = write_csv("recipientFid,message\n1,a\n")
    output = tmp_path / "report.csv"

    status = main(["--file", str(source), "--apikey", "key", "--output", str(output)])

    assert status == 0
    assert output.exists()
    assert SUCCESS_MESSAGE in capsys.readouterr().out


def test_main_reports_write_failure(fake_put, write_csv, tmp_path, capsys):
    fake_put(lambda body: make_response(200, {}))
    source = write_csv("recipientFid,message\n1,a\n")

    status = main(["-f", str(source), "-k", "key", "-o", str(tmp_path)])

    captured = capsys.readouterr()
    assert status == 1
    assert SUCCESS_MESSAGE not in captured.out
    assert "Error processing CSV file" in captured.err


def test_main_reports_read_failure(tmp_path, capsys):
    status = main(["-f", str(tmp_path / "missing.csv"), "-k", "key", "-o", str(tmp_path / "o.csv")])

    assert status == 1
    assert not (tmp_path / "o.csv").exists()
    assert "Error processing CSV file" in capsys.readouterr().err


def test_unexpected_error_is_logged_with_traceback(monkeypatch, caplog, capsys, tmp_path):
    def boom(settings):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(cli, "run_campaign", boom)
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False: None)

    status = main(["-f", "in.csv", "-k", "key", "-o", str(tmp_path / "o.csv")])

    assert status == 1
    aborted = [r for r in caplog.records if "Run aborted" in r.getMessage()]
    assert aborted and aborted[0].exc_info is not None
    assert "Error processing CSV file: unexpected" in capsys.readouterr().err
