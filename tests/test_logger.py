import re

import pytest

from steamreview.logger import Logger


def test_log_file_is_created_in_directory(tmp_path):
    log_dir = tmp_path / "logs"
    with Logger(log_dir, False) as log:
        assert log.path.parent == log_dir
        assert log.path.exists()
        assert re.fullmatch(r"steam-review_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.log", log.path.name)


def test_info_goes_to_stdout_and_file(tmp_path, capsys):
    with Logger(tmp_path, False) as log:
        log.info("hello")
        out = capsys.readouterr().out
        assert re.fullmatch(
            r"\[INFO\] \d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}\.\d{6} test_logger\.py:\d+: hello\n", out
        )
        assert log.path.read_text(encoding="utf-8") == out


def test_verbose_is_silent_when_disabled(tmp_path, capsys):
    with Logger(tmp_path, False) as log:
        log.verbose("details")
        assert capsys.readouterr().out == ""
        assert log.path.read_text(encoding="utf-8") == ""
        assert log.verbose_enabled is False


def test_verbose_writes_when_enabled(tmp_path, capsys):
    with Logger(tmp_path, True) as log:
        log.verbose("details")
        out = capsys.readouterr().out
        assert out.startswith("[INFO] ")
        assert out.endswith(": details\n")
        assert log.path.read_text(encoding="utf-8") == out


def test_error_goes_to_stderr_and_file(tmp_path, capsys):
    with Logger(tmp_path, False) as log:
        log.error("broken")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("[ERROR] ")
        assert captured.err.endswith(": broken\n")
        assert log.path.read_text(encoding="utf-8") == captured.err


def test_fatal_exits_with_status_one(tmp_path, capsys):
    with Logger(tmp_path, False) as log:
        with pytest.raises(SystemExit) as excinfo:
            log.fatal("stop")
        assert excinfo.value.code == 1
        assert "stop" in capsys.readouterr().err
        assert "stop" in log.path.read_text(encoding="utf-8")


def test_echo_writes_only_to_stdout(tmp_path, capsys):
    with Logger(tmp_path, False) as log:
        log.echo("- file.txt\n")
        assert capsys.readouterr().out == "- file.txt\n"
        assert log.path.read_text(encoding="utf-8") == ""


def test_messages_after_close_skip_the_file(tmp_path, capsys):
    log = Logger(tmp_path, False)
    log.info("before")
    log.close()
    log.close()
    log.info("after")
    content = log.path.read_text(encoding="utf-8")
    assert "before" in content
    assert "after" not in content
    assert "after" in capsys.readouterr().out


def test_log_dir_that_is_a_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        Logger(blocker, False)