import logging

from jobboard.logging_config import setup_logging


def test_default_log_dir_is_under_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    log_file = setup_logging("INFO")

    assert log_file == tmp_path / "logs" / "jobboard.log"
    assert log_file.parent.is_dir()


def test_log_dir_override(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "custom"))

    log_file = setup_logging("DEBUG")

    assert log_file == tmp_path / "custom" / "jobboard.log"
    assert logging.getLogger("jobboard").level == logging.DEBUG
