import pytest

import returnfix.logging


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch):
    log_path = tmp_path / "returnfix_execution.log"
    monkeypatch.setattr(returnfix.logging, "log_file_path", str(log_path))
    return log_path
