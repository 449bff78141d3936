from __future__ import annotations

import runpy

import pytest


def test_main_module_invokes_worker(monkeypatch):
    executed = {}

    def fake_main() -> int:
        executed["called"] = True
        return 0

    monkeypatch.setattr("overseer.main.worker.main", fake_main)

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("overseer.main.__main__", run_name="__main__")

    assert executed["called"] is True
    assert excinfo.value.code == 0
