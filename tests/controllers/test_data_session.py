from __future__ import annotations

import pytest

from homebank_helper.controllers.data_session import DataSession
from homebank_helper.controllers.xhb_loader import DoesNotExistError


def test_same_path_is_loaded_once(sample_xhb, monkeypatch):
    # Arrange
    calls = []
    import homebank_helper.controllers.data_session as ds

    real = ds.load_database

    def counting_load(path):
        calls.append(path)
        return real(path)

    monkeypatch.setattr(ds, "load_database", counting_load)
    session = DataSession()

    # Act
    first = session.load(sample_xhb)
    second = session.load(str(sample_xhb))

    # Assert
    assert first is second
    assert len(calls) == 1
    assert session.path == sample_xhb.absolute()


def test_invalidate_forces_reload(sample_xhb):
    session = DataSession()
    first = session.load(sample_xhb)
    session.invalidate()
    assert session.db is None
    assert session.load(sample_xhb) is not first


def test_other_path_reloads(sample_xhb, tmp_path):
    other = tmp_path / "copy.xhb"
    other.write_bytes(sample_xhb.read_bytes())
    session = DataSession()
    first = session.load(sample_xhb)
    assert session.load(other) is not first
    assert session.path == other.absolute()


def test_failed_load_propagates(tmp_path):
    session = DataSession()
    with pytest.raises(DoesNotExistError):
        session.load(tmp_path / "missing.xhb")
    assert session.db is None
