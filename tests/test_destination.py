import os

import pytest

from gzipkit.core.errors import InvalidDestination
from gzipkit.storage.local import DestinationResolver


@pytest.mark.parametrize("value", [None, "", "   ", "\t"])
def test_blank_destination_uses_source_directory(value):
    decision = DestinationResolver().resolve(value)

    assert decision.per_source
    assert decision.directory is None


def test_existing_directory_resolves_to_absolute_path(tmp_path, monkeypatch):
    (tmp_path / "out").mkdir()
    monkeypatch.chdir(tmp_path)

    decision = DestinationResolver().resolve("out")

    assert decision.directory == (tmp_path / "out").resolve()
    assert decision.directory.is_absolute()


def test_missing_directory_is_created_recursively(tmp_path):
    target = tmp_path / "a" / "b" / "c"

    decision = DestinationResolver().resolve(str(target))

    assert target.is_dir()
    assert decision.directory == target.resolve()


def test_file_as_destination_is_rejected(tmp_path):
    existing = tmp_path / "plain.txt"
    existing.write_text("x")

    with pytest.raises(InvalidDestination) as excinfo:
        DestinationResolver().resolve(str(existing))

    assert excinfo.value.path == str(existing)


def test_ambiguous_pattern_is_rejected(tmp_path):
    (tmp_path / "out1").mkdir()
    (tmp_path / "out2").mkdir()

    with pytest.raises(InvalidDestination):
        DestinationResolver().resolve(str(tmp_path / "out*"))

    assert not (tmp_path / "out*").exists()


def test_pattern_with_single_match_resolves(tmp_path):
    (tmp_path / "only-one").mkdir()

    decision = DestinationResolver().resolve(str(tmp_path / "only-*"))

    assert decision.directory == (tmp_path / "only-one").resolve()


def test_provider_path_is_rejected():
    with pytest.raises(InvalidDestination):
        DestinationResolver().resolve("s3://bucket/archives")


def test_creation_failure_surfaces_as_invalid_destination(tmp_path, monkeypatch):
    calls = []

    def refuse(path, exist_ok=False):
        calls.append(path)
        raise PermissionError("read-only")

    monkeypatch.setattr(os, "makedirs", refuse)

    with pytest.raises(InvalidDestination):
        DestinationResolver().resolve(str(tmp_path / "denied"))

    assert calls == [str(tmp_path / "denied")]


def test_existing_file_destination_attempts_creation_first(tmp_path, monkeypatch, log_stream):
    existing = tmp_path / "plain.txt"
    existing.write_text("x")
    real_makedirs = os.makedirs
    calls = []

    def recording_makedirs(path, exist_ok=False):
        calls.append(path)
        return real_makedirs(path, exist_ok=exist_ok)

    monkeypatch.setattr(os, "makedirs", recording_makedirs)

    with pytest.raises(InvalidDestination):
        DestinationResolver().resolve(str(existing))

    assert calls == [str(existing)]
    log = log_stream.getvalue()
    assert "[ERROR]" in log
    assert str(existing) in log
