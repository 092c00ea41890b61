import pytest

from gzipkit.core.errors import NotAFile, OutsideRoot, UnmatchedPattern
from gzipkit.utils.file_utils import expand_pattern, human_size, resolve_inputs


def test_glob_matches_are_sorted_and_absolute(make_file, tmp_path):
    make_file("b.log")
    make_file("a.log")
    make_file("c.txt")

    matches = expand_pattern(str(tmp_path / "*.log"))

    assert [path.name for path in matches] == ["a.log", "b.log"]
    assert all(path.is_absolute() for path in matches)


def test_existing_path_is_taken_literally(make_file, tmp_path):
    literal = make_file("report[1].txt")
    make_file("report1.txt")

    assert expand_pattern(str(literal)) == [literal]


def test_unmatched_pattern_is_reported_and_resolution_continues(make_file, tmp_path):
    first = make_file("first.txt")
    last = make_file("last.txt")
    reported = []

    resolved = resolve_inputs(
        [str(first), str(tmp_path / "missing-*.txt"), str(last)],
        on_unmatched=reported.append,
    )

    assert resolved == [first, last]
    assert len(reported) == 1
    assert isinstance(reported[0], UnmatchedPattern)
    assert reported[0].path == str(tmp_path / "missing-*.txt")


def test_unmatched_pattern_raises_without_callback(tmp_path):
    with pytest.raises(UnmatchedPattern):
        resolve_inputs([str(tmp_path / "nothing.txt")])


def test_directory_match_is_terminating(make_file, tmp_path):
    make_file("data.txt")
    (tmp_path / "folder").mkdir()

    with pytest.raises(NotAFile) as excinfo:
        resolve_inputs([str(tmp_path / "data.txt"), str(tmp_path / "folder")])

    assert excinfo.value.path == tmp_path / "folder"


def test_duplicates_are_kept(make_file, tmp_path):
    path = make_file("twice.txt")

    resolved = resolve_inputs([str(path), str(tmp_path / "tw*.txt")])

    assert resolved == [path, path]


def test_human_size():
    assert human_size(512) == "512.00 B"
    assert human_size(2048) == "2.00 KB"


def test_root_anchors_relative_patterns(make_file, tmp_path):
    inside = make_file("data/one.txt")

    assert resolve_inputs(["data/*.txt"], root=tmp_path) == [inside]


def test_root_rejects_matches_outside(make_file, tmp_path):
    make_file("outside.txt")
    root = tmp_path / "root"
    root.mkdir()

    with pytest.raises(OutsideRoot):
        resolve_inputs(["../outside.txt"], root=root)
