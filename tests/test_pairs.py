"""Tests for audio/annotation pair discovery."""

from pathlib import Path

import pytest

from fricatives.pairs import annotation_path_for, find_pairs


def test_annotation_path_default():
    assert annotation_path_for(Path("/data/spk1.wav")) == Path("/data/spk1.TextGrid")


def test_annotation_path_with_suffix():
    path = annotation_path_for(Path("/data/spk1.wav"), suffix="_maus")
    assert path == Path("/data/spk1_maus.TextGrid")


def test_annotation_path_other_directory():
    path = annotation_path_for(Path("/data/spk1.wav"), annotation_dir=Path("/grids"))
    assert path == Path("/grids/spk1.TextGrid")


def test_find_pairs_sorted_and_matched(tmp_path):
    for name in ["b.wav", "a.wav", "a.TextGrid", "b.TextGrid", "notes.txt"]:
        (tmp_path / name).write_text("")
    pairs = find_pairs(tmp_path)
    assert [p.audio.name for p in pairs] == ["a.wav", "b.wav"]
    assert pairs[0].annotation == tmp_path / "a.TextGrid"
    assert pairs[0].name == "a.wav"


def test_find_pairs_skips_unannotated(tmp_path):
    (tmp_path / "a.wav").write_text("")
    (tmp_path / "b.wav").write_text("")
    (tmp_path / "a_aligned.TextGrid").write_text("")
    pairs = find_pairs(tmp_path, suffix="_aligned")
    assert [p.audio.name for p in pairs] == ["a.wav"]


def test_find_pairs_extension_case_insensitive(tmp_path):
    (tmp_path / "a.WAV").write_text("")
    (tmp_path / "a.TextGrid").write_text("")
    assert len(find_pairs(tmp_path)) == 1


def test_find_pairs_annotation_dir(tmp_path):
    audio_dir = tmp_path / "audio"
    grid_dir = tmp_path / "grids"
    audio_dir.mkdir()
    grid_dir.mkdir()
    (audio_dir / "a.wav").write_text("")
    (grid_dir / "a.TextGrid").write_text("")
    pairs = find_pairs(audio_dir, annotation_dir=grid_dir)
    assert pairs[0].annotation == grid_dir / "a.TextGrid"


def test_find_pairs_missing_dir():
    with pytest.raises(FileNotFoundError):
        find_pairs(Path("/nonexistent/dir"))
