"""Integration tests for directory mode (DirectoryRunner + CLI).

Covers:
- usage and missing-input errors
- copy-through of marker-free files
- split, removal and summary output
- deletion guard when every unit is empty
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from codegen_split.cli import split_files_main
from codegen_split.core.errors import InputNotFoundError
from codegen_split.core.settings import default_settings
from codegen_split.postprocess.directory_runner import DirectoryRunner, discover_files


COMBINED = "A\n---SPLIT:Foo.php---\nfoo-body\n---SPLIT:Bar.php---\nbar-body\n"
PLAIN = "<?php\n\nclass Plain\n{\n}\n"


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # keep any config/settings.yaml of the checkout out of these tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def gen_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "gen"
    directory.mkdir()
    return directory


# ── Argument errors ─────────────────────────────────────────────────


class TestArgumentErrors:
    def test_no_arguments_prints_usage_and_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = split_files_main([])

        out = capsys.readouterr().out
        assert code == 1
        assert out.startswith("Usage:")

    def test_single_argument_prints_usage(self, gen_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = split_files_main([str(gen_dir)])

        assert code == 1
        assert "Usage:" in capsys.readouterr().out

    def test_missing_input_dir_exits_1(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        missing = tmp_path / "nope"

        code = split_files_main([str(missing), str(tmp_path / "out")])

        captured = capsys.readouterr()
        assert code == 1
        assert f"Error: Input directory does not exist: {missing}" in captured.out
        assert not (tmp_path / "out").exists()

    def test_input_path_that_is_a_file_is_rejected(self, tmp_path: Path) -> None:
        not_a_dir = tmp_path / "file.php"
        not_a_dir.write_text(PLAIN, encoding="utf-8")

        with pytest.raises(InputNotFoundError):
            DirectoryRunner(default_settings()).run(not_a_dir, tmp_path / "out")

    def test_missing_config_file_exits_1(self, gen_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = split_files_main([str(gen_dir), str(tmp_path / "out"), "--config", str(tmp_path / "x.yaml")])

        assert code == 1
        assert "Settings file not found" in capsys.readouterr().out


# ── Processing ──────────────────────────────────────────────────────


class TestProcessing:
    def test_split_copy_and_summary(self, gen_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (gen_dir / "DefaultController.php").write_text(COMBINED, encoding="utf-8")
        (gen_dir / "Plain.php").write_text(PLAIN, encoding="utf-8")
        (gen_dir / "README.md").write_text("---SPLIT:Ignored.php---\nx\n", encoding="utf-8")
        out_dir = tmp_path / "out" / "nested"

        code = split_files_main([str(gen_dir), str(out_dir)])

        out = capsys.readouterr().out.splitlines()
        assert code == 0
        assert sorted(p.name for p in out_dir.iterdir()) == ["Bar.php", "Foo.php", "Plain.php"]
        assert (out_dir / "Foo.php").read_text(encoding="utf-8") == "foo-body\n"
        assert (out_dir / "Bar.php").read_text(encoding="utf-8") == "bar-body\n"
        assert (out_dir / "Plain.php").read_bytes() == PLAIN.encode("utf-8")
        assert not (gen_dir / "DefaultController.php").exists()
        assert (gen_dir / "Plain.php").exists()
        assert (gen_dir / "README.md").exists()
        assert "  Created: Foo.php" in out
        assert "  Created: Bar.php" in out
        assert "  Removed combined file: DefaultController.php" in out
        assert out[-2:] == ["", "Split complete: 2 files created from 1 combined files"]

    def test_empty_input_dir_still_prints_summary(self, gen_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = split_files_main([str(gen_dir), str(tmp_path / "out")])

        assert code == 0
        assert (tmp_path / "out").is_dir()
        assert "Split complete: 0 files created from 0 combined files" in capsys.readouterr().out

    def test_existing_output_dir_is_accepted(self, gen_dir: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        (gen_dir / "C.php").write_text(COMBINED, encoding="utf-8")

        assert split_files_main([str(gen_dir), str(out_dir)]) == 0
        assert (out_dir / "Foo.php").exists()

    def test_source_with_only_empty_units_is_kept(self, gen_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = gen_dir / "Empty.php"
        source.write_text("header\n---SPLIT:A.php---\n\n---SPLIT:B.php---\n", encoding="utf-8")
        out_dir = tmp_path / "out"

        summary = DirectoryRunner(default_settings()).run(gen_dir, out_dir)

        out = capsys.readouterr().out
        assert source.exists()
        assert list(out_dir.iterdir()) == []
        assert summary.files_created == 0
        assert summary.combined_files == 1
        assert "Removed combined file" not in out
        assert "Split complete: 0 files created from 1 combined files" in out

    def test_passthrough_is_idempotent(self, gen_dir: Path, tmp_path: Path) -> None:
        raw = b"<?php\r\n// \xe2\x9c\x93 no markers\r\n"
        (gen_dir / "Plain.php").write_bytes(raw)
        first, second = tmp_path / "out1", tmp_path / "out2"

        split_files_main([str(gen_dir), str(first)])
        split_files_main([str(gen_dir), str(second)])

        assert (first / "Plain.php").read_bytes() == raw
        assert (second / "Plain.php").read_bytes() == raw

    def test_rerun_overwrites_previous_output(self, gen_dir: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        (gen_dir / "C.php").write_text("---SPLIT:Same.php---\nv1\n", encoding="utf-8")
        split_files_main([str(gen_dir), str(out_dir)])
        (gen_dir / "C.php").write_text("---SPLIT:Same.php---\nv2\n", encoding="utf-8")

        assert split_files_main([str(gen_dir), str(out_dir)]) == 0
        assert (out_dir / "Same.php").read_text(encoding="utf-8") == "v2\n"

    def test_extension_option_selects_other_files(self, gen_dir: Path, tmp_path: Path) -> None:
        (gen_dir / "api.ts").write_text("---SPLIT:Users.ts---\nexport {}\n", encoding="utf-8")
        (gen_dir / "C.php").write_text(COMBINED, encoding="utf-8")
        out_dir = tmp_path / "out"

        assert split_files_main([str(gen_dir), str(out_dir), "--extension", "ts"]) == 0
        assert sorted(p.name for p in out_dir.iterdir()) == ["Users.ts"]
        assert (gen_dir / "C.php").exists()

    def test_config_file_sets_extension(self, gen_dir: Path, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("split:\n  file_extension: .java\n", encoding="utf-8")
        (gen_dir / "Api.java").write_text("---SPLIT:PetApi.java---\nclass PetApi {}\n", encoding="utf-8")

        assert split_files_main([str(gen_dir), str(tmp_path / "out"), "--config", str(config)]) == 0
        assert (tmp_path / "out" / "PetApi.java").read_text(encoding="utf-8") == "class PetApi {}\n"

    def test_write_failure_keeps_source(self, gen_dir: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        (out_dir / "Bar.php").mkdir(parents=True)
        source = gen_dir / "C.php"
        source.write_text(COMBINED, encoding="utf-8")

        with pytest.raises(OSError):
            split_files_main([str(gen_dir), str(out_dir)])

        assert source.exists()
        assert (out_dir / "Foo.php").read_text(encoding="utf-8") == "foo-body\n"

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_output_dir_created_with_configured_mode(self, gen_dir: Path, tmp_path: Path) -> None:
        settings = default_settings()
        settings.split["dir_mode"] = "0700"
        out_dir = tmp_path / "private"

        DirectoryRunner(settings).run(gen_dir, out_dir)

        assert out_dir.stat().st_mode & 0o777 == 0o700


def test_in_place_run_keeps_plain_files(gen_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (gen_dir / "A.php").write_text("---SPLIT:Split.php---\nsplit\n", encoding="utf-8")
    (gen_dir / "B.php").write_text(PLAIN, encoding="utf-8")

    code = split_files_main([str(gen_dir), str(gen_dir)])

    assert code == 0
    assert sorted(p.name for p in gen_dir.iterdir()) == ["B.php", "Split.php"]
    assert (gen_dir / "B.php").read_text(encoding="utf-8") == PLAIN
    assert "Split complete: 1 files created from 1 combined files" in capsys.readouterr().out


def test_summary_record_logged_at_debug(gen_dir: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (gen_dir / "C.php").write_text(COMBINED, encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger="codegen_split"):
        DirectoryRunner(default_settings()).run(gen_dir, tmp_path / "out")

    messages = [r.getMessage() for r in caplog.records]
    assert any("Directory split summary" in m and "'files_created': 2" in m for m in messages)


def test_discover_files_is_flat_and_filtered(gen_dir: Path) -> None:
    (gen_dir / "b.php").write_text("", encoding="utf-8")
    (gen_dir / "a.php").write_text("", encoding="utf-8")
    (gen_dir / "c.txt").write_text("", encoding="utf-8")
    (gen_dir / "sub.php").mkdir()
    (gen_dir / "sub.php" / "d.php").write_text("", encoding="utf-8")

    assert [p.name for p in discover_files(gen_dir, ".php")] == ["a.php", "b.php"]
