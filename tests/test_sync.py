"""Tests for the file round trip around the block rewriter."""

import pytest

from mmac.block.rewriter import BlockOptions, compute_fingerprint
from mmac.block.sync import UpdateResult, read_text, update_file, write_text
from mmac.errors import (
    EmptyContentError,
    MarkerOrderError,
    ReadFailureError,
    UnknownExtensionError,
    WriteFailureError,
)


def _options(path, **overrides):
    defaults = {
        "update_instruction": "npm run update-things",
        "file_path": str(path),
        "lines": ["import foo from 'some-funky-path'"],
    }
    defaults.update(overrides)
    return BlockOptions(**defaults)


class TestUpdateFile:
    def test_updates_file(self, js_file):
        result = update_file(_options(js_file))
        assert result.action == "updated"
        assert result.changed
        assert result.fingerprint == "e6e22a15632945dec62b6320b7e05ff4"
        content = js_file.read_text()
        assert content.startswith("import fs from 'fs'\n/* GENERATED_START(id:main;hash:e6e22a15")
        assert "import foo from 'some-funky-path'\n/* GENERATED_END(id:main) */\n" in content
        assert content.endswith("fs.writeFileSync(foo, bar)\n")

    def test_second_run_is_unchanged(self, js_file):
        update_file(_options(js_file))
        before = js_file.read_bytes()
        result = update_file(_options(js_file))
        assert result.action == "unchanged"
        assert js_file.read_bytes() == before

    def test_dry_run_does_not_write(self, js_file):
        before = js_file.read_bytes()
        result = update_file(_options(js_file), dry_run=True)
        assert result.action == "updated"
        assert result.dry_run
        assert js_file.read_bytes() == before

    def test_markdown_block_with_id(self, md_file):
        lines = ["- `mmac check`", "- `mmac update`"]
        update_file(_options(md_file, lines=lines, block_id="commands"))
        content = md_file.read_text()
        assert "- stale entry" not in content
        assert content.startswith("# Commands\n\nHand-written intro.\n\n")
        assert content.endswith("<!-- GENERATED_END(id:commands) -->\n\nHand-written outro.\n")
        assert f"hash:{compute_fingerprint(lines)})" in content

    def test_crlf_file_round_trips(self, tmp_path):
        target = tmp_path / "crlf.js"
        target.write_bytes(
            b"head\r\n/* GENERATED_START(id:main;hash) */\r\n"
            b"/* GENERATED_END(id:main) */\r\ntail\r\n"
        )
        update_file(_options(target, lines=["x"]))
        data = target.read_bytes()
        assert data.startswith(b"head\r\n")
        assert data.endswith(b"\nx\n/* GENERATED_END(id:main) */\ntail\r\n")

    def test_post_process_applied_to_written_text(self, js_file):
        update_file(_options(js_file, post_process=str.upper))
        assert js_file.read_text().startswith("IMPORT FS FROM 'FS'")

    def test_invalid_options_never_read(self, tmp_path):
        missing = tmp_path / "missing.js"
        with pytest.raises(EmptyContentError):
            update_file(_options(missing, lines=[]))
        with pytest.raises(UnknownExtensionError):
            update_file(_options(tmp_path / "missing.bar"))

    def test_read_failure(self, tmp_path):
        missing = tmp_path / "missing.js"
        with pytest.raises(ReadFailureError, match="Could not read file") as exc_info:
            update_file(_options(missing))
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.path == str(missing)

    def test_marker_error_leaves_file_alone(self, tmp_path):
        target = tmp_path / "bad.js"
        target.write_text("/* GENERATED_END(id:main) */\n/* GENERATED_START(id:main;hash) */\n")
        before = target.read_bytes()
        with pytest.raises(MarkerOrderError):
            update_file(_options(target))
        assert target.read_bytes() == before


class TestTextIO:
    def test_read_undecodable(self, tmp_path):
        target = tmp_path / "latin1.js"
        target.write_bytes(b"caf\xe9")
        with pytest.raises(ReadFailureError):
            read_text(target)

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory")
        with pytest.raises(WriteFailureError, match="Could not write file"):
            write_text(blocker / "out.js", "content")


class TestUpdateResult:
    def test_to_dict(self):
        result = UpdateResult("foo.js", "unchanged", "abc", dry_run=True)
        assert result.to_dict() == {
            "path": "foo.js",
            "action": "unchanged",
            "fingerprint": "abc",
            "dry_run": True,
        }
        assert not result.changed
