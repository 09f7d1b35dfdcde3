"""Tests for the export pipeline and reporter."""

import io
import logging
import os
import tempfile
import unittest

from helpers import FIXTURE_ARCHIVE, write_manifest, write_note

from pytomboy.archive import export_archive
from pytomboy.archive.domain import NoteContent
from pytomboy.archive.models import Note
from pytomboy.archive.rendering.options import ExportConfig
from pytomboy.archive.rendering.reporter import format_note, write_note as report
from pytomboy.exceptions import (
    ArchiveDecodeError,
    ArchiveReadError,
    InvalidNoteIdError,
)


class ReporterTest(unittest.TestCase):
    def test_block_format(self):
        note = Note(title="Hello", content=NoteContent(raw="World"))
        self.assertEqual(format_note(note), "Title: Hello\nWorld\n\n")

    def test_markup_is_written_untouched(self):
        sink = io.StringIO()
        report(sink, Note(title="T", content=NoteContent(raw="<bold>Hi</bold>")))
        self.assertEqual(sink.getvalue(), "Title: T\n<bold>Hi</bold>\n\n")


class ExportArchiveTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = self.tmp.name
        self.logger = logging.getLogger("tests.exporter")
        self.sink = io.StringIO()

    def tearDown(self):
        self.tmp.cleanup()

    def _export(self, **kwargs):
        config = ExportConfig(in_path=self.root, **kwargs)
        return export_archive(config, sink=self.sink, logger=self.logger)

    def test_all_notes_in_manifest_order(self):
        write_manifest(self.root, [("c", 1), ("a", 2), ("b", 1)], revision=9)
        write_note(self.root, "a", 2, "Alpha", "first")
        write_note(self.root, "b", 1, "Beta", "<italic>second</italic>")
        write_note(self.root, "c", 1, "Gamma", "third")

        result = self._export()

        self.assertEqual(
            self.sink.getvalue(),
            "Title: Gamma\nthird\n\n"
            "Title: Alpha\nfirst\n\n"
            "Title: Beta\n<italic>second</italic>\n\n",
        )
        self.assertEqual(result.written, 3)
        self.assertEqual(result.skipped, [])

    def test_missing_note_is_skipped(self):
        write_manifest(self.root, [("a", 1), ("gone", 1), ("b", 1)])
        write_note(self.root, "a", 1, "A", "one")
        write_note(self.root, "b", 1, "B", "two")

        with self.assertLogs(self.logger, level="WARNING"):
            result = self._export()

        self.assertEqual(self.sink.getvalue(), "Title: A\none\n\nTitle: B\ntwo\n\n")
        self.assertEqual(result.written, 2)
        [(entry, error)] = result.skipped
        self.assertEqual(entry.id, "gone")
        self.assertIsInstance(error, ArchiveReadError)

    def test_note_under_wrong_revision_is_missing(self):
        write_manifest(self.root, [("a", 2)], revision=2)
        write_note(self.root, "a", 1, "A", "one")

        result = self._export()

        self.assertEqual(self.sink.getvalue(), "")
        self.assertIsInstance(result.skipped[0][1], ArchiveReadError)

    def test_malformed_note_is_skipped(self):
        write_manifest(self.root, [("bad", 1), ("ok", 1)])
        write_note(self.root, "bad", 1, "Broken", "<unclosed>")
        write_note(self.root, "ok", 1, "Fine", "body")

        result = self._export()

        self.assertEqual(self.sink.getvalue(), "Title: Fine\nbody\n\n")
        self.assertIsInstance(result.skipped[0][1], ArchiveDecodeError)

    def test_utf16_note_is_exported_and_later_notes_follow(self):
        write_manifest(self.root, [("wide", 1), ("ok", 1)])
        os.makedirs(os.path.join(self.root, "0", "1"))
        with open(os.path.join(self.root, "0", "1", "wide.note"), "wb") as f:
            f.write(
                '<?xml version="1.0" encoding="UTF-16"?>'
                "<note><title>Wide</title><text>caf\xe9</text></note>".encode("utf-16")
            )
        write_note(self.root, "ok", 1, "Fine", "body")

        result = self._export()

        self.assertEqual(
            self.sink.getvalue(), "Title: Wide\ncaf\xe9\n\nTitle: Fine\nbody\n\n"
        )
        self.assertEqual(result.skipped, [])

    def test_undecodable_note_does_not_stop_the_export(self):
        write_manifest(self.root, [("odd", 1), ("ok", 1)])
        os.makedirs(os.path.join(self.root, "0", "1"))
        with open(os.path.join(self.root, "0", "1", "odd.note"), "wb") as f:
            f.write(
                b'<?xml version="1.0" encoding="x-no-such-codec"?>'
                b"<note><title>Odd</title><text>x</text></note>"
            )
        write_note(self.root, "ok", 1, "Fine", "body")

        result = self._export()

        self.assertEqual(self.sink.getvalue(), "Title: Fine\nbody\n\n")
        self.assertIsInstance(result.skipped[0][1], ArchiveDecodeError)

    def test_traversal_id_is_skipped(self):
        write_manifest(self.root, [("../../secret", 1), ("ok", 1)])
        write_note(self.root, "ok", 1, "Fine", "body")

        result = self._export()

        self.assertEqual(self.sink.getvalue(), "Title: Fine\nbody\n\n")
        self.assertIsInstance(result.skipped[0][1], InvalidNoteIdError)

    def test_missing_manifest_is_fatal(self):
        with self.assertRaises(ArchiveReadError):
            self._export()
        self.assertEqual(self.sink.getvalue(), "")

    def test_malformed_manifest_is_fatal(self):
        with open(os.path.join(self.root, "manifest.xml"), "w") as f:
            f.write("<sync revision=")
        with self.assertRaises(ArchiveDecodeError):
            self._export()

    def test_options_are_logged_but_inert(self):
        out_path = os.path.join(self.root, "out")
        write_manifest(self.root, [("a", 1)])
        write_note(self.root, "a", 1, "A", "one")

        with self.assertLogs(self.logger, level="INFO") as logs:
            self._export(out_path=out_path, save_revisions=True)

        messages = [r.getMessage() for r in logs.records]
        self.assertIn(f"Output path: {out_path}", messages)
        self.assertIn("Save revisions: True", messages)
        self.assertEqual(self.sink.getvalue(), "Title: A\none\n\n")
        self.assertFalse(os.path.exists(out_path))

    def test_fixture_archive(self):
        config = ExportConfig(in_path=FIXTURE_ARCHIVE)
        result = export_archive(config, sink=self.sink, logger=self.logger)

        self.assertEqual(result.written, 3)
        output = self.sink.getvalue()
        self.assertTrue(output.startswith("Title: Shopping List\n"))
        self.assertLess(output.index("Title: Start Here"), output.index("Title: Empty"))
        self.assertTrue(output.endswith("Title: Empty\n\n\n"))


if __name__ == "__main__":
    unittest.main()
