import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from main import copy_to_reports, main, resolve_raw_data


class PipelineDriverTests(unittest.TestCase):
    def test_existing_file_is_used_as_is(self):
        with tempfile.TemporaryDirectory() as tmp:
            raw = Path(tmp) / "raw_data.json"
            raw.write_text("{}", encoding="utf-8")
            self.assertEqual(resolve_raw_data(str(raw), "ignored"), raw)

    def test_channel_id_resolves_under_output_folder(self):
        self.assertEqual(
            resolve_raw_data("UC_TEST", ".tmp/youtube_audits"),
            Path(".tmp/youtube_audits") / "UC_TEST" / "raw_data.json",
        )

    def test_copy_skips_missing_source(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out.md"
            copy_to_reports(Path(tmp) / "missing.md", target, "report")
            self.assertFalse(target.exists())

            source = Path(tmp) / "report.md"
            source.write_text("# Report", encoding="utf-8")
            copy_to_reports(source, target, "report")
            self.assertEqual(target.read_text(encoding="utf-8"), "# Report")

    def test_invalid_log_level_exits(self):
        with mock.patch.dict(os.environ, {"LOG_LEVEL": "verbose"}), \
                mock.patch.object(sys, "argv", ["main.py", "UC_TEST"]):
            with self.assertRaises(SystemExit) as ctx:
                main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
