#!/usr/bin/env python3
"""
Tests for the cross-process sweep lock.
"""

import os
import tempfile
import unittest

from pipeline.control import PipelineController


class TestPipelineController(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.lock_file = os.path.join(self.tmpdir.name, "sweep.lock")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_acquire_and_release(self):
        controller = PipelineController(self.lock_file)
        self.assertTrue(controller.acquire_lock("cli", {"workers": 2}))

        info = controller.get_lock_info()
        self.assertEqual(info["source"], "cli")
        self.assertEqual(info["pid"], os.getpid())
        self.assertEqual(info["workers"], 2)

        controller.release_lock()
        self.assertIsNone(controller.get_lock_info())

    def test_second_holder_is_refused(self):
        first = PipelineController(self.lock_file)
        second = PipelineController(self.lock_file)

        self.assertTrue(first.acquire_lock("cron"))
        try:
            self.assertFalse(second.acquire_lock("cli"))
            self.assertIsNone(second.file_handle)
            self.assertEqual(second.get_lock_info()["source"], "cron")
        finally:
            first.release_lock()

        self.assertTrue(second.acquire_lock("cli"))
        second.release_lock()

    def test_lock_info_without_file(self):
        self.assertIsNone(PipelineController(self.lock_file).get_lock_info())

    def test_lock_info_corrupt_file(self):
        with open(self.lock_file, "w") as f:
            f.write("{not json")
        self.assertIsNone(PipelineController(self.lock_file).get_lock_info())


if __name__ == '__main__':
    unittest.main(verbosity=2)
