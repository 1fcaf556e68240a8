import io
import logging
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

import yamlsplit.global_settings as gs
from yamlsplit.__main__ import main


class Main(unittest.TestCase):

    def setUp(self):
        self.cwd = os.getcwd()
        self.tmp_dir = tempfile.mkdtemp()
        os.chdir(self.tmp_dir)
        self.settings = mock.patch.multiple(gs, USE_VERBOSE_TRACEBACK=False, FIRST_OUTPUT_INDEX=0)
        self.settings.start()

    def tearDown(self):
        self.settings.stop()
        os.chdir(self.cwd)
        shutil.rmtree(self.tmp_dir)

    def write(self, filename, data):
        with open(filename, 'wb') as f:
            f.write(data)

    def read(self, filename):
        with open(filename, 'rb') as f:
            return f.read()

    def test_file(self):
        os.mkdir('in')
        self.write('in/docs.k8s.yaml', b'kind: A\n---\nkind: B\n...\n')
        self.assertEqual(main(['in/docs.k8s.yaml']), 0)
        self.assertEqual(sorted(os.listdir('in')), ['docs.k8s-0.yaml', 'docs.k8s-1.yaml', 'docs.k8s.yaml'])
        self.assertEqual(self.read('in/docs.k8s-0.yaml'), b'kind: A\n')
        self.assertEqual(self.read('in/docs.k8s-1.yaml'), b'kind: B\n')

    def test_stdin(self):
        for args in [[], ['-']]:
            stdin = io.TextIOWrapper(io.BytesIO(b'---\na: 1\n---\nb: 2\n'))
            with mock.patch.object(sys, 'stdin', stdin):
                self.assertEqual(main(args), 0)
            self.assertEqual(sorted(os.listdir('.')), ['stdin-0.yaml', 'stdin-1.yaml'])
            self.assertEqual(self.read('stdin-0.yaml'), b'a: 1\n')
            self.assertEqual(self.read('stdin-1.yaml'), b'b: 2\n')
            self.assertFalse(stdin.closed)

    def test_empty_input(self):
        self.write('empty.yaml', b'')
        self.assertEqual(main(['empty.yaml']), 0)
        self.assertEqual(os.listdir('.'), ['empty.yaml'])

    def test_missing_input(self):
        with self.assertLogs(level=logging.ERROR) as logs:
            self.assertEqual(main(['missing.yaml']), 1)
        self.assertIn('Split failed', logs.output[0])
        self.assertEqual(os.listdir('.'), [])

    def test_decode_error(self):
        self.write('bad.yaml', b'a: 1\n---\nb: \xff\n')
        with self.assertLogs(level=logging.ERROR):
            self.assertEqual(main(['bad.yaml']), 1)
        self.assertEqual(self.read('bad-0.yaml'), b'a: 1\n')

    def test_usage_summary(self):
        self.write('docs.yaml', b'a: 1\n---\nb: 2\n')
        with self.assertLogs(level=logging.INFO) as logs:
            self.assertEqual(main(['docs.yaml']), 0)
        self.assertTrue(any('Wrote 2 documents (2 lines, 10B) to 2 files' in line for line in logs.output))

    def test_usage(self):
        with mock.patch.object(sys, 'stderr', io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                main(['a.yaml', 'b.yaml'])
        self.assertEqual(cm.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
