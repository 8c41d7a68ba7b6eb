""" Test cases for the commandline utilities. """

import unittest
import tempfile
import io
import os
from unittest.mock import patch

from simplepas.cli.run import run
from helper_util import relpath


def new_temp_file(suffix, content=None):
    """ Generate a new temporary filename, optionally with content """
    handle, filename = tempfile.mkstemp(suffix=suffix)
    os.close(handle)
    if content is not None:
        with open(filename, 'w') as f:
            f.write(content)
    return filename


class RunTestCase(unittest.TestCase):
    """ Test the simplepas-run command-line utility """
    hello_file = relpath('..', 'examples', 'hello.pas')

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_hello(self, mock_stdout):
        run([self.hello_file])
        self.assertEqual('Hello world\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_input_file(self, mock_stdout):
        input_file = new_temp_file('.txt', '2\n5 6\n')
        self.addCleanup(os.remove, input_file)
        run([relpath('..', 'examples', 'grades.pas'), '--input', input_file])
        self.assertEqual('average:   5.50\nF\n', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_check(self, mock_stdout):
        """ Check only parses the program """
        run(['--check', self.hello_file])
        self.assertEqual('', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_check_reports_semantic_errors(self, mock_stdout, mock_stderr):
        source_file = new_temp_file(
            '.pas', 'program p;\nbegin\n  x := y\nend.\n')
        self.addCleanup(os.remove, source_file)
        with self.assertRaises(SystemExit) as cm:
            run(['--check', source_file])
        self.assertEqual(1, cm.exception.code)
        self.assertIn(
            "SEMANTIC ERROR: line 3: Undeclared identifier at 'y'",
            mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_syntax_error(self, mock_stdout, mock_stderr):
        source_file = new_temp_file(
            '.pas', "program p;\nbegin\n  writeln('a')\n  x := ;\nend.\n")
        self.addCleanup(os.remove, source_file)
        with self.assertRaises(SystemExit) as cm:
            run([source_file])
        self.assertEqual(1, cm.exception.code)
        output = mock_stdout.getvalue()
        self.assertIn('2 Errors', output)
        self.assertIn('SYNTAX ERROR: line 4: Missing ;', output)
        self.assertIn("SYNTAX ERROR: line 4: Unexpected token at ';'", output)

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_runtime_error(self, mock_stdout, mock_stderr):
        source_file = new_temp_file(
            '.pas',
            "program p;\nbegin\n  writeln('a');\n  x := 1 div 0\nend.\n")
        self.addCleanup(os.remove, source_file)
        with self.assertRaises(SystemExit) as cm:
            run([source_file])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual(
            'a\nline 4: Division by zero\n', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_missing_file(self, mock_stderr):
        with self.assertRaises(SystemExit) as cm:
            run([relpath('no_such_program.pas')])
        self.assertEqual(1, cm.exception.code)
        self.assertIn('File not found', mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_verbose_report(self, mock_stdout, mock_stderr):
        report_file = new_temp_file('.log')
        self.addCleanup(os.remove, report_file)
        run(['-v', '--report', report_file, self.hello_file])
        self.assertEqual('Hello world\n', mock_stdout.getvalue())
        with open(report_file) as f:
            report = f.read()
        self.assertIn('Loggers attached', report)
        self.assertIn('Executing program hello', report)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        """ Test help function """
        with self.assertRaises(SystemExit) as cm:
            run(['-h'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('Pascal interpreter', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_version(self, mock_stdout):
        with self.assertRaises(SystemExit) as cm:
            run(['--version'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('simplepas', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_invalid_log_level(self, mock_stderr):
        """ Test invalid log level """
        with self.assertRaises(SystemExit) as cm:
            run(['--log', 'blabla', self.hello_file])
        self.assertEqual(2, cm.exception.code)


if __name__ == '__main__':
    unittest.main()
