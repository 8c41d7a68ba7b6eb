import unittest
import io
from simplepas.lang.pascal import PascalBuilder
from simplepas.common import DiagnosticsManager, CompilerError
from simplepas.common import SemanticError
from simplepas.api import run_pascal, parse_pascal
from helper_util import relpath


class BuildTestCaseBase(unittest.TestCase):
    """ Test if various snippets build correctly """
    def setUp(self):
        self.diag = DiagnosticsManager()
        self.builder = PascalBuilder(self.diag)
        self.diag.clear()

    def build(self, snippet):
        """ Try to build a snippet """
        return self.builder.build(io.StringIO(snippet))

    def expect_errors(self, snippet, rows):
        """ Helper to test for expected errors on rows """
        with self.assertRaises(CompilerError):
            self.build(snippet)
        actual_errors = [
            err.loc.row if err.loc else 0 for err in self.diag.diags]
        if rows != actual_errors:
            self.diag.print_errors()
        self.assertSequenceEqual(rows, actual_errors)

    def expect_ok(self, snippet):
        """ Expect a snippet to be OK """
        program, symbol_table = self.build(snippet)
        if len(self.diag.diags) > 0:
            self.diag.print_errors()
        self.assertEqual(0, len(self.diag.diags))
        return program, symbol_table

    def expect_output(self, snippet, output, input_text=''):
        """ Expect a snippet to run and print the given output """
        self.expect_ok(snippet)
        stdout = io.StringIO()
        run_pascal(
            io.StringIO(snippet), stdout=stdout,
            stdin=io.StringIO(input_text))
        self.assertEqual(output, stdout.getvalue())


class PascalTestCase(BuildTestCaseBase):
    """ Test pascal snippets """

    def test_hello(self):
        """ Test the pascal hello world """
        snippet = """
        {
          This is a hello world program with nice comments!
        }
        program hello1;

        begin
          writeln('Hello world!')
        end.
        """
        self.expect_output(snippet, 'Hello world!\n')

    def test_if(self):
        """ Test if statement """
        snippet = """
        program test_if;
        begin
          a := 100;
          if (a < 20) then
            (* check something *)
            writeln('A is less than 20')
          else if (a = 33) then
            writeln('A is 33')
          else
            writeln('A more than 20 or 20 and not 33')
        end.
        """
        self.expect_output(snippet, 'A more than 20 or 20 and not 33\n')

    def test_for_loop(self):
        """ Test the for loop """
        snippet = """
        program hello1;
        begin
          for a := 10 to 12 do

          begin
            writeln('Hello world!', a);
          end;
        end.
        """
        self.expect_output(
            snippet, 'Hello world!10\nHello world!11\nHello world!12\n')

    def test_case_else(self):
        """ Test case followed by else """
        snippet = """
        program test_case_else;
        begin
          grade := 6;
          case (grade) of
           10: writeln('Excellent!');
           9, 8: writeln('Well done!');
           7: writeln('Passed');
          else
            writeln('Too bad...');
          end;

          writeln('Your grade is ', grade);
        end.
        """
        self.expect_output(snippet, 'Too bad...\nYour grade is 6\n')

    def test_symbol_table(self):
        """ Assigned names end up in the symbol table """
        _, symbol_table = self.expect_ok(
            'program p; begin Count := 1; for I := 1 to 2 do end.')
        self.assertIn('count', symbol_table)
        self.assertIn('i', symbol_table)

    def test_syntax_errors(self):
        """ Syntax errors are all reported, then the build fails """
        snippet = """program p;
        begin
          x := 1 +;
          y := 2
          z := 3;
          if then x := 1
        end.
        """
        self.expect_errors(snippet, [3, 5, 6])

    def test_token_error(self):
        snippet = """program p;
        begin
          x := 12.3.4
        end.
        """
        self.expect_errors(snippet, [3, 3])

    def test_semantic_error_does_not_stop_build(self):
        program, _ = self.build('program p;\nbegin\n  x := y\nend.')
        self.assertEqual(1, self.diag.error_count)
        self.assertIsInstance(self.diag.diags[0], SemanticError)
        self.assertFalse(self.diag.has_syntax_errors)

    def test_print_errors(self):
        with self.assertRaises(CompilerError):
            self.build('program p;\nbegin\n  x := )\nend.')
        f = io.StringIO()
        self.diag.print_errors(file=f)
        lines = f.getvalue().splitlines()
        self.assertEqual('1 Errors', lines[0])
        self.assertEqual(
            "SYNTAX ERROR: line 3: Unexpected token at ')'", lines[1])


class ApiTestCase(unittest.TestCase):
    def test_parse_pascal(self):
        program, symbol_table = parse_pascal(
            io.StringIO('program p; begin x := 1 end.'))
        self.assertEqual('p', program.text)
        self.assertIn('x', symbol_table)

    def test_parse_pascal_with_errors(self):
        diag = DiagnosticsManager()
        with self.assertRaises(CompilerError):
            parse_pascal(io.StringIO('program p; begin x := end.'), diag=diag)
        self.assertEqual(1, diag.error_count)

    def test_run_hello_example(self):
        stdout = io.StringIO()
        run_pascal(relpath('..', 'examples', 'hello.pas'), stdout=stdout)
        self.assertEqual('Hello world\n', stdout.getvalue())

    def test_run_loops_example(self):
        stdout = io.StringIO()
        run_pascal(relpath('..', 'examples', 'loops.pas'), stdout=stdout)
        self.assertEqual(
            '   1   2   3\n   2   4   6\n   3   6   9\nn = -2\n',
            stdout.getvalue())

    def test_run_grades_example(self):
        stdout = io.StringIO()
        run_pascal(
            relpath('..', 'examples', 'grades.pas'), stdout=stdout,
            stdin=io.StringIO('3\n9 8 10\n'))
        self.assertEqual('average:   9.00\nA\n', stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
