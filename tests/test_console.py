"""
Tests for the console host.
"""
import io

from calculator_console import render, run_console, split_keys


class TestSplitKeys:

    def test_characters(self):
        assert split_keys('12+3') == ['1', '2', '+', '3']

    def test_named_keys(self):
        assert split_keys('7 Backspace Enter Escape =') == ['7', 'Backspace', 'Enter', 'Escape', '=']

    def test_blank_line(self):
        assert split_keys('   ') == []


class TestRunConsole:

    def run(self, text):
        out = io.StringIO()
        engine = run_console(stdin=io.StringIO(text), stdout=out)
        return engine, out.getvalue()

    def test_chained_calculation(self):
        engine, out = self.run('7 + 3 + 2 =\nquit\n')
        assert engine.display == '12'
        assert '> 12' in out.splitlines()

    def test_expression_shown_while_pending(self):
        engine, out = self.run('12 +\nexit\n')
        lines = out.splitlines()
        assert '> 12 +' in lines
        assert lines[lines.index('> 12 +') + 1] == '12'

    def test_grouped_display(self):
        _, out = self.run('1234567\n')
        assert '> 1,234,567' in out.splitlines()

    def test_stops_at_eof(self):
        engine, out = self.run('5 / 0 =\n')
        assert engine.display == 'Error'
        assert out.endswith('> \n')

    def test_unknown_keys_ignored(self):
        engine, _ = self.run('2 x + y 2 =\n')
        assert engine.display == '4'


def test_render_without_expression(calc):
    assert render(calc) == '0'


def test_run_console_uses_given_engine(press):
    engine = press('9 +')
    result = run_console(engine, stdin=io.StringIO('1 =\n'), stdout=io.StringIO())
    assert result is engine
    assert engine.display == '10'
