"""
Tests for the entry point.
"""
import io
import logging

from calculator_app import main, parse_args, setup_logger


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.console is False
        assert args.log is None
        assert args.log_level == 'WARNING'

    def test_options(self):
        args = parse_args(['--console', '--log', 'calc.log', '--log-level', 'DEBUG'])
        assert args.console is True
        assert args.log == 'calc.log'
        assert args.log_level == 'DEBUG'


class TestSetupLogger:

    def test_handlers_not_duplicated(self, app_logger):
        count = len(app_logger.handlers)
        setup_logger()
        setup_logger()
        assert len(app_logger.handlers) == max(count, 1)

    def test_file_log(self, app_logger, tmp_path):
        for handler in list(app_logger.handlers):
            app_logger.removeHandler(handler)
        log_path = tmp_path / 'calc.log'
        logger = setup_logger(str(log_path), 'WARNING')
        logging.getLogger('calculator.engine').warning('[오류] Error')
        for handler in logger.handlers:
            handler.flush()
        assert '[오류] Error' in log_path.read_text(encoding='utf-8')


def test_main_console(monkeypatch, capsys, app_logger):
    monkeypatch.setattr('sys.stdin', io.StringIO('6 * 7 =\nquit\n'))
    assert main(['--console']) == 0
    assert '> 42' in capsys.readouterr().out.splitlines()


def test_file_log_added_on_later_call(app_logger, tmp_path):
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    log_path = tmp_path / 'later.log'
    setup_logger()
    setup_logger(str(log_path))
    setup_logger(str(log_path))
    file_handlers = [h for h in app_logger.handlers if isinstance(h, logging.FileHandler)]
    stream_handlers = [h for h in app_logger.handlers if type(h) is logging.StreamHandler]
    assert len(file_handlers) == 1
    assert len(stream_handlers) == 1
    assert log_path.exists()
