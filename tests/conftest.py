"""
Pytest configuration and fixtures.
"""
import logging
import os
import sys

import pytest

# Add the parent directory to path so we can import the modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# 디스플레이 서버 없이 Qt 위젯 생성
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from calculator import Calculator  # noqa: E402
from calculator_console import split_keys  # noqa: E402
from keymap import dispatch_key  # noqa: E402


@pytest.fixture
def calc():
    return Calculator()


@pytest.fixture
def press(calc):
    """'12 + 3 =' 같은 키 입력 줄을 엔진에 전달한다."""
    def _press(line):
        for key in split_keys(line):
            dispatch_key(calc, key)
        return calc
    return _press


@pytest.fixture
def app_logger():
    logger = logging.getLogger('calculator')
    saved = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved:
            logger.removeHandler(handler)
            handler.close()
    for handler in saved:
        if handler not in logger.handlers:
            logger.addHandler(handler)


@pytest.fixture(scope='session')
def qapp():
    QtWidgets = pytest.importorskip('PyQt5.QtWidgets')
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
