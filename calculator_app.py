# calculator_app.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import os
import sys

from calculator_console import run_console

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def setup_logger(log_path=None, level='WARNING'):
    """콘솔(stderr)과, 경로가 주어지면 파일(UTF-8)로도 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('calculator')
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔 (stdout은 콘솔 모드 출력용)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        logger.addHandler(sh)

    # 파일(UTF-8), 같은 경로는 한 번만
    opened = {h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)}
    if log_path and os.path.abspath(log_path) not in opened:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='사칙연산 키패드 계산기(PyQt5 창 또는 콘솔).'
    )
    parser.add_argument('--console', action='store_true',
                        help='창 대신 콘솔에서 키 입력을 받습니다')
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 파일 로그 없음)')
    parser.add_argument('--log-level', default='WARNING', choices=LOG_LEVELS,
                        help='로그 레벨(기본값: WARNING)')
    return parser.parse_args(argv)


def run_window() -> int:
    try:
        from PyQt5.QtWidgets import QApplication
        from calculator_window import CalculatorWindow
    except ImportError as e:
        logging.getLogger('calculator').error('[실패] PyQt5를 불러올 수 없습니다: %s', e)
        return 1

    app = QApplication(sys.argv)
    w = CalculatorWindow()
    w.show()
    return app.exec()


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.log, args.log_level)
    logger.info('[시작] %s 모드', '콘솔' if args.console else '창')

    if args.console:
        run_console()
        return 0
    return run_window()


if __name__ == '__main__':
    sys.exit(main())
