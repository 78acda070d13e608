# calculator_console.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import sys
from typing import Optional

from calculator import Calculator
from keymap import NAMED_KEYS, dispatch_key

logger = logging.getLogger('calculator.console')

QUIT_WORDS = ('quit', 'exit')


def split_keys(line: str) -> list:
    """입력 한 줄을 키 목록으로 나눈다. 이름 있는 키가 아니면 한 글자씩."""
    keys = []
    for token in line.split():
        if token in NAMED_KEYS:
            keys.append(token)
        else:
            keys.extend(token)
    return keys


def render(engine: Calculator) -> str:
    if engine.expression:
        return f'{engine.expression}\n{engine.display_text()}'
    return engine.display_text()


def run_console(engine: Optional[Calculator] = None, stdin=None, stdout=None, prompt: str = '> ') -> Calculator:
    """
    줄 단위로 키를 읽어 엔진에 전달하고, 매 줄마다 식과 디스플레이를 출력한다.
    quit/exit 또는 EOF에서 종료한다.
    """
    engine = engine or Calculator()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(render(engine), file=stdout)
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write('\n')
            break
        line = line.strip()
        if line in QUIT_WORDS:
            break
        ignored = [key for key in split_keys(line) if not dispatch_key(engine, key)]
        if ignored:
            logger.info('[무시] %s', ' '.join(ignored))
        print(render(engine), file=stdout)
    return engine
