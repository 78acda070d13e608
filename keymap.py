# keymap.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging

from calculator import DIGITS, Calculator

logger = logging.getLogger('calculator.keymap')

# 이름 있는 키 → 엔진 메서드
NAMED_KEYS = {
    'Enter': 'calculate',
    '=': 'calculate',
    'Escape': 'clear_all',
    'Backspace': 'backspace',
    '.': 'input_decimal',
    '%': 'percentage',
}

OPERATOR_KEYS = {'+', '-', '*', '/', '×', '÷', '−'}


def dispatch_key(engine: Calculator, key: str) -> bool:
    """키 하나를 엔진 연산 하나로 전달한다. 모르는 키는 무시하고 False."""
    if len(key) == 1 and key in DIGITS:
        engine.input_digit(key)
    elif key in OPERATOR_KEYS:
        engine.apply_operator(key)
    elif key in NAMED_KEYS:
        getattr(engine, NAMED_KEYS[key])()
    else:
        logger.debug('[무시] 알 수 없는 키: %r', key)
        return False
    return True
