# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import re
from dataclasses import dataclass
from decimal import (
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Optional

from number_format import (
    ERROR,
    MAX_DIGITS,
    OVERFLOW,
    count_digits,
    format_for_display,
    format_result,
    is_sentinel,
    parse_operand,
)

logger = logging.getLogger('calculator.engine')

WORKING_PRECISION = 28  # 중간 계산 정밀도

OPERATORS = ('+', '-', '×', '÷')
# 키보드/버튼 기호 → 내부 기호
OPERATOR_ALIASES = {'*': '×', '/': '÷', '−': '-'}

DIGITS = '0123456789'

_NUMERIC = re.compile(r'-?\d+(\.\d*)?')


def normalize_operator(op: str) -> str:
    op = OPERATOR_ALIASES.get(op, op)
    if op not in OPERATORS:
        raise ValueError(f'unknown operator: {op!r}')
    return op


def binary_op(op: str, a: Decimal, b: Decimal) -> Decimal:
    """사칙연산. '÷'에서 b가 0이면 DivisionByZero."""
    op = normalize_operator(op)
    with localcontext() as ctx:
        ctx.prec = WORKING_PRECISION
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '×':
            return a * b
        if b == 0:
            raise DivisionByZero(f'{a} ÷ 0')
        return a / b


@dataclass
class EngineState:
    """계산기 상태 레코드. 하나의 Calculator만 소유하고 변경한다."""

    display: str = '0'
    previous_value: Optional[str] = None
    operator: Optional[str] = None
    waiting_for_operand: bool = False
    expression: str = ''

    def validate(self) -> None:
        """불변식을 한 곳에서 검사한다. 위반 시 ValueError."""
        if self.operator is not None and self.previous_value is None:
            raise ValueError('operator is set without previous_value')
        if self.operator is not None and self.operator not in OPERATORS:
            raise ValueError(f'invalid operator: {self.operator!r}')
        if is_sentinel(self.display):
            return
        if not _NUMERIC.fullmatch(self.display):
            raise ValueError(f'display is not numeric: {self.display!r}')
        if count_digits(self.display) > MAX_DIGITS:
            raise ValueError(f'display exceeds {MAX_DIGITS} digits: {self.display!r}')


class Calculator:
    """연산 엔진: 상태와 숫자 입력/사칙연산/부호/퍼센트/= 처리"""

    MAX_DIGITS = MAX_DIGITS

    def __init__(self) -> None:
        self.state = EngineState()

    # 렌더러가 읽는 값
    @property
    def display(self) -> str:
        return self.state.display

    @property
    def expression(self) -> str:
        return self.state.expression

    @property
    def is_error(self) -> bool:
        return is_sentinel(self.state.display)

    def display_text(self) -> str:
        return format_for_display(self.state.display)

    # 입력
    def input_digit(self, d: str) -> None:
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f'not a digit: {d!r}')
        st = self.state
        if st.waiting_for_operand:
            st.display = d
            st.waiting_for_operand = False
            return
        if count_digits(st.display) >= self.MAX_DIGITS:
            # 자릿수 제한: 조용히 무시
            return
        st.display = d if st.display == '0' else st.display + d

    def input_decimal(self) -> None:
        st = self.state
        if st.waiting_for_operand:
            st.display = '0.'
            st.waiting_for_operand = False
            return
        if '.' not in st.display:
            st.display += '.'

    def backspace(self) -> None:
        st = self.state
        if st.waiting_for_operand:
            return
        rest = st.display[:-1]
        st.display = '0' if rest in ('', '-') else rest

    def toggle_sign(self) -> None:
        st = self.state
        if st.display == '0' or self.is_error:
            return
        if st.display.startswith('-'):
            st.display = st.display[1:]
        else:
            st.display = '-' + st.display

    def percentage(self) -> None:
        if self.is_error:
            return
        try:
            value = parse_operand(self.state.display) / Decimal(100)
            self.state.display = format_result(value)
        except (Overflow, InvalidOperation):
            self._set_error(OVERFLOW)

    # 지우기
    def clear_entry(self) -> None:
        self.state.display = '0'

    def clear_all(self) -> None:
        self.state = EngineState()

    # 연산
    def apply_operator(self, op: str) -> None:
        """연산자 입력. 대기 중인 연산이 있으면 먼저 계산한다(왼쪽부터, 우선순위 없음)."""
        nxt = normalize_operator(op)
        if self.is_error:
            return
        st = self.state

        if st.previous_value is None:
            # 첫 연산자: 현재 값을 보관만 한다
            st.previous_value = st.display
            st.expression = f'{st.display} {nxt}'
        else:
            result = self._evaluate()
            if result is None:
                return
            st.display = result
            st.previous_value = result
            st.expression = f'{result} {nxt}'

        st.operator = nxt
        st.waiting_for_operand = True

    def calculate(self) -> None:
        st = self.state
        if st.operator is None or st.previous_value is None:
            return

        result = self._evaluate()
        if result is not None:
            st.display = result

        st.previous_value = None
        st.operator = None
        st.expression = ''
        st.waiting_for_operand = True

    # 내부 유틸
    def _evaluate(self) -> Optional[str]:
        # 실패 시 오류 상태로 전환하고 None 반환
        st = self.state
        try:
            a = parse_operand(st.previous_value)
            b = parse_operand(st.display)
            result = format_result(binary_op(st.operator, a, b))
        except DivisionByZero:
            self._set_error(ERROR)
            return None
        except (Overflow, InvalidOperation):
            self._set_error(OVERFLOW)
            return None
        logger.debug('[계산] %s %s %s = %s', st.previous_value, st.operator, st.display, result)
        return result

    def _set_error(self, sentinel: str) -> None:
        st = self.state
        logger.warning('[오류] %s: %s %s %s', sentinel, st.previous_value or '', st.operator or '', st.display)
        st.display = sentinel
        st.previous_value = None
        st.operator = None
        st.expression = ''
        st.waiting_for_operand = True
