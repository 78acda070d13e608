# number_format.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import re
from decimal import (
    Decimal,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)

MAX_DIGITS = 12  # 디스플레이 자릿수 제한
RESULT_PRECISION = 12  # 결과 반올림 유효 자릿수

ERROR = 'Error'
OVERFLOW = 'Overflow'
SENTINELS = (ERROR, OVERFLOW)

_THOUSANDS = re.compile(r'\B(?=(\d{3})+(?!\d))')


def is_sentinel(text: str) -> bool:
    return text in SENTINELS


def count_digits(text: str) -> int:
    # 부호와 소수점을 제외한 숫자 개수
    return len(text.replace('-', '').replace('.', ''))


def parse_operand(text: str) -> Decimal:
    """디스플레이 문자열을 Decimal로 변환한다.

    '5.', '-0.' 같은 입력 중간 상태도 허용한다. 숫자가 아니거나
    NaN/Infinity 같은 유한하지 않은 값이면 InvalidOperation을 던진다.
    """
    value = Decimal(text)
    if not value.is_finite():
        raise InvalidOperation(text)
    return value


def format_result(value: Decimal) -> str:
    """계산 결과를 디스플레이용 숫자 문자열로 만든다.

    유효 숫자 12자리로 반올림한 뒤 지수 없는 고정소수점으로 표기하고
    불필요한 0과 소수점을 제거한다. 12자리를 넘으면 Overflow.
    """
    with localcontext() as ctx:
        ctx.prec = RESULT_PRECISION
        ctx.rounding = ROUND_HALF_UP
        rounded = (+value).normalize()

    if rounded.is_zero():
        # -0 은 0 으로 표시
        return '0'

    s = format(rounded, 'f')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')

    if count_digits(s) > MAX_DIGITS:
        raise Overflow(s)
    return s


def format_for_display(raw: str) -> str:
    """화면 표시용: 정수부에 세 자리마다 ',' 삽입, 소수부는 그대로."""
    if is_sentinel(raw):
        return raw
    integer, dot, fraction = raw.partition('.')
    return _THOUSANDS.sub(',', integer) + dot + fraction
