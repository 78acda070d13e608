# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from calculator import Calculator
from keymap import dispatch_key


BUTTONS = [
    ['AC', '+/−', '%', '÷'],
    ['7', '8', '9', '×'],
    ['4', '5', '6', '−'],
    ['1', '2', '3', '+'],
    ['0', '⌫', '.', '='],
]

# Qt 특수 키 → 키 이름
QT_KEYS = {
    Qt.Key_Return: 'Enter',
    Qt.Key_Enter: 'Enter',
    Qt.Key_Escape: 'Escape',
    Qt.Key_Backspace: 'Backspace',
}

ERROR_STYLE = 'color: #d9534f;'
ACTIVE_STYLE = 'background-color: white; color: #ff9500;'


def font_size_for(text: str) -> int:
    # 긴 값일수록 작은 글꼴
    if len(text) > 10:
        return 20
    if len(text) > 7:
        return 24
    return 28


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 → Calculator 엔진 연결, 상태를 화면에 렌더링"""

    def __init__(self, engine: Optional[Calculator] = None) -> None:
        super().__init__()
        self.engine = engine or Calculator()
        self.buttons = {}
        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        # 진행 중인 식
        self.expression = QLabel()
        self.expression.setAlignment(Qt.AlignRight)
        self.expression.setStyleSheet('color: gray;')
        root.addWidget(self.expression)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setFocusPolicy(Qt.NoFocus)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                # 키 입력은 창이 받도록 버튼은 포커스를 갖지 않는다
                btn.setFocusPolicy(Qt.NoFocus)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)
                self.buttons[label] = btn

        self.setFocusPolicy(Qt.StrongFocus)
        self.resize(360, 560)

    def on_button(self, ch: str) -> None:
        if ch in ('AC', 'C'):
            # 0일 때는 전체 지우기, 아니면 현재 입력만 지우기
            if self.engine.display == '0':
                self.engine.clear_all()
            else:
                self.engine.clear_entry()
        elif ch == '+/−':
            self.engine.toggle_sign()
        elif ch == '⌫':
            self.engine.backspace()
        else:
            dispatch_key(self.engine, ch)
        self.refresh()

    def keyPressEvent(self, event) -> None:
        key = QT_KEYS.get(event.key(), event.text())
        if dispatch_key(self.engine, key):
            self.refresh()
        else:
            super().keyPressEvent(event)

    def refresh(self) -> None:
        st = self.engine.state
        text = self.engine.display_text()

        self.expression.setText(st.expression)
        self.expression.setVisible(bool(st.expression))

        self.display.setText(text)
        self.display.setStyleSheet(ERROR_STYLE if self.engine.is_error else '')
        font = QFont(self.display.font())
        font.setPointSize(font_size_for(text))
        self.display.setFont(font)

        self.buttons['AC'].setText('AC' if st.display == '0' else 'C')

        # 두 번째 피연산자를 기다리는 연산자 버튼 강조
        for symbol in ('+', '−', '×', '÷'):
            active = st.waiting_for_operand and st.operator == symbol.replace('−', '-')
            self.buttons[symbol].setStyleSheet(ACTIVE_STYLE if active else '')
