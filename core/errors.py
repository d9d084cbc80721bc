"""core/errors.py"""


class CalculatorError(Exception):
    """计算器错误基类"""


class ParseError(CalculatorError, ValueError):
    """Value指令的文本不是合法整数"""

    def __init__(self, literal, reason="not a valid integer"):
        self.literal = literal
        super().__init__(f"Cannot parse '{literal}': {reason}")


class StackUnderflow(CalculatorError, IndexError):
    """操作数不足"""

    def __init__(self, symbol, required, available):
        self.symbol = symbol
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient operands for '{symbol}': need {required}, stack has {available}")
