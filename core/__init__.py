"""核心模块 - 指令分类、RPN求值器和操作符"""
from .token_system import (
    CommandKind, Command, OperatorDef, OPERATOR_DEFINITIONS,
    OPERATOR_SYMBOLS, QUIT_SYMBOL, tokenize, classify, parse_line, read_commands
)
from .errors import CalculatorError, ParseError, StackUnderflow
from .rpn_evaluator import RPNEvaluator, SessionState
from .operators import Operators

__all__ = [
    'CommandKind', 'Command', 'OperatorDef', 'OPERATOR_DEFINITIONS',
    'OPERATOR_SYMBOLS', 'QUIT_SYMBOL', 'tokenize', 'classify', 'parse_line',
    'read_commands', 'CalculatorError', 'ParseError', 'StackUnderflow',
    'RPNEvaluator', 'SessionState', 'Operators'
]
