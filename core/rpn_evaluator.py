"""RPN指令求值器 - 调用统一的Operators类"""
import re
import sys
import logging
from enum import Enum

from core.token_system import CommandKind, OPERATOR_DEFINITIONS, QUIT_SYMBOL
from core.operators import Operators
from core.errors import ParseError, StackUnderflow

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class RPNEvaluator:
    """在调用方持有的栈上执行指令序列"""

    @staticmethod
    def parse_value(literal):
        """解析有符号整数；超出32位范围同样视为解析错误"""
        if not INTEGER_PATTERN.fullmatch(literal):
            raise ParseError(literal)
        value = int(literal)
        if not Operators.in_range(value):
            raise ParseError(literal, reason="out of 32-bit integer range")
        return value

    @staticmethod
    def _require(stack, symbol, count):
        if len(stack) < count:
            raise StackUnderflow(symbol, count, len(stack))

    @staticmethod
    def evaluate(command_sequence, stack, output=None):
        """
        按顺序执行指令
        Args:
            command_sequence: Command序列
            stack: 整数栈（list，栈顶在末尾），原地修改
            output: 'p' 的输出流，默认sys.stdout
        Returns:
            SessionState.TERMINATED 遇到退出指令时；否则 SessionState.RUNNING
        """
        for command in command_sequence:
            if command.kind == CommandKind.VALUE:
                value = RPNEvaluator.parse_value(command.value)
                stack.append(value)
                logger.debug(f"Pushed {value}, depth={len(stack)}")
                continue

            # 退出指令必须先于一般操作符分派检查
            if command.value == QUIT_SYMBOL:
                logger.debug("Quit command received")
                return SessionState.TERMINATED

            RPNEvaluator.execute_operator(stack, command, output)

        return SessionState.RUNNING

    @staticmethod
    def execute_operator(stack, command, output=None):
        symbol = command.value
        op_def = OPERATOR_DEFINITIONS[symbol]

        if symbol == 'p':
            RPNEvaluator._require(stack, symbol, op_def.arity)
            out = output if output is not None else sys.stdout
            out.write(f"{stack[-1]}\n")
            out.flush()

        elif not op_def.implemented:
            # 可识别但未实现（'-'、'/'），栈保持不变
            logger.debug(f"Operator '{symbol}' ({op_def.name}) is not implemented, skipping")

        elif symbol == '+':
            RPNEvaluator._require(stack, symbol, op_def.arity)
            a = stack.pop()
            b = stack.pop()
            stack.append(Operators.add(a, b))

        elif symbol == '*':
            RPNEvaluator._require(stack, symbol, op_def.arity)
            a = stack.pop()
            b = stack.pop()
            stack.append(Operators.mul(a, b))

        else:
            raise ValueError(f"Unexpected operator: {symbol}")
