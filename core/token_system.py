"""core/token_system.py"""
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    OPERATOR = "operator"  # 操作符
    VALUE = "value"        # 数值（待求值时再解析）


class Command:
    """一条计算器指令：类型 + 原始文本，创建后不可修改"""
    __slots__ = ('kind', 'value')

    def __init__(self, kind, value):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Command is immutable, cannot set '{name}'")

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind == CommandKind.OPERATOR:
            return f"Operator({self.value!r})"
        return f"Value({self.value!r})"

    @classmethod
    def operator(cls, symbol):
        return cls(CommandKind.OPERATOR, symbol)

    @classmethod
    def literal(cls, text):
        return cls(CommandKind.VALUE, text)


class OperatorDef:
    def __init__(self, symbol, name, arity=0, implemented=True):
        self.symbol = symbol
        self.name = name
        self.arity = arity  # 需要弹出的操作数个数
        self.implemented = implemented


# 操作符定义字典 - 新操作符在这里登记
OPERATOR_DEFINITIONS = {
    # 控制
    'q': OperatorDef('q', 'quit'),
    'p': OperatorDef('p', 'print', arity=1),

    # 二元操作符
    '+': OperatorDef('+', 'add', arity=2),
    '*': OperatorDef('*', 'mul', arity=2),
    # 可识别但未实现：执行时为空操作
    '-': OperatorDef('-', 'sub', arity=2, implemented=False),
    '/': OperatorDef('/', 'div', arity=2, implemented=False),
}

OPERATOR_SYMBOLS = frozenset(OPERATOR_DEFINITIONS)
QUIT_SYMBOL = 'q'


def tokenize(line, eof=False):
    """
    按空白切分一行输入
    Args:
        line: 原始输入行
        eof: 输入流是否已结束；为True时在末尾追加退出指令
    Returns:
        token字符串列表（不含空串）
    """
    tokens = line.split()
    if eof:
        tokens.append(QUIT_SYMBOL)
    return tokens


def classify(token):
    """属于操作符集合的是Operator，其余一律视为Value"""
    if token in OPERATOR_SYMBOLS:
        return Command.operator(token)
    return Command.literal(token)


def parse_line(line, eof=False):
    return [classify(token) for token in tokenize(line, eof=eof)]


def read_commands(stream):
    """
    从输入流读取一行并转换为指令序列。
    没有换行结尾的读取结果（空串或最后一行残片）说明已到达输入末尾。
    """
    line = stream.readline()
    eof = not line.endswith('\n')
    if eof:
        logger.debug("End of input reached, appending quit command")
    return parse_line(line, eof=eof)
