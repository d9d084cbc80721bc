"""core/operators.py"""
import numpy as np
import logging

INT_INFO = np.iinfo(np.int32)
MAX_VALUE = int(INT_INFO.max)  # 数值上限
MIN_VALUE = int(INT_INFO.min)  # 数值下限

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，按32位有符号整数计算"""

    @staticmethod
    def in_range(value):
        return MIN_VALUE <= value <= MAX_VALUE

    @staticmethod
    def _wrap(operand1, operand2, ufunc):
        """以int32数组计算，溢出时按补码回绕"""
        x = np.array([operand1], dtype=np.int32)
        y = np.array([operand2], dtype=np.int32)
        with np.errstate(over='ignore'):
            result = int(ufunc(x, y)[0])
        return result

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        result = Operators._wrap(operand1, operand2, np.add)
        if result != operand1 + operand2:
            logger.warning(f"Integer overflow in {operand1} + {operand2}, wrapped to {result}")
        return result

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        result = Operators._wrap(operand1, operand2, np.multiply)
        if result != operand1 * operand2:
            logger.warning(f"Integer overflow in {operand1} * {operand2}, wrapped to {result}")
        return result
