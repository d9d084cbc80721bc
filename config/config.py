"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "prompt": "",        # 为空时不显示提示符；提示符写到stderr
}

# 错误处理
ERROR_CONFIG = {
    "recover": False,  # False: 首个错误即终止（原始行为）；True: 报告并跳过当前行剩余指令
    "fatal_exit_code": 1,
    "interrupt_exit_code": 130,
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",  # 输出到stderr，不干扰 'p' 的结果
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ERROR_CONFIG["fatal_exit_code"] != 0, "错误退出码不能为0"
    assert ERROR_CONFIG["interrupt_exit_code"] != 0, "中断退出码不能为0"
    return True
