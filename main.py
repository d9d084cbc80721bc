"""主程序入口 - 交互式RPN计算器"""
import argparse
import logging
import sys

from config.config import *
from core import read_commands, RPNEvaluator, SessionState, CalculatorError

logger = logging.getLogger(__name__)


def run_calculator(input_stream, output_stream, stack=None, recover=False,
                   prompt='', prompt_stream=None):
    """
    主循环：逐行读取指令并在同一个栈上执行，直到退出指令或输入结束
    Args:
        input_stream: 输入流（按行读取）
        output_stream: 'p' 的输出流
        stack: 整数栈，默认新建；跨行保持状态
        recover: 出错时是否报告并继续（跳过当前行剩余指令）
        prompt: 每行读取前显示的提示符，为空时不显示
        prompt_stream: 提示符输出流，默认sys.stderr
    Returns:
        退出码（正常结束为0）
    """
    if stack is None:
        stack = []
    if prompt_stream is None:
        prompt_stream = sys.stderr

    logger.info("Calculator session started")
    line_no = 0
    state = SessionState.RUNNING

    while state == SessionState.RUNNING:
        if prompt:
            prompt_stream.write(prompt)
            prompt_stream.flush()

        commands = read_commands(input_stream)
        line_no += 1

        try:
            state = RPNEvaluator.evaluate(commands, stack, output_stream)
        except CalculatorError as e:
            if not recover:
                raise
            # 已执行的指令不回滚，仅跳过本行剩余部分
            # 末行出错时合成的退出指令被跳过，下一次读取仍会得到输入结束
            logger.error(f"Line {line_no}: {e}")

    logger.info(f"Calculator session terminated after {line_no} line(s), stack depth={len(stack)}")
    return 0


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"],
        stream=sys.stderr
    )
    validate_config()

    try:
        return run_calculator(
            sys.stdin, sys.stdout,
            recover=args.recover,
            prompt=args.prompt
        )
    except CalculatorError as e:
        logger.error(f"Fatal: {e}")
        return ERROR_CONFIG["fatal_exit_code"]
    except UnicodeDecodeError as e:
        # 无法解码的输入行无法跳过，recover模式下同样终止
        logger.error(f"Fatal: cannot decode input: {e}")
        return ERROR_CONFIG["fatal_exit_code"]
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return ERROR_CONFIG["interrupt_exit_code"]


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive RPN calculator")

    parser.add_argument(
        "--recover",
        action="store_true",
        default=ERROR_CONFIG["recover"],
        help="Report errors and skip the rest of the line instead of exiting"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=CALCULATOR_CONFIG["prompt"],
        help="Prompt shown on stderr before each line (default: none)"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr diagnostics"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
