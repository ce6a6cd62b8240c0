"""测试日志初始化"""

from loguru import logger

from bytesz import parse_size
from bytesz.errors import ByteSizeParseError
from bytesz.log import setup_logger


def test_setup_logger_file(tmp_path):
    """文件日志记录解析失败的调试信息"""
    log_file = tmp_path / "logs" / "bytesz.log"
    _, info = setup_logger("ERROR", log_file=log_file, console_output=False)
    assert info == {"level": "ERROR", "log_file": str(log_file)}

    try:
        parse_size("5q")
    except ByteSizeParseError:
        pass
    logger.complete()
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Cannot parse size '5q': string has invalid units" in text


def test_setup_logger_console_only():
    _, info = setup_logger("info", console_output=False)
    assert info == {"level": "INFO", "log_file": None}
    logger.remove()
