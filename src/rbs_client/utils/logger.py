"""
@File       : logger.py
@Description:

@Time       : 2026/1/6 09:30
@Author     : hcy18
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from colorlog import ColoredFormatter

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
        log_level: int = logging.INFO,
        log_dir: Optional[str] = None,
        console_color: bool = True,
) -> logging.Logger:
    """
    初始化 rbs_client 的日志输出。

    SDK 本身不会在 import 时配置日志，由调用方按需调用。

    Args:
        log_level: 日志级别，默认 INFO
        log_dir: 日志文件存储目录，为 None 时只输出到控制台
        console_color: 是否启用控制台彩色输出

    Returns:
        配置好的 rbs_client logger
    """
    file_formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if console_color:
        console_formatter = ColoredFormatter(
            fmt='%(log_color)s' + LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'white',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'bold_red',
            }
        )
    else:
        console_formatter = file_formatter

    sdk_logger = logging.getLogger("rbs_client")
    sdk_logger.setLevel(log_level)

    # 清除已有 handlers（避免重复日志）
    if sdk_logger.handlers:
        sdk_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    sdk_logger.addHandler(console_handler)

    if log_dir:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)

        # 日志文件路径（按天分割）
        log_file = log_dir_path / f"{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(file_formatter)
        sdk_logger.addHandler(file_handler)

    return sdk_logger


app_logger = logging.getLogger("rbs_client")
