import sys
from typing import Optional

from loguru import logger

from flashtext.core.config import settings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}"


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """配置 loguru 日志（库本身只打日志，sink 由调用方决定是否安装）"""
    level = (level or settings.LOG_LEVEL).upper()
    log_file = settings.LOG_FILE if log_file is None else log_file

    logger.remove()
    logger.add(sys.stderr, format=_FORMAT, level=level)

    # 可选文件输出：100MB 轮转，保留 10 天
    if log_file:
        logger.add(log_file, format=_FORMAT, level=level, rotation="100 MB", retention="10 days")
