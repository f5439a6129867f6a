import logging
import sys

# 全局日志格式：[时间] [级别] [模块:行号] 消息
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(module)s:%(lineno)d] %(message)s"


class Logx(logging.LoggerAdapter):
    """
    项目统一使用的 logger：
    - 所有模块通过 `from app.core.logx import logger` 复用同一个实例
    - is_debug(True) 打开 DEBUG 级别输出，is_debug(False) 回到 INFO
    """

    def __init__(self, name: str = "friendhub"):
        base = logging.getLogger(name)
        if not base.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            base.addHandler(handler)
        base.setLevel(logging.INFO)
        base.propagate = False
        super().__init__(base, {})

    def is_debug(self, flag: bool = True) -> None:
        self.logger.setLevel(logging.DEBUG if flag else logging.INFO)


logger = Logx()
