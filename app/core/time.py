import os
from datetime import datetime, timezone, timedelta

# 业务时区，默认东八区，可通过 APP_TZ_OFFSET_HOURS 调整
APP_TZ = timezone(timedelta(hours=int(os.getenv("APP_TZ_OFFSET_HOURS", "8"))))


def now_local():
    """返回业务时区的当前时间（写入 created_at / updated_at）"""
    return datetime.now(APP_TZ)
