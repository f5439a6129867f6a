from typing import Any

from fastapi.responses import JSONResponse


class BizResponse(JSONResponse):
    """
    统一的业务响应结构：
        {
            "code": 200,
            "msg": "success",
            "data": ...
        }
    - HTTP 状态码与 code 保持一致
    - data 需要是可以直接 JSON 序列化的对象（一般传 model_dump() 之后的 dict）
    """

    def __init__(self, data: Any = None, msg: str = "success", status_code: int = 200, **kwargs):
        content = {
            "code": status_code,
            "msg": msg,
            "data": data,
        }
        super().__init__(content=content, status_code=status_code, **kwargs)
