from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# 基础字段约束
IdField = Annotated[int, Field(gt=0)]                         # 主键 ID：正整数
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]  # 非空字符串
CountField = Annotated[int, Field(ge=0)]                      # 计数：非负整数


class FriendProfileOut(BaseModel):
    """
    好友资料输出：
    - 对方用户的基础信息
    - total_friend_count: 对方的好友总数
    - mutual_friend_count: 我和对方的共同好友数（没有共同好友时为 0）
    """
    id: IdField
    full_name: NonEmptyStr
    phone_number: NonEmptyStr
    total_friend_count: CountField
    mutual_friend_count: CountField

    model_config = ConfigDict(from_attributes=True)


class FriendMutualCountOut(BaseModel):
    """
    共同好友数输出
    """
    user_id: IdField
    friend_user_id: IdField
    mutual_friend_count: CountField

    model_config = ConfigDict(from_attributes=True)


class FriendProfileResponse(BaseModel):
    """
    BizResponse 外层结构（好友资料），仅用于接口文档
    """
    code: int
    msg: str
    data: Optional[FriendProfileOut] = None


class FriendMutualCountResponse(BaseModel):
    """
    BizResponse 外层结构（共同好友数），仅用于接口文档
    """
    code: int
    msg: str
    data: Optional[FriendMutualCountOut] = None
