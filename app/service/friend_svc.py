from typing import Dict

from pydantic import ValidationError

from app.schemas.friend import FriendProfileOut, FriendMutualCountOut
from app.storage.friend.friend_interface import IFriendRepository

from app.core.logx import logger
from app.core.exceptions import (
    FriendNotFound,
    FriendProfileShapeError,
)


def get_friend_by_id(friend_repo: IFriendRepository, user_id: int, friend_user_id: int, to_dict: bool = True) -> Dict | FriendProfileOut:
    """
    获取好友资料：
    1. 查询对方资料 + 好友总数 + 共同好友数（一次组合查询）
    2. 查不到（不是好友 / 只有待处理请求 / ID 不存在）统一抛 FriendNotFound
    3. 查询结果结构不合法抛 FriendProfileShapeError（内部错误）

    数据库异常不在这里处理，直接抛给上层
    """
    logger.debug(f"get friend {friend_user_id} for user {user_id}")

    try:
        profile = friend_repo.get_friend_profile(user_id=user_id, friend_user_id=friend_user_id)
    except ValidationError as e:
        raise FriendProfileShapeError(friend_user_id=friend_user_id, errors=e.errors()) from e

    if profile is None:
        raise FriendNotFound(user_id=user_id, friend_user_id=friend_user_id)

    return profile.model_dump() if to_dict else profile


def count_total_friends(friend_repo: IFriendRepository, user_id: int) -> int:
    """
    用户的好友总数，没有好友时为 0
    """
    return friend_repo.count_total_friends(user_id=user_id)


def count_mutual_friends(friend_repo: IFriendRepository, user_id: int, friend_user_id: int, to_dict: bool = True) -> Dict | FriendMutualCountOut:
    """
    我和对方的共同好友数：
    - 与资料查询保持一致，只有互为好友时才返回，否则抛 FriendNotFound
    - 好友校验通过后再单独统计共同好友数
    """
    get_friend_by_id(friend_repo, user_id=user_id, friend_user_id=friend_user_id, to_dict=False)

    result = FriendMutualCountOut(
        user_id=user_id,
        friend_user_id=friend_user_id,
        mutual_friend_count=friend_repo.count_mutual_friends(user_id=user_id, other_user_id=friend_user_id),
    )
    return result.model_dump() if to_dict else result
