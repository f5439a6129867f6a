from fastapi import APIRouter, Depends
from app.schemas.friend import FriendProfileResponse, FriendMutualCountResponse

from app.core.biz_response import BizResponse
from app.service import friend_svc

from app.storage.database import get_friend_repo
from app.storage.friend.friend_interface import IFriendRepository
from app.core.exceptions import (
    FriendNotFound,
    FriendProfileShapeError,
)
from app.core.logx import logger

friends_router = APIRouter(prefix="/my-friends", tags=["friends"])


@friends_router.get("/total/{uid}")
def count_total_friends(uid: int, friend_repo: IFriendRepository = Depends(get_friend_repo)):
    """
    用户的好友总数（没有好友时为 0）
    """
    try:
        total = friend_svc.count_total_friends(friend_repo=friend_repo, user_id=uid)
        return BizResponse(data={"user_id": uid, "total_friend_count": total})
    except Exception as e:
        logger.error(f"count total friends failed: {e}")
        return BizResponse(data=None, msg=str(e), status_code=500)


@friends_router.get("/{friend_user_id}", response_model=FriendProfileResponse)
def get_friend_by_id(friend_user_id: int, user_id: int, friend_repo: IFriendRepository = Depends(get_friend_repo)):
    """
    好友资料：
    - user_id 为当前登录用户（鉴权由外层负责，这里直接作为参数传入）
    - 返回对方资料 + 好友总数 + 共同好友数
    - 不是好友时返回 404
    """
    try:
        profile = friend_svc.get_friend_by_id(
            friend_repo=friend_repo,
            user_id=user_id,
            friend_user_id=friend_user_id,
            to_dict=True,
        )
        return BizResponse(data=profile)
    except FriendNotFound as e:
        logger.warning(str(e))
        return BizResponse(data=None, msg=str(e), status_code=404)
    except FriendProfileShapeError as e:
        logger.error(str(e))
        return BizResponse(data=None, msg=str(e), status_code=500)
    except Exception as e:
        logger.error(f"get friend {friend_user_id} failed: {e}")
        return BizResponse(data=None, msg=str(e), status_code=500)


@friends_router.get("/{friend_user_id}/mutual-count", response_model=FriendMutualCountResponse)
def count_mutual_friends(friend_user_id: int, user_id: int, friend_repo: IFriendRepository = Depends(get_friend_repo)):
    """
    我和好友的共同好友数，不是好友时返回 404
    """
    try:
        result = friend_svc.count_mutual_friends(
            friend_repo=friend_repo,
            user_id=user_id,
            friend_user_id=friend_user_id,
            to_dict=True,
        )
        return BizResponse(data=result)
    except FriendNotFound as e:
        logger.warning(str(e))
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception as e:
        logger.error(f"count mutual friends {user_id} <-> {friend_user_id} failed: {e}")
        return BizResponse(data=None, msg=str(e), status_code=500)
