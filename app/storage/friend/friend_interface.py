from typing import Optional, Protocol

from app.schemas.friend import FriendProfileOut


class IFriendRepository(Protocol):
    """
    好友关系仓库接口协议（数据层抽象接口，只读）
    业务层只依赖本接口，不依赖具体 SQLAlchemy 实现
    """

    def get_friend_profile(self, user_id: int, friend_user_id: int) -> Optional[FriendProfileOut]:
        """
        获取好友资料（附带好友总数、共同好友数）：
        - 只有存在 user_id -> friend_user_id 的 ACCEPTED 记录时才返回
        - 否则返回 None（是否视为错误交给业务层决定）
        - 查询结果不符合 FriendProfileOut 约束时抛出 pydantic.ValidationError
        """
        ...

    def count_total_friends(self, user_id: int) -> int:
        """
        统计用户的好友总数（ACCEPTED），没有好友或用户不存在时返回 0
        """
        ...

    def count_mutual_friends(self, user_id: int, other_user_id: int) -> int:
        """
        统计两个用户的共同好友数，没有共同好友时返回 0
        """
        ...
