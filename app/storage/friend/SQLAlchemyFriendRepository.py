from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, aliased

from app.models.friendship import Friendship, FriendshipStatus
from app.models.user import User
from app.schemas.friend import FriendProfileOut
from app.storage.friend.friend_interface import IFriendRepository
from app.core.logx import logger

# 好友总数、共同好友数、授权校验统一使用同一个状态常量
ACCEPTED = FriendshipStatus.ACCEPTED.value


class SQLAlchemyFriendRepository(IFriendRepository):
    """
    使用 SQLAlchemy 实现的好友关系仓库（只读）
    """

    def __init__(self, db: Session):
        self.db = db

    def _total_friend_count_subquery(self):
        """
        每个用户的好友总数（派生表 user_total_friend_count）：
        - 只统计 ACCEPTED 的记录，按 user_id 分组 count(friend_user_id)
        - 没有好友的用户不会出现在结果里（不是 0 而是没有这一行），join 时需要自己处理
        """
        return (
            self.db.query(
                Friendship.user_id.label("user_id"),
                func.count(Friendship.friend_user_id).label("total_friend_count"),
            )
            .filter(Friendship.status == ACCEPTED)
            .group_by(Friendship.user_id)
            .subquery("user_total_friend_count")
        )

    def _mutual_friend_count_subquery(self, user_id: int, friend_user_id: int):
        """
        两个用户的共同好友数（派生表 user_mutual_friend_count）：
        1. f1: user_id 的好友 ID 集合
        2. f2: friend_user_id 的 (好友 ID, friend_user_id) 集合
        3. f1 inner join f2 on 好友 ID，得到两边都有的好友
        4. 按 f2.user_id（即 friend_user_id）分组计数

        先分别过滤再 join，join 的规模只和两人的好友数有关，而不是整张表。
        没有共同好友时结果为空（没有这一行），0 的情况交给调用方处理。
        """
        f1 = (
            self.db.query(Friendship.friend_user_id.label("friend_user_id"))
            .filter(
                Friendship.user_id == user_id,
                Friendship.status == ACCEPTED,
            )
            .subquery("f1")
        )

        f2 = (
            self.db.query(
                Friendship.friend_user_id.label("friend_user_id"),
                Friendship.user_id.label("user_id"),
            )
            .filter(
                Friendship.user_id == friend_user_id,
                Friendship.status == ACCEPTED,
            )
            .subquery("f2")
        )

        return (
            self.db.query(
                f2.c.user_id.label("user_id"),
                func.count(f2.c.friend_user_id).label("mutual_friend_count"),
            )
            .select_from(f1)
            .join(f2, f2.c.friend_user_id == f1.c.friend_user_id)
            .group_by(f2.c.user_id)
            .subquery("user_mutual_friend_count")
        )

    def get_friend_profile(self, user_id: int, friend_user_id: int) -> Optional[FriendProfileOut]:
        """
        好友资料 + 好友总数 + 共同好友数：
        - users(friends) join friendships：同时也是“是否是好友”的校验
        - join user_total_friend_count：对方至少有一条 ACCEPTED 记录（反向那条），inner join 不会丢行
        - left outer join user_mutual_friend_count：没有共同好友时派生表为空，
          inner join 会把整行丢掉，导致“是好友却查不到”，所以这里必须用外连接并把 NULL 当作 0
        """
        friends = aliased(User, name="friends")
        total_sq = self._total_friend_count_subquery()
        mutual_sq = self._mutual_friend_count_subquery(user_id, friend_user_id)

        logger.debug(f"query friend profile: {user_id} -> {friend_user_id}")

        row = (
            self.db.query(
                friends.id.label("id"),
                friends.full_name.label("full_name"),
                friends.phone_number.label("phone_number"),
                total_sq.c.total_friend_count.label("total_friend_count"),
                func.coalesce(mutual_sq.c.mutual_friend_count, 0).label("mutual_friend_count"),
            )
            .select_from(friends)
            .join(Friendship, Friendship.friend_user_id == friends.id)
            .join(total_sq, total_sq.c.user_id == friends.id)
            .outerjoin(mutual_sq, mutual_sq.c.user_id == friends.id)
            .filter(
                Friendship.user_id == user_id,
                Friendship.friend_user_id == friend_user_id,
                Friendship.status == ACCEPTED,
            )
            .first()
        )

        if row is None:
            return None

        # 校验失败时直接抛出 ValidationError，由业务层处理
        return FriendProfileOut.model_validate(row._asdict())

    def count_total_friends(self, user_id: int) -> int:
        """
        好友总数：users left join user_total_friend_count，派生表里没有这一行即为 0
        """
        total_sq = self._total_friend_count_subquery()
        count = (
            self.db.query(func.coalesce(total_sq.c.total_friend_count, 0))
            .select_from(User)
            .outerjoin(total_sq, total_sq.c.user_id == User.id)
            .filter(User.id == user_id)
            .scalar()
        )
        return int(count or 0)

    def count_mutual_friends(self, user_id: int, other_user_id: int) -> int:
        """
        共同好友数：直接读 user_mutual_friend_count，最多一行，没有行即为 0
        """
        mutual_sq = self._mutual_friend_count_subquery(user_id, other_user_id)
        count = self.db.query(mutual_sq.c.mutual_friend_count).scalar()
        return int(count or 0)
