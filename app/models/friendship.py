from sqlalchemy import Column, Integer, SmallInteger, TIMESTAMP, ForeignKey, UniqueConstraint, Index
from enum import IntEnum
from app.models.base import Base
from app.core.time import now_local


class FriendshipStatus(IntEnum):
    PENDING = 0   # 已发出请求，等待对方处理
    ACCEPTED = 1  # 已成为好友
    DECLINED = 2  # 已拒绝


class Friendship(Base):
    """ 好友关系表，一条记录表示一条有向边 user_id -> friend_user_id

        好友请求被接受后会存在两条 ACCEPTED 记录（A -> B 与 B -> A），
        本项目只读这张表，记录的创建和状态流转由好友请求子系统负责。

        CREATE TABLE IF NOT EXISTS friendships (
            id INT AUTO_INCREMENT PRIMARY KEY,                -- 系统主键（自增）
            user_id INT NOT NULL,                             -- 发起方 (FK -> users.id)
            friend_user_id INT NOT NULL,                      -- 对方 (FK -> users.id)
            status SMALLINT NOT NULL DEFAULT 0,               -- 0: PENDING, 1: ACCEPTED, 2: DECLINED
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,   -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,   -- 更新时间

            CONSTRAINT fk_friendship_user FOREIGN KEY (user_id) REFERENCES users(id),
            CONSTRAINT fk_friendship_friend FOREIGN KEY (friend_user_id) REFERENCES users(id),

            CONSTRAINT uq_user_friend UNIQUE (user_id, friend_user_id)  -- 每个方向最多一条记录
        );

        CREATE INDEX idx_friendship_user ON friendships (user_id);
        CREATE INDEX idx_friendship_friend ON friendships (friend_user_id);
    """

    __tablename__ = "friendships"

    # 系统主键（自增）
    id = Column(Integer, primary_key=True, autoincrement=True)
    # 发起方 ID
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # 对方 ID
    friend_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    # 关系状态
    status = Column(SmallInteger, nullable=False, default=FriendshipStatus.PENDING.value)
    created_at = Column(TIMESTAMP(timezone=True), default=now_local)
    updated_at = Column(TIMESTAMP(timezone=True), default=now_local, onupdate=now_local)

    __table_args__ = (
        # 联合唯一约束：同一方向只能有一条关系，保证计数即为不重复的好友数
        UniqueConstraint("user_id", "friend_user_id", name="uq_user_friend"),
        Index("idx_friendship_user", "user_id"),
        Index("idx_friendship_friend", "friend_user_id"),
    )
