from sqlalchemy import Column, Integer, String, TIMESTAMP
from app.models.base import Base
from app.core.time import now_local


class User(Base):
    """ 用户模型，对应数据库中的 users 表。

        CREATE TABLE IF NOT EXISTS users (
            id INT AUTO_INCREMENT PRIMARY KEY,                 -- 用户 ID
            full_name VARCHAR(100) NOT NULL,                   -- 用户姓名
            phone_number VARCHAR(50) UNIQUE NOT NULL,          -- 电话
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,    -- 创建时间
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP     -- 更新时间
        );
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)  # 用户 ID
    full_name = Column(String(100), nullable=False)  # 用户姓名
    phone_number = Column(String(50), unique=True, nullable=False)  # 用户电话
    created_at = Column(TIMESTAMP(timezone=True), default=now_local)  # 创建时间
    updated_at = Column(TIMESTAMP(timezone=True), default=now_local, onupdate=now_local)  # 更新时间
