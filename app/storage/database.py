import os

from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, sessionmaker
from app.storage.friend.SQLAlchemyFriendRepository import SQLAlchemyFriendRepository

from fastapi import Depends

# ======== 配置区 ========
DB_HOST = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_NAME = os.getenv("DB_NAME", "friend_db")
DB_ECHO = os.getenv("DB_ECHO", "0") == "1"   # 是否打印 SQL
# ========================


def build_database_url(user: str = DB_USER, password: str = DB_PASSWORD, host: str = DB_HOST, port: int = DB_PORT, name: str = DB_NAME) -> URL:
    """
    拼接 MySQL 连接串，用户名和密码中的特殊字符（@ / : 等）由 URL.create 负责转义
    """
    return URL.create(
        "mysql+pymysql",
        username=user,
        password=password or None,
        host=host,
        port=port,
        database=name,
        query={"charset": "utf8mb4"},
    )


# DATABASE_URL 存在时整体覆盖上面的 MySQL 配置（测试时用 sqlite）
DATABASE_URL = os.getenv("DATABASE_URL") or build_database_url()
# SQLAlchemy 引擎
engine = create_engine(DATABASE_URL, echo=DB_ECHO, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 未来可以根据配置切换不同的实现
def get_friend_repo(db: Session = Depends(get_db)) -> SQLAlchemyFriendRepository:
    return SQLAlchemyFriendRepository(db)
