# domain_exceptions.py
from typing import Optional, Any


class FriendNotFound(Exception):
    """
    查询好友资料时没有找到对应记录时抛出：
    - 两人不是好友（没有 ACCEPTED 的关系记录）
    - 只有对方指向自己的单向记录
    - 关系还处于 PENDING / DECLINED
    - 任意一方的用户 ID 不存在
    以上情况对调用方统一表现为“未找到”，不做区分
    """

    def __init__(
        self,
        user_id: Optional[int] = None,
        friend_user_id: Optional[int] = None,
        message: Optional[str] = None,
    ):
        if message:
            self.message = message
        elif user_id is not None and friend_user_id is not None:
            self.message = f"User '{friend_user_id}' is not a friend of '{user_id}'."
        else:
            self.message = "Friend not found."

        self.user_id = user_id
        self.friend_user_id = friend_user_id
        super().__init__(self.message)


class FriendProfileShapeError(Exception):
    """
    查询结果不符合好友资料的输出结构时抛出（例如计数为负数、姓名为空）
    说明数据或查询本身有 bug，属于内部错误，不做恢复
    """

    def __init__(self, friend_user_id: Optional[int] = None, errors: Any = None, message: Optional[str] = None):
        if message:
            self.message = message
        else:
            self.message = f"friend profile {friend_user_id} has invalid shape: {errors}"

        self.friend_user_id = friend_user_id
        self.errors = errors
        super().__init__(self.message)
