from todo_app.models.user import AuthToken, User
from todo_app.models.todo import Todo

__all__ = ["AuthToken", "User", "Todo"]
