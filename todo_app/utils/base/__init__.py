from todo_app.utils.base.enums import BaseEnum, TokenScope

__all__ = ["BaseEnum", "TokenScope"]
