from accounts.db.models.user import UserRow

__all__ = ["UserRow"]
