"""
models/user.py
--------------
Signed-in user profile and the session wrapper the services receive.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from models.plan import FREE_PLAN_ID


@dataclass(frozen=True)
class User:
    """
    Profile read from the identity store.

    Attributes:
        id: Identity key (the Telegram user ID as a string).
        name: Display name.
        email: Contact email, if known.
        plan: Active subscription plan id.
        member_since: When the account was created.
        picture: Avatar URL, if any.
    """
    id: str
    name: str
    email: str = ""
    plan: str = FREE_PLAN_ID
    member_since: datetime = field(default_factory=datetime.now)
    picture: Optional[str] = None


@dataclass
class Session:
    """The current identity; `user` is None once logged out."""
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def apply_plan(self, plan_id: str) -> None:
        """Apply a purchased plan to the signed-in user."""
        if self.user is not None:
            self.user = replace(self.user, plan=plan_id)

    def logout(self) -> None:
        self.user = None
