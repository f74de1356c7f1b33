"""Database models."""

from prompthub.models.tenant import Tenant
from prompthub.models.activity import PromptActivity, PromptCommentActivity
from prompthub.models.notification import Notification
from prompthub.models.share import PromptShare

__all__ = ["Tenant", "PromptActivity", "PromptCommentActivity", "Notification", "PromptShare"]
