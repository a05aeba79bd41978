"""
Toast style user notifications.

Workflows report user facing outcomes through a Notifier. The HTTP layer
collects them and returns them in the response meta; other callers can log
them.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel

from core.logging import get_logger

logger = get_logger(__name__)


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Toast(BaseModel):
    title: str
    description: str
    variant: ToastVariant = ToastVariant.DEFAULT


class Notifier:
    """Receives toasts. The base class drops them."""

    def notify(self, toast: Toast) -> None:
        pass

    def success(self, title: str, description: str) -> None:
        self.notify(Toast(title=title, description=description))

    def error(self, title: str, description: str) -> None:
        self.notify(Toast(title=title, description=description, variant=ToastVariant.DESTRUCTIVE))


class LoggingNotifier(Notifier):
    """Writes toasts to the log."""

    def notify(self, toast: Toast) -> None:
        if toast.variant == ToastVariant.DESTRUCTIVE:
            logger.error(f"{toast.title}: {toast.description}")
        else:
            logger.info(f"{toast.title}: {toast.description}")


class ToastCollector(Notifier):
    """Keeps toasts for the response of the current request."""

    def __init__(self):
        self.toasts: List[Toast] = []

    def notify(self, toast: Toast) -> None:
        self.toasts.append(toast)

    def as_meta(self) -> dict:
        return {"notifications": [t.model_dump(mode="json") for t in self.toasts]}
