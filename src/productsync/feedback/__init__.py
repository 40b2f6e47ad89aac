"""Feedback sink implementations."""

from productsync.feedback.callbacks import CallbackFeedback
from productsync.feedback.composite import CompositeFeedback
from productsync.feedback.log import LoggingFeedback
from productsync.feedback.null import NoFeedback

__all__ = ["CallbackFeedback", "CompositeFeedback", "LoggingFeedback", "NoFeedback"]
