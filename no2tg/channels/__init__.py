"""Delivery channels."""

from .telegram import TelegramChannel

__all__ = ["TelegramChannel"]
