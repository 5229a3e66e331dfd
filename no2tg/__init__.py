"""no2tg — publish Notion content records to a Telegram channel."""

__version__ = "0.1.0"
