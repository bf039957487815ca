from consumers.base import Notifier
from consumers.discord import DiscordNotifier

__all__ = ["Notifier", "DiscordNotifier"]
