from models.competition import CompetitionRecord
from models.discord import Channel, Guild

__all__ = ["CompetitionRecord", "Channel", "Guild"]
