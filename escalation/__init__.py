from escalation.base_escalation import BaseEscalation
from escalation.discord_escalation import DiscordEscalation

__all__ = ["BaseEscalation", "DiscordEscalation"]
