"""Discord webhook wrapper."""

from discord_webhook import DiscordEmbed, DiscordWebhook


DEFAULT_TIMEOUT_SECONDS = 10.0


class DiscordWebhookClient:
    def __init__(self, webhook_url: str, role_id: str = "", timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.webhook_url = webhook_url
        self.role_id = role_id
        self.timeout = timeout

    def send(
        self,
        message: str,
        *,
        title: str | None = None,
        description: str | None = None,
        color: str | None = None,
        fields: dict[str, str] | None = None,
    ):
        """Post a message, with an embed when a title or description is given."""
        if self.role_id:
            content = f"<@&{self.role_id}> {message}"
            allowed_mentions = {"roles": [self.role_id]}
        else:
            content = message
            allowed_mentions = {"parse": []}

        webhook = DiscordWebhook(
            url=self.webhook_url,
            content=content,
            allowed_mentions=allowed_mentions,
            timeout=self.timeout,
        )
        if title or description:
            embed = DiscordEmbed(title=title, description=description, color=color)
            for name, value in (fields or {}).items():
                embed.add_embed_field(name=name, value=value)
            embed.set_timestamp()
            webhook.add_embed(embed)
        return webhook.execute()
