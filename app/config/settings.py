from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Supabase (the NEXT_PUBLIC_* names are accepted for existing deployments)
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_key", "next_public_supabase_anon_key"),
    )

    # Live-status probe
    twitch_channel: str = "reggysosa"
    twitch_status_url: str = "https://decapi.me/twitch/uptime/{channel}"
    http_timeout: float = 10.0

    # App
    app_name: str = "tournament-gateway"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    rate_limit_enabled: bool = True
    degrade_list_on_error: bool = True  # list endpoints answer [] when the store fails

    def get_twitch_status_url(self) -> str:
        return self.twitch_status_url.format(channel=self.twitch_channel)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        populate_by_name=True,
        extra="ignore"
    )


def get_settings() -> Settings:
    """Settings re-read from the environment for each request."""
    return Settings()


settings = Settings()
