from pydantic_settings import BaseSettings, SettingsConfigDict

from studio_agent.api.models import MarketTab


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Pump Studio API
    pump_api_base: str = "https://api.pump.studio"
    pump_studio_api_key: str = ""  # ps_xxx, empty triggers auto-registration
    http_timeout_sec: float = 15.0
    max_rps: float = 2.0

    # Agent profile
    agent_name: str = "pumpstudio-agent"
    agent_description: str = "Deterministic quant analysis agent for Pump.fun tokens"

    # Discovery
    market_tab: MarketTab = "all"
    market_limit: int = 5

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
