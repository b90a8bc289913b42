from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rpc_url: str = "https://cloudflare-eth.com"
    rpc_rate_per_second: float = 5.0
    rpc_timeout: float = 30.0
    rpc_max_attempts: int = 3
    poll_interval: float = 1.0  # Idle wait when no new block
    backoff_delay: float = 1.0  # Wait after a failed fetch
    fetch_timeout: float = 30.0
    start_height: int = 0  # 0 = sync from genesis
    sync_enabled: bool = True
    host: str = "localhost"
    port: int = 8888
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_prefix": "BLOCKTRAIL_", "env_file": ".env"}


settings = Settings()
