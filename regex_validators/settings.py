from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    MAX_RULE_NAME: int = 32

    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="REGEX_VALIDATORS_", env_file=".env", extra="ignore"
    )


settings = Settings(**{})
