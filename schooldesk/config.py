"""Application configuration using Pydantic Settings."""
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SCHOOLDESK_", extra="ignore"
    )

    # App
    app_name: str = "SchoolDesk"

    # Identifiers
    enrollment_number_prefix: str = "EN"  # students get EN10001, EN10002, ...
    enrollment_number_start: int = 10001
    id_suffix_length: int = 12  # hex chars appended to generated record ids

    # Demo data loaded by seed_store()
    seed_on_start: bool = True

    @model_validator(mode="after")
    def _validate_id_suffix(self):
        if not 6 <= self.id_suffix_length <= 32:
            raise ValueError("SCHOOLDESK_ID_SUFFIX_LENGTH must be between 6 and 32 hex characters")
        return self


settings = Settings()
