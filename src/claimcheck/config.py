from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    OPENAI_API_KEY: str = Field("", description="Bearer token for the judge endpoint")
    OPENAI_BASE_URL: Optional[str] = Field(None, description="Override for OpenAI-compatible judge endpoints")
    MODEL_JUDGE: str = "gpt-4o-mini"
    JUDGE_TEMPERATURE: float = 0.0
    JUDGE_MAX_TOKENS: int = 800
    LOG_LEVEL: str = "INFO"

    # Ingestion limits
    MAX_FILE_BYTES: int = Field(10 * 1024 * 1024, description="Largest admissible upload")
    MAX_EVIDENCE_CHARS: int = Field(100_000, description="Ceiling on evidence text sent to the judge")

    # Web retrieval
    FETCH_TIMEOUT: float = 15.0
    FETCH_USER_AGENT: str = "ClaimCheck/1.0 (+source verification)"

    PROMPTS_DIR: str = Field("data/prompts", description="Directory holding prompt overrides")
    PENDING_CLAIM: Optional[str] = Field(
        None,
        validation_alias="CLAIMCHECK_PENDING_CLAIM",
        description="Claim handed over by the host shell",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
