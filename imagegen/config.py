from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the image generation backend."""

    #----------------------------------------------------------
    # External API settings
    #----------------------------------------------------------
    api_key: SecretStr = Field(
        default="",
        validation_alias=AliasChoices("IMAGEGEN_API_KEY", "API_KEY"),
        description="API key for authenticating with the Gemini image generation service.",
    )

    image_model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model id used for image generation.",
    )

    #----------------------------------------------------------
    # Logging
    #----------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the API starts.",
    )

    model_config = SettingsConfigDict(
        env_prefix="IMAGEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.get_secret_value().strip())


def get_settings() -> Settings:
    # Not cached: the credential is read from the environment at call time.
    return Settings()  # type: ignore[call-arg]
