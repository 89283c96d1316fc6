"""Assistant configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat client.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-3.1-pro-preview"

SYSTEM_INSTRUCTION = (
    "Your name is Zentro. You are a world-class AI assistant powered by Gemini 3.1 Pro. "
    "You are highly intelligent, accurate, and professional. You have access to Google "
    "Search to provide real-time, verified information. Always prioritize depth, accuracy, "
    "and helpfulness. You can assist with complex reasoning, coding, creative writing, and "
    "data analysis. You are multimodal and can analyze images with extreme precision."
)


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class AssistantConfig(BaseModel):
    """Configuration for the Gemini chat client.

    Attributes:
        api_key: Gemini API key.
        model_name: Model identifier to use.
        system_instruction: Persona and behaviour instructions for every chat.
        enable_search: Whether Google Search grounding is enabled.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    system_instruction: str = Field(
        default=SYSTEM_INSTRUCTION,
        description="System instruction sent with every chat session",
    )
    enable_search: bool = Field(
        default_factory=lambda: _env_flag("GEMINI_ENABLE_SEARCH", True),
        description="Enable Google Search grounding",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "Gemini API key is missing. Set GEMINI_API_KEY in the environment or .env"
            )
        return v.strip()


def get_assistant_config() -> AssistantConfig:
    """Create assistant configuration from environment.

    Returns:
        Configured AssistantConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return AssistantConfig()
