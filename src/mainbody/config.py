"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_HTML_PARSERS = frozenset({"lxml", "html.parser", "html5lib"})
SUPPORTED_TRANSCODE_ERRORS = frozenset({"strict", "replace", "ignore"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default, so the extraction core can be used as a
    library without any environment set up.
    """

    # --- Logging ---
    mainbody_debug: bool = False

    # --- Extraction ---
    html_parser: str = "lxml"
    max_nesting_depth: int = 512
    legacy_image_attributes: bool = False
    transcode_errors: str = "strict"

    # --- Fetcher ---
    fetch_timeout: float = 10.0
    fetch_user_agent: str = "mainbody/0.1"

    # --- Network Interface ---
    host: str = "0.0.0.0"
    port: int = 8000

    @model_validator(mode="after")
    def validate_extraction_config(self) -> "Settings":
        """Validate extraction settings.

        Raises:
            ValueError: If a setting names an unsupported option

        """
        if self.html_parser not in SUPPORTED_HTML_PARSERS:
            msg = f"HTML_PARSER must be one of {sorted(SUPPORTED_HTML_PARSERS)}"
            raise ValueError(msg)
        if self.transcode_errors not in SUPPORTED_TRANSCODE_ERRORS:
            msg = f"TRANSCODE_ERRORS must be one of {sorted(SUPPORTED_TRANSCODE_ERRORS)}"
            raise ValueError(msg)
        if self.max_nesting_depth <= 0:
            msg = "MAX_NESTING_DEPTH must be a positive integer"
            raise ValueError(msg)
        return self

    # --- Tool Metadata ---
    # Tool descriptions are stored here so they can be updated via environment
    # variables without code changes.
    tool_extract_page_desc: str = (
        "Fetch a web page and extract its title and main article body.\n\n"
        "Returns a dictionary with:\n"
        "- url (str): The final page URL after redirects\n"
        "- title (str): The document title\n"
        "- content (str): Cleaned HTML of the main content, empty if none was found"
    )
    tool_extract_html_desc: str = (
        "Extract the title and main article body from raw HTML.\n\n"
        "Relative image sources are resolved against base_url when it is given."
    )

    # Tool argument descriptions
    arg_extract_page_url_desc: str = "The URL of the page to extract"
    arg_extract_html_html_desc: str = "Raw HTML document"
    arg_extract_html_base_url_desc: str = "Base URL for resolving relative image sources"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    """
    return Settings()


settings = get_settings()
