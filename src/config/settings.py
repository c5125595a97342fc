"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use JSDEV_ prefix (e.g., JSDEV_MAX_TAG_LENGTH=120).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use JSDEV_ prefix.

    Examples:
        JSDEV_MAX_TAG_LENGTH=120
        JSDEV_ENCODING=latin-1
        JSDEV_DEFAULT_PATTERN=**/*.mjs
    """

    model_config = SettingsConfigDict(
        env_prefix="JSDEV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scanner limits
    max_tag_length: int = Field(
        default=80,
        gt=0,
        description="Maximum length of a tag or method name",
    )

    max_tags: int = Field(
        default=100,
        gt=0,
        description="Maximum number of tag declarations",
    )

    # Stream configuration
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of input and output streams",
    )

    encoding_errors: str = Field(
        default="surrogateescape",
        description="Codec error handler; surrogateescape round-trips undecodable bytes",
    )

    # Directory mode
    default_pattern: str = Field(
        default="**/*.js",
        description="Glob selecting source files when processing a directory",
    )

    # Diagnostics
    diagnostic_prefix: str = Field(
        default="JSDev: ",
        description="Prefix of fatal diagnostics written to stderr",
    )

    def diagnostic_make(self, detail: str) -> str:
        """
        Build the one-line diagnostic for a fatal error.

        Example:
            >>> AppSettings().diagnostic_make("3. unterminated string literal.")
            'JSDev: 3. unterminated string literal.'
        """
        return f"{self.diagnostic_prefix}{detail}"


# Singleton instance - import this in your code
appsettings = AppSettings()
