"""
Configuration module for the form builder engine.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormBuilderConfig:
    """Configuration settings for the form builder engine."""

    # Rendering
    default_display_mode: str = "sidebar"

    # Prices and summaries
    currency_symbol: str = "€"
    price_decimals: int = 2
    summary_date_format: str = "%m/%d/%Y"
    include_hidden_values: bool = True  # Price and summarize fields hidden by conditions

    # Admin editor
    json_indent: int = 2

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    verbose_output: bool = False

    @classmethod
    def from_env(cls) -> "FormBuilderConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            default_display_mode=os.getenv("FORM_BUILDER_DISPLAY_MODE", _defaults.default_display_mode),
            currency_symbol=os.getenv("FORM_BUILDER_CURRENCY", _defaults.currency_symbol),
            price_decimals=int(os.getenv("FORM_BUILDER_PRICE_DECIMALS", str(_defaults.price_decimals))),
            summary_date_format=os.getenv("FORM_BUILDER_DATE_FORMAT", _defaults.summary_date_format),
            include_hidden_values=_env_bool("FORM_BUILDER_INCLUDE_HIDDEN_VALUES", _defaults.include_hidden_values),
            json_indent=int(os.getenv("FORM_BUILDER_JSON_INDENT", str(_defaults.json_indent))),
            log_level=os.getenv("FORM_BUILDER_LOG_LEVEL", _defaults.log_level),
            log_file=os.getenv("FORM_BUILDER_LOG_FILE", _defaults.log_file),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            verbose_output=_env_bool("FORM_BUILDER_VERBOSE_OUTPUT", _defaults.verbose_output),
        )


config = FormBuilderConfig.from_env()


def get_config() -> FormBuilderConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormBuilderConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
