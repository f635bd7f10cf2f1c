"""Gritter configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class GritterSettings(BaseSettings):
    """Runtime settings, loaded from GRITTER_* environment variables / .env file."""

    # -- Client-side assets --
    jquery_url: str = "https://code.jquery.com/jquery-3.7.1.min.js"
    script_url: str = "https://cdnjs.cloudflare.com/ajax/libs/jquery.gritter/1.7.4/js/jquery.gritter.min.js"
    stylesheet_url: str = "https://cdnjs.cloudflare.com/ajax/libs/jquery.gritter/1.7.4/css/jquery.gritter.min.css"

    # -- URL encoding --
    root_path: str = ""
    file_route: str = "/gradio_api/file="

    # -- Server --
    mount_path: str = "/"
    server_name: str = "0.0.0.0"
    server_port: int = 7860
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "GRITTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = GritterSettings()
