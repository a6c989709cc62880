from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCHEMA_GENERATOR_")

    app_title: str = "Shopify Schema Generator"

    # Saved projects live under storage_dir/<projects_key>.json
    storage_dir: Path = Path.home() / ".shopify_schema_generator"
    projects_key: str = "shopifySchemaProjects"

    default_project_name: str = "Custom Section"
    status_clear_seconds: float = 2.0

    log_level: str = "INFO"

    # Passed through to Blocks.launch(); None keeps Gradio's defaults
    server_name: str | None = None
    server_port: int | None = None


settings = Settings()
