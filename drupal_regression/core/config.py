from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "drupal-regression"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    database_url: str = "sqlite:///./drupal_regression.db"

    config_dir: str = "config"
    content_model_path: str = "config/content_model.yml"

    # Overrides drupal_regression.enabled when set, e.g. REGRESSION_ENABLED=true on staging.
    regression_enabled: bool | None = None

settings = Settings()
