from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "COCOMO Estimator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Used when a request leaves project_class out: matches the form default
    DEFAULT_PROJECT_CLASS: str = "Organic"

    class Config:
        env_file = ".env"


settings = Settings()
