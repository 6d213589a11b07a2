from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "jobly"
    db_password: str = ""
    db_name: str = "jobly"
    db_pool_minsize: int = 5
    db_pool_maxsize: int = 20

    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        return (
            f"mysql+aiomysql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?charset=utf8mb4"
        )


settings = Settings()
