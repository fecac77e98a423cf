from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    access_token_secret_key: str
    algorithm: str

    log_level: str = "INFO"

    #DB
    mysql_user: str = "isucon"
    mysql_password: str = "isucon"
    mysql_database: str = "isupipe"
    mysql_host: str = "127.0.0.1"
    mysql_port: int = 3306
    database_url: str | None = None
    db_echo: bool = False
    db_connect_attempts: int = 20
    db_connect_delay: float = 3.0

    @property
    def livecomment_db_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"mysql+asyncmy://{self.mysql_user}:{self.mysql_password}"
            f"@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"
        )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
