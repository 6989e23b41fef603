import typing
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    env: str = Field(default="production")
    debug: bool = Field(default=False)
    log_level: str = Field(default="ERROR")

    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_name: str = Field(default="catalog_db")
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_read_isolation_level: typing.Optional[str] = Field(default="REPEATABLE READ")
    db_statement_timeout: float = Field(default=5.0)

    default_page_size: int = Field(default=20)
    max_page_size: int = Field(default=100)

    catalog_host: str = Field(default="0.0.0.0")
    catalog_http_port: int = Field(default=8050)
    catalog_workers: int = Field(default=2)

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


settings = Settings()
