from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: Optional[str] = None
    db_name: str = "inventory_db"
    db_driver: str = "mysql+aiomysql"
    # Overrides the db_* parts, e.g. sqlite+aiosqlite:///./inventory.db
    database_url: Optional[str] = None

    # Pool
    db_pool_size: int = 10
    db_pool_timeout: float = 30.0
    db_statement_timeout: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Guards DELETE /test/clear-database
    security_key: Optional[str] = None

    # API
    api_title: str = "Inventory API"
    api_version: str = "1.0.0"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def engine_url(self) -> URL:
        """URL of the inventory database itself."""
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def server_url(self) -> URL:
        """URL of the database server with no database selected."""
        url = self.engine_url
        return URL.create(
            url.drivername,
            username=url.username,
            password=url.password,
            host=url.host,
            port=url.port,
            query=url.query,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.engine_url.get_backend_name() == "sqlite"
