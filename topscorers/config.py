from typing import Literal
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    model_config = {"env_prefix": "POSTGRES_"}

    host: str = 'localhost'
    port: int = 5432
    db: str = 'topscorers'
    user: str = 'postgres'
    password: str = 'postgres'
    min_size: int = 5
    max_size: int = 20
    command_timeout: float = 10.0
    max_concurrent_operations: int = 50
    max_retries: int = 3
    retry_delay: int = 1

database = DatabaseConfig()

class AppConfig(BaseSettings):
    model_config = {"env_prefix": "TOPSCORERS_"}

    # Empty means every protected request is rejected
    api_key: str = ''
    auto_migrate: bool = True
    store: Literal['postgres', 'memory'] = 'postgres'
    log_level: str = 'INFO'

app_config = AppConfig()
