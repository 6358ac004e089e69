from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Projection limits enforced at the input boundary
    default_projection_years: int = 5
    max_projection_years: int = 30

    # Upper bound of the break-even lease search ($/month)
    breakeven_lease_ceiling: Decimal = Decimal("10000")


settings = Settings()
