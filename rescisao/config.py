# rescisao/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    # --- Identificação do Ambiente ---
    APP_NAME: str = "Calculadora de Rescisão Trabalhista"
    APP_VERSION: str = "1.0.0"

    # --- Logs ---
    # LOG_TO_FILE=False desliga o handler de arquivo (útil em testes/containers)
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: str = "logs"

    # --- Relatórios (PDF/CSV do demonstrativo) ---
    REPORT_OUTPUT_DIR: str = "data"

    # --- API ---
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


# Instância global
settings = get_settings()
