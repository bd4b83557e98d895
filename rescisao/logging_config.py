# rescisao/logging_config.py

import sys
from loguru import logger

from rescisao.config import settings

# Remove o handler padrão para evitar duplicação de logs no console.
logger.remove()

# Console: formato limpo e colorido, nível vindo das configurações (.env).
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

# Arquivo: guarda tudo a partir de DEBUG (memória de cálculo completa).
# rotation="10 MB": novo arquivo quando o atual atingir 10 MB.
# retention="30 days": arquivos com mais de 30 dias são apagados.
if settings.LOG_TO_FILE:
    logger.add(
        f"{settings.LOG_DIR}/rescisao_{{time}}.log",
        rotation="10 MB",
        retention="30 days",
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    )

# Exporta o logger configurado para ser usado em outros módulos.
log = logger
