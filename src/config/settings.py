"""
Settings do Payee Registry.

Usa variáveis de ambiente (carregadas de ``.env`` via python-dotenv)
com defaults para desenvolvimento.

Variáveis:
- LOG_LEVEL: Nível do logger raiz (default: INFO)
- LOG_FORMATTER: "simple" ou "verbose" (default: simple)
- EVENT_LOG_LEVEL: Nível dos eventos de domínio logados (default: INFO)
- TEMPERED_VALUE_LOG_LEVEL: Nível dos avisos de dados adulterados
  (default: WARNING)
"""

import logging
import logging.config
import os
from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOG_FORMATTER = os.getenv('LOG_FORMATTER', 'simple')

EVENT_LOG_LEVEL = os.getenv('EVENT_LOG_LEVEL', 'INFO').upper()

TEMPERED_VALUE_LOG_LEVEL = os.getenv('TEMPERED_VALUE_LOG_LEVEL', 'WARNING').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': LOG_FORMATTER,
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.core': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def level_number(level_name: str) -> int:
    """Converte nome de nível ("WARNING") para o número do logging."""
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Nível de log inválido: {level_name}")
    return level


def configure_logging() -> None:
    """Aplica a configuração LOGGING via dictConfig."""
    logging.config.dictConfig(LOGGING)


def as_container_config() -> dict:
    """Valores consumidos pelo Container de DI."""
    return {
        'event_log_level': level_number(EVENT_LOG_LEVEL),
        'tempered_value_log_level': level_number(TEMPERED_VALUE_LOG_LEVEL),
    }
