"""
Configuração do projeto Payee Registry.

Módulos:
- settings: Variáveis de ambiente e configuração de logging
- container: Dependency Injection Container
"""

from .settings import configure_logging
from .container import Container, get_container, reset_container

__all__ = (
    'configure_logging',
    'Container',
    'get_container',
    'reset_container',
)
