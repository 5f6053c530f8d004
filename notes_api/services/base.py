"""
Base Service.

Base class for services providing common logging helpers.

Usage:
    from notes_api.services.base import BaseService

    class TagService(BaseService):
        def add(self, name: str) -> None:
            self._log_operation("Adding tag", name=name)
"""

from typing import Any

from notes_api.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides a logger named after the concrete service's module and
    helpers that tag every record with the service class name.
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
