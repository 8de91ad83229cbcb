"""
Base service for the business logic layer.
Services own a repository and log through a per-entity logger.
"""

from typing import Generic, TypeVar
from abc import ABC
import logging

RepositoryType = TypeVar("RepositoryType")


class BaseService(Generic[RepositoryType], ABC):
    """Holds the repository and the service logger"""

    def __init__(self, repository: RepositoryType, logger_name: str):
        self.repository = repository
        self.logger = logging.getLogger(logger_name)

    def log_info(self, message: str, **kwargs):
        """Log an info line with key=value pairs appended"""
        fields = " ".join(f"{k}={v}" for k, v in kwargs.items())
        self.logger.info(f"{message} {fields}".strip())
