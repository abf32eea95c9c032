"""
Base service interface for business logic layer.
Services orchestrate business operations using repositories.
"""

from typing import Generic, Iterable, Mapping, Optional, TypeVar
from abc import ABC
import logging

from app.exceptions import ServiceValidationError

RepositoryType = TypeVar("RepositoryType")


class BaseService(Generic[RepositoryType], ABC):
    """
    Base service providing common functionality.
    All service classes should inherit from this class.
    """

    def __init__(self, repository: RepositoryType, logger_name: str):
        self.repository = repository
        self.logger = logging.getLogger(logger_name)

    def log_info(self, message: str, **kwargs):
        """Log info message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.info(f"{message} {extra_data}".strip())

    def log_warning(self, message: str, **kwargs):
        """Log warning message with structured data"""
        extra_data = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        self.logger.warning(f"{message} {extra_data}".strip())

    @staticmethod
    def ensure_ids_match(path_id: str, body_id: Optional[str]) -> None:
        """
        Reject an update whose body names a different record than the path.

        Raises:
            ServiceValidationError: If body_id is given and differs from path_id
        """
        if body_id is not None and body_id != path_id:
            raise ServiceValidationError(
                f"Request path id ({path_id}) and request body id ({body_id}) must match",
                details={"path_id": path_id, "body_id": body_id},
                code="ID_MISMATCH",
            )

    def seed(self, records: Iterable[Mapping]) -> int:
        """Create one record per mapping; returns how many were added"""
        count = 0
        for fields in records:
            self.repository.create(**fields)
            count += 1
        self.log_info("Seeded records", count=count)
        return count
