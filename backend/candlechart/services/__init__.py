"""
Candlechart Services

Service layer containing all business logic.
Each service has a defined interface (contract) and implementation.
"""

from candlechart.services.base import (
    BaseService,
    ServiceError,
    DataUnavailableError,
    ExternalAPIError,
    AuthenticationError,
    RateLimitError,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "DataUnavailableError",
    "ExternalAPIError",
    "AuthenticationError",
    "RateLimitError",
]
