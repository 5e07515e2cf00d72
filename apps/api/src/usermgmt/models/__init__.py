"""API response models."""

from usermgmt.models.health import HealthCheckResponse
from usermgmt.models.problem import ProblemDetail

__all__ = ["HealthCheckResponse", "ProblemDetail"]
