"""Configuration section models."""

from customer_api.config.models.api import APIConfig
from customer_api.config.models.customers import CustomersConfig
from customer_api.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from customer_api.config.models.storage import CustomerStoreConfig, StorageConfig

__all__ = [
    "APIConfig",
    "CustomersConfig",
    "CustomerStoreConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "StorageConfig",
]
