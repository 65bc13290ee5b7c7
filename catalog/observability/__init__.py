"""Observability layer: catalog metrics and failure classification. No external SaaS."""

from catalog.observability.failure_classifier import FailureCategory, FailureClassifier
from catalog.observability.metrics import CatalogMetrics, MetricsSnapshot

__all__ = [
    "CatalogMetrics",
    "FailureCategory",
    "FailureClassifier",
    "MetricsSnapshot",
]
