"""Domain services - Stateless operations on domain objects."""

from .expiry_evaluator import ExpiryEvaluator

__all__ = ["ExpiryEvaluator"]
