"""Core services: coercion, metrics, filtering, pagination, view-model, display."""
