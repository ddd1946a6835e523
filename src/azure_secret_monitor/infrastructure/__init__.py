"""Infrastructure layer - adapters and configuration."""
