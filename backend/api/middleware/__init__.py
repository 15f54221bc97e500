"""Request dependencies that guard routes."""
