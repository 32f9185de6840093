"""Configuration, request and response models."""
