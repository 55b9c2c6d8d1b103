"""Focus timer CLI domain models."""
