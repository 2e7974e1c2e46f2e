"""Document, request and response models."""
