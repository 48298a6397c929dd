"""Incident Store Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless incident tracking service using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
