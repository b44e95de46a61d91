"""
Pydantic models for model-provider replies.
"""

from .legislation import LegislationDetails, coerce_to_text

__all__ = ["LegislationDetails", "coerce_to_text"]
