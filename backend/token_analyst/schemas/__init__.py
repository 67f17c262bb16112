"""Pydantic schemas for analysis records."""

from token_analyst.schemas.analysis import TokenAnalysisRecord
from token_analyst.schemas.base import StrictBaseModel

__all__ = ["StrictBaseModel", "TokenAnalysisRecord"]
