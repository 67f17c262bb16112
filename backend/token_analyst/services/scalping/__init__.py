"""Scalping analysis module: scoring, verdicts and entry signals."""

from .types import (
    AnalysisConfig,
    AnalysisResult,
    EntrySignal,
    EntrySignalReason,
    ScalpingReason,
    Verdict,
)
from .scorer import ScalpingScorer, expected_profit_percent, risk_reward_ratio
from .analyzer import ScalpingAnalyzer, analyze

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "EntrySignal",
    "EntrySignalReason",
    "ScalpingReason",
    "Verdict",
    "ScalpingScorer",
    "risk_reward_ratio",
    "expected_profit_percent",
    "ScalpingAnalyzer",
    "analyze",
]
