"""
로또 번호 분석 모듈

이 패키지는 당첨 번호의 통계 분석과 번호 추천 기능을 제공합니다.
"""

from .analysis_engine import AnalysisEngine
from .results import (
    FrequencyResult, RecentTrendResult, PatternResult, ConsecutiveResult,
    EndingDigitResult, CycleResult, RecommendationSet, RecommendationType,
    DataSummary, ResultCache
)

__all__ = [
    'AnalysisEngine', 'FrequencyResult', 'RecentTrendResult', 'PatternResult',
    'ConsecutiveResult', 'EndingDigitResult', 'CycleResult', 'RecommendationSet',
    'RecommendationType', 'DataSummary', 'ResultCache'
]
