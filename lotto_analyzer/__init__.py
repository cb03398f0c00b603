"""
로또 번호 통계 분석 시스템

이 패키지는 과거 당첨 번호의 빈도, 패턴, 주기 분석과 번호 추천 기능을 제공합니다.
"""

from pathlib import Path
from .src.utils.config import Config, RecommendationConfig
from .src.analysis.analysis_engine import AnalysisEngine
from .src.utils.data_loader import DataManager
from .src.utils.exceptions import (
    LottoAnalysisError, ValidationError, EmptyDataError, EmptyDatasetOperationError
)

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent

# 버전
__version__ = "1.0.0"

__all__ = [
    'Config', 'RecommendationConfig', 'AnalysisEngine', 'DataManager',
    'LottoAnalysisError', 'ValidationError', 'EmptyDataError', 'EmptyDatasetOperationError'
]
