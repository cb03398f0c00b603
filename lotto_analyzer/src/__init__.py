"""
로또 번호 통계 분석 시스템 - 소스 코드

이 패키지는 분석 엔진과 데이터 유틸리티를 구현합니다.
"""

from .analysis.analysis_engine import AnalysisEngine
from .utils.data_loader import DataManager

__all__ = ['AnalysisEngine', 'DataManager']
