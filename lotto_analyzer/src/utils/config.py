"""
설정 관리 모듈

이 모듈은 분석 엔진의 설정을 관리하는 Config 클래스를 제공합니다.
"""

import copy
from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml

logger = logging.getLogger(__name__)

STRATEGIES = ('frequency', 'gap', 'balanced', 'mixed')


@dataclass
class DataConfig:
    """데이터 설정"""
    history_path: Optional[str] = 'lotto_history.json'
    validate_on_load: bool = True
    validation_sample_size: int = 5

    def __post_init__(self):
        if self.validation_sample_size < 1:
            raise ValueError(f"validation_sample_size는 1 이상이어야 합니다: {self.validation_sample_size}")


@dataclass
class AnalysisConfig:
    """분석 설정"""
    top_n: int = 10
    low_high_threshold: int = 22
    recent_window: int = 0

    def __post_init__(self):
        if self.top_n < 1:
            raise ValueError(f"top_n은 1 이상이어야 합니다: {self.top_n}")
        if self.recent_window < 0:
            raise ValueError(f"recent_window는 0 이상이어야 합니다: {self.recent_window}")


@dataclass
class RecommendationConfig:
    """번호 추천 설정"""
    count: int = 5
    strategy: str = 'mixed'
    recent_window: int = 0
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"count는 1 이상이어야 합니다: {self.count}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"지원하지 않는 전략입니다: {self.strategy} (가능: {', '.join(STRATEGIES)})")
        if self.recent_window < 0:
            raise ValueError(f"recent_window는 0 이상이어야 합니다: {self.recent_window}")


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = 'INFO'
    log_dir: Optional[str] = None
    log_file: str = 'lotto_analyzer.log'


class Config:
    """설정 관리 클래스"""

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리
        """
        self._apply(copy.deepcopy(config_dict or {}))

    def _apply(self, config_dict: Dict[str, Any]) -> None:
        """
        섹션을 모두 생성한 뒤에 교체

        하나라도 잘못된 값이 있으면 예외가 발생하고 기존 설정은 그대로 유지됩니다.
        """
        data = DataConfig(**config_dict.get('data', {}))
        analysis = AnalysisConfig(**config_dict.get('analysis', {}))
        recommendation = RecommendationConfig(**config_dict.get('recommendation', {}))
        logging_config = LoggingConfig(**config_dict.get('logging', {}))

        self._config = config_dict
        self.data = data
        self.analysis = analysis
        self.recommendation = recommendation
        self.logging = logging_config

    @classmethod
    def from_yaml(cls, filepath: str) -> 'Config':
        """YAML 파일에서 설정 생성"""
        config = cls()
        config.load(filepath)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정값
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키
            value: 설정값
        """
        merged = copy.deepcopy(self._config)
        merged[key] = copy.deepcopy(value)
        self._apply(merged)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트

        섹션 단위 딕셔너리는 기존 값과 병합됩니다.

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        merged = copy.deepcopy(self._config)
        for key, value in copy.deepcopy(config_dict).items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        self._apply(merged)

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            # YAML 형식으로 저장
            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except Exception as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로
        """
        try:
            if not Path(filepath).exists():
                raise FileNotFoundError(f'설정 파일을 찾을 수 없습니다: {filepath}')

            # YAML 형식으로 로드
            with open(filepath, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            logger.info(f'설정 로드 완료: {filepath}')

            # 설정 객체 재초기화
            self._apply(loaded)
        except Exception as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        return {
            'data': asdict(self.data),
            'analysis': asdict(self.analysis),
            'recommendation': asdict(self.recommendation),
            'logging': asdict(self.logging)
        }

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
