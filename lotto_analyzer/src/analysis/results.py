"""
분석 결과 타입

각 분석 함수는 아래의 불변 결과 객체를 반환하며, 엔진은 분석 종류별로
하나의 슬롯을 가진 ResultCache에 마지막 결과를 보관합니다.
"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

NumberCount = Tuple[int, int]


class RecommendationType(str, Enum):
    """추천 조합 표시용 태그"""
    HOT = 'hot'
    COLD = 'cold'
    BALANCED = 'balanced'
    MIXED = 'mixed'
    RANDOM = 'random'


class _ResultMixin:
    def to_dict(self) -> Dict[str, Any]:
        """표시용 딕셔너리로 변환"""
        return asdict(self)


@dataclass(frozen=True)
class FrequencyResult(_ResultMixin):
    """번호별 출현 빈도"""
    frequencies: Dict[int, int]
    sorted: Tuple[NumberCount, ...]
    hot_numbers: Tuple[NumberCount, ...]
    cold_numbers: Tuple[NumberCount, ...]
    total_draws: int
    expected_frequency: float


@dataclass(frozen=True)
class RecentTrendResult(_ResultMixin):
    """최근 N회차 출현 빈도"""
    frequencies: Dict[int, int]
    sorted: Tuple[NumberCount, ...]
    hot_numbers: Tuple[NumberCount, ...]
    not_appeared: Tuple[int, ...]
    period: int
    window_size: int


@dataclass(frozen=True)
class PatternResult(_ResultMixin):
    """홀짝 / 고저 패턴 분포"""
    odd_even: Tuple[Tuple[str, int], ...]
    high_low: Tuple[Tuple[str, int], ...]
    total_draws: int


@dataclass(frozen=True)
class ConsecutiveResult(_ResultMixin):
    """연속번호 쌍 개수 분포"""
    distribution: Tuple[Tuple[int, int], ...]
    has_consecutive: int
    total_draws: int
    percentage: float


@dataclass(frozen=True)
class EndingDigitResult(_ResultMixin):
    """끝자리(0~9) 분포"""
    frequencies: Dict[int, int]
    total: int


@dataclass(frozen=True)
class CycleResult(_ResultMixin):
    """출현 주기와 현재 미출현 기간"""
    average_cycles: Dict[int, float]
    current_gaps: Dict[int, int]
    sorted_by_cycle: Tuple[Tuple[int, float], ...]
    sorted_by_gap: Tuple[NumberCount, ...]
    top_frequent: Tuple[Tuple[int, float], ...]
    top_gap: Tuple[NumberCount, ...]


@dataclass(frozen=True)
class RecommendationSet(_ResultMixin):
    """추천 번호 조합 1세트"""
    name: str
    type: RecommendationType
    numbers: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'type': self.type.value, 'numbers': list(self.numbers)}


@dataclass(frozen=True)
class DataSummary(_ResultMixin):
    """로드된 데이터 요약"""
    total_draws: int
    first_date: str
    last_date: str
    latest_draw_number: int


@dataclass
class ResultCache:
    """분석 종류별 마지막 결과 보관소"""
    frequency: Optional[FrequencyResult] = None
    recent: Optional[RecentTrendResult] = None
    pattern: Optional[PatternResult] = None
    consecutive: Optional[ConsecutiveResult] = None
    ending: Optional[EndingDigitResult] = None
    cycle: Optional[CycleResult] = None
    recommendations: Optional[List[RecommendationSet]] = None

    @classmethod
    def kinds(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def clear(self) -> None:
        for kind in self.kinds():
            setattr(self, kind, None)

    def is_empty(self) -> bool:
        return all(getattr(self, kind) is None for kind in self.kinds())

    def as_dict(self) -> Dict[str, Any]:
        """비어 있지 않은 슬롯만 모아서 반환"""
        return {
            kind: getattr(self, kind)
            for kind in self.kinds()
            if getattr(self, kind) is not None
        }
