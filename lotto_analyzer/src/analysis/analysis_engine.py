"""
로또 번호 통계 분석 엔진

이 모듈은 과거 당첨 번호를 분석하여 다음과 같은 정보를 제공합니다:
- 번호별 출현 빈도 (Hot / Cold 번호)
- 최근 N회차 트렌드와 미출현 번호
- 홀짝 / 고저 패턴
- 연속번호 패턴
- 끝자리 분포
- 출현 주기와 현재 미출현 기간
- 위 결과를 조합한 번호 추천
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Union

import numpy as np

from .results import (
    FrequencyResult, RecentTrendResult, PatternResult, ConsecutiveResult,
    EndingDigitResult, CycleResult, RecommendationSet, DataSummary, ResultCache
)
from .recommendation import build_recommendations
from ..utils.config import Config, RecommendationConfig
from ..utils.draw_records import (
    DrawRecord, DrawSequence, parse_records,
    ALL_NUMBERS, MAX_NUMBER, NUMBERS_PER_DRAW
)
from ..utils.exceptions import EmptyDatasetOperationError
from shared.error_handler import setup_logger, log_performance


def _count_numbers(numbers: np.ndarray) -> Dict[int, int]:
    """1~45 각 번호의 출현 횟수 (미출현 번호는 0)"""
    counts = np.bincount(numbers.ravel(), minlength=MAX_NUMBER + 1)
    return {n: int(counts[n]) for n in ALL_NUMBERS}


def _sort_by_count(counts: Dict[Any, int]) -> tuple:
    """출현 횟수 내림차순 (동률은 기존 순서 유지)"""
    return tuple(sorted(counts.items(), key=lambda item: item[1], reverse=True))


class AnalysisEngine:
    """로또 당첨 번호 통계 분석기"""

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        분석 엔진 초기화

        Args:
            config: 설정 객체 (None이면 기본 설정)
            rng: 랜덤 추천에 사용할 난수 생성기 (None이면 새로 생성)
        """
        self.config = config or Config()
        self.logger = setup_logger(
            __name__,
            level=self.config.logging.level,
            log_dir=self.config.logging.log_dir,
            log_file=self.config.logging.log_file
        )
        self.rng = rng if rng is not None else np.random.default_rng()

        self._draws = DrawSequence()
        self._cache = ResultCache()

    @property
    def draws(self) -> DrawSequence:
        return self._draws

    @property
    def results(self) -> Dict[str, Any]:
        """캐시된 분석 결과 (종류별)"""
        return self._cache.as_dict()

    def has_data(self) -> bool:
        return len(self._draws) > 0

    def cached(self, kind: str) -> Any:
        """
        캐시된 분석 결과 조회

        Args:
            kind: frequency, recent, pattern, consecutive, ending, cycle, recommendations

        Returns:
            마지막으로 계산된 결과 (없으면 None)
        """
        if kind not in ResultCache.kinds():
            raise KeyError(f"알 수 없는 분석 종류입니다: {kind}")
        return getattr(self._cache, kind)

    def load(self, records: Any) -> None:
        """
        데이터 로드

        검증에 실패하면 기존 데이터와 캐시는 그대로 유지됩니다.

        Args:
            records: draw_no, draw_date, num1~num6, bonus 필드를 가진 레코드 시퀀스

        Raises:
            EmptyDataError: 레코드가 없는 경우
            ValidationError: 레코드 구조나 번호가 잘못된 경우
        """
        data_config = self.config.data
        try:
            draws = parse_records(
                records,
                validate_input=data_config.validate_on_load,
                sample_size=data_config.validation_sample_size
            )
        except Exception as e:
            self.logger.error(f"데이터 로드 실패: {str(e)}")
            raise

        self._draws = draws
        self._cache.clear()
        self.logger.info(f"데이터 로드 완료: {len(draws)}회차")

    @log_performance
    def analyze_frequency(self) -> FrequencyResult:
        """번호별 출현 빈도 분석 (보너스 번호 제외)"""
        top_n = self.config.analysis.top_n
        total_draws = len(self._draws)

        frequencies = _count_numbers(self._draws.main_numbers())
        sorted_freq = _sort_by_count(frequencies)

        result = FrequencyResult(
            frequencies=frequencies,
            sorted=sorted_freq,
            hot_numbers=sorted_freq[:top_n],
            cold_numbers=sorted_freq[-top_n:][::-1],
            total_draws=total_draws,
            expected_frequency=total_draws * NUMBERS_PER_DRAW / len(ALL_NUMBERS)
        )
        self._cache.frequency = result
        return result

    @log_performance
    def analyze_recent_trend(self, window_size: int = 0) -> RecentTrendResult:
        """
        최근 트렌드 분석

        Args:
            window_size: 최근 N회차 (0이거나 전체 회차 이상이면 전체)
        """
        if window_size < 0:
            raise ValueError(f"window_size는 0 이상이어야 합니다: {window_size}")

        recent_draws = self._draws.tail(window_size)
        frequencies = _count_numbers(recent_draws.main_numbers())
        sorted_freq = _sort_by_count(frequencies)

        result = RecentTrendResult(
            frequencies=frequencies,
            sorted=sorted_freq,
            hot_numbers=sorted_freq[:self.config.analysis.top_n],
            not_appeared=tuple(n for n in ALL_NUMBERS if frequencies[n] == 0),
            period=len(recent_draws),
            window_size=window_size
        )
        self._cache.recent = result
        return result

    @log_performance
    def analyze_patterns(self) -> PatternResult:
        """홀짝 / 고저 패턴 분석"""
        threshold = self.config.analysis.low_high_threshold
        odd_even = defaultdict(int)
        high_low = defaultdict(int)

        for numbers in self._draws.main_numbers():
            odd_count = int(np.count_nonzero(numbers % 2 == 1))
            low_count = int(np.count_nonzero(numbers <= threshold))
            odd_even[f"{odd_count}:{NUMBERS_PER_DRAW - odd_count}"] += 1
            high_low[f"{low_count}:{NUMBERS_PER_DRAW - low_count}"] += 1

        result = PatternResult(
            odd_even=_sort_by_count(odd_even),
            high_low=_sort_by_count(high_low),
            total_draws=len(self._draws)
        )
        self._cache.pattern = result
        return result

    @log_performance
    def analyze_consecutive(self) -> ConsecutiveResult:
        """연속번호 분석 (인접한 두 번호의 차가 1인 쌍의 수)"""
        numbers = np.sort(self._draws.main_numbers(), axis=1)
        per_draw = np.count_nonzero(np.diff(numbers, axis=1) == 1, axis=1)

        distribution = defaultdict(int)
        for count in per_draw:
            distribution[int(count)] += 1

        total_draws = len(self._draws)
        has_consecutive = int(np.count_nonzero(per_draw > 0))
        percentage = round(has_consecutive / total_draws * 100, 1) if total_draws else 0.0

        result = ConsecutiveResult(
            distribution=tuple(sorted(distribution.items())),
            has_consecutive=has_consecutive,
            total_draws=total_draws,
            percentage=percentage
        )
        self._cache.consecutive = result
        return result

    @log_performance
    def analyze_ending_digits(self) -> EndingDigitResult:
        """끝자리(0~9) 분석"""
        all_numbers = self._draws.main_numbers().ravel()
        digit_counts = np.bincount(all_numbers % 10, minlength=10)

        result = EndingDigitResult(
            frequencies={digit: int(digit_counts[digit]) for digit in range(10)},
            total=int(all_numbers.size)
        )
        self._cache.ending = result
        return result

    @log_performance
    def analyze_cycles(self) -> CycleResult:
        """
        출현 주기 분석

        출현 위치는 회차 번호가 아닌 시퀀스 내 순번(1부터)을 사용합니다.
        두 번 이상 출현한 번호만 평균 주기를 가지며, 현재 미출현 기간은 45개 번호 모두 계산합니다.
        """
        numbers = self._draws.main_numbers()
        total_draws = len(self._draws)
        top_n = self.config.analysis.top_n

        average_cycles = {}
        current_gaps = {}
        for number in ALL_NUMBERS:
            positions = np.flatnonzero((numbers == number).any(axis=1)) + 1
            if positions.size > 1:
                average_cycles[number] = float(np.diff(positions).mean())

            last_appearance = int(positions[-1]) if positions.size else 0
            current_gaps[number] = total_draws - last_appearance

        sorted_by_cycle = tuple(sorted(average_cycles.items(), key=lambda item: item[1]))
        sorted_by_gap = _sort_by_count(current_gaps)

        result = CycleResult(
            average_cycles=average_cycles,
            current_gaps=current_gaps,
            sorted_by_cycle=sorted_by_cycle,
            sorted_by_gap=sorted_by_gap,
            top_frequent=sorted_by_cycle[:top_n],
            top_gap=sorted_by_gap[:top_n]
        )
        self._cache.cycle = result
        return result

    @log_performance
    def generate_recommendations(
        self,
        config: Optional[Union[RecommendationConfig, Dict[str, Any]]] = None,
        rng: Optional[np.random.Generator] = None
    ) -> List[RecommendationSet]:
        """
        번호 추천 생성

        Args:
            config: 추천 설정 (None이면 엔진 설정의 recommendation 섹션)
            rng: 이번 호출에만 사용할 난수 생성기

        Returns:
            정확히 config.count개의 추천 세트
        """
        if config is None:
            config = self.config.recommendation
        elif isinstance(config, dict):
            config = RecommendationConfig(**config)

        frequency = self.analyze_frequency()
        recent = self.analyze_recent_trend(config.recent_window)
        cycle = self.analyze_cycles()

        # 우선순위: 인자로 받은 rng > 설정의 random_seed > 엔진 rng
        if rng is None:
            rng = np.random.default_rng(config.random_seed) if config.random_seed is not None else self.rng

        recommendations = build_recommendations(config, frequency, recent, cycle, rng=rng)
        self._cache.recommendations = recommendations
        self.logger.info(f"번호 추천 완료: {len(recommendations)}세트 (전략: {config.strategy})")
        return recommendations

    def run_full_analysis(
        self,
        recent_window: Optional[int] = None,
        include_recommendations: bool = True,
        recommendation_config: Optional[Union[RecommendationConfig, Dict[str, Any]]] = None
    ) -> Dict[str, Any]:
        """
        전체 분석 실행

        Args:
            recent_window: 최근 트렌드 기간 (None이면 설정값)
            include_recommendations: 추천 생성 여부
            recommendation_config: 추천 설정 (None이면 같은 기간의 mixed 전략 5세트)

        Returns:
            분석 종류별 결과 딕셔너리
        """
        if recent_window is None:
            recent_window = self.config.analysis.recent_window

        self.logger.info("전체 분석 시작...")
        results = {
            'frequency': self.analyze_frequency(),
            'recent': self.analyze_recent_trend(recent_window),
            'pattern': self.analyze_patterns(),
            'consecutive': self.analyze_consecutive(),
            'ending': self.analyze_ending_digits(),
            'cycle': self.analyze_cycles()
        }

        if include_recommendations:
            if recommendation_config is None:
                recommendation_config = RecommendationConfig(
                    count=self.config.recommendation.count,
                    strategy='mixed',
                    recent_window=recent_window,
                    random_seed=self.config.recommendation.random_seed
                )
            results['recommendations'] = self.generate_recommendations(recommendation_config)
            # 추천 과정에서 다시 계산된 최근 트렌드를 전체 분석 기간 기준으로 되돌림
            self._cache.recent = results['recent']

        self.logger.info("전체 분석 완료")
        return results

    def get_summary(self) -> Optional[DataSummary]:
        """데이터 요약 정보 (데이터가 없으면 None)"""
        if not self.has_data():
            return None

        first, last = self._draws.first, self._draws.last
        return DataSummary(
            total_draws=len(self._draws),
            first_date=first.draw_date,
            last_date=last.draw_date,
            latest_draw_number=last.draw_no
        )

    def latest_draw(self) -> DrawRecord:
        """
        최신 회차 반환

        Raises:
            EmptyDatasetOperationError: 로드된 데이터가 없는 경우
        """
        if not self.has_data():
            raise EmptyDatasetOperationError("최신 회차를 조회할 데이터가 없습니다.")
        return self._draws.last
