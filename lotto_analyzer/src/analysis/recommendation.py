"""
번호 추천 전략

빈도, 최근 트렌드, 주기 분석 결과를 조합하여 추천 번호 세트를 만듭니다.
모든 함수는 분석 결과와 난수 생성기만으로 결과가 결정됩니다.
"""

from typing import List, Optional, Sequence

import numpy as np

from .results import (
    FrequencyResult, RecentTrendResult, CycleResult,
    RecommendationSet, RecommendationType
)
from ..utils.config import RecommendationConfig
from ..utils.draw_records import MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW, ALL_NUMBERS

HOT_LABEL = '빈도 기반 (Hot Numbers)'
DUE_LABEL = '미출현 기반 (Due Numbers)'
BALANCED_LABEL = '균형 전략 (홀짝 3:3)'
MIXED_LABEL = '혼합 전략'
RANDOM_LABEL = '추천 조합 {index}'


def _sorted_numbers(numbers: Sequence[int]) -> tuple:
    return tuple(sorted(int(n) for n in numbers))


def hot_number_set(frequency: FrequencyResult) -> RecommendationSet:
    """빈도 상위 6개 번호"""
    numbers = [number for number, _ in frequency.sorted[:NUMBERS_PER_DRAW]]
    return RecommendationSet(HOT_LABEL, RecommendationType.HOT, _sorted_numbers(numbers))


def due_number_set(cycle: CycleResult) -> RecommendationSet:
    """미출현 기간이 가장 긴 6개 번호"""
    numbers = [number for number, _ in cycle.sorted_by_gap[:NUMBERS_PER_DRAW]]
    return RecommendationSet(DUE_LABEL, RecommendationType.COLD, _sorted_numbers(numbers))


def balanced_number_set(frequency: FrequencyResult) -> RecommendationSet:
    """빈도 순으로 홀수 3개, 짝수 3개"""
    ranked = sorted(ALL_NUMBERS, key=lambda n: -frequency.frequencies.get(n, 0))
    half = NUMBERS_PER_DRAW // 2
    odd_numbers = [n for n in ranked if n % 2 == 1][:half]
    even_numbers = [n for n in ranked if n % 2 == 0][:half]
    return RecommendationSet(BALANCED_LABEL, RecommendationType.BALANCED, _sorted_numbers(odd_numbers + even_numbers))


def mixed_number_set(
    frequency: FrequencyResult,
    cycle: CycleResult,
    recent: RecentTrendResult
) -> RecommendationSet:
    """
    혼합 전략

    빈도 상위 2개, 미출현 상위 2개를 먼저 넣고 최근 트렌드 상위 번호로 나머지를 채웁니다.
    """
    mixed: List[int] = []
    candidates = (
        [number for number, _ in frequency.sorted[:2]]
        + [number for number, _ in cycle.sorted_by_gap[:2]]
        + [number for number, _ in recent.sorted]
    )
    for number in candidates:
        if len(mixed) >= NUMBERS_PER_DRAW:
            break
        if number not in mixed:
            mixed.append(number)
    return RecommendationSet(MIXED_LABEL, RecommendationType.MIXED, _sorted_numbers(mixed))


def random_number_set(rng: np.random.Generator, index: int) -> RecommendationSet:
    """1~45에서 중복 없이 6개를 균등 추출"""
    numbers = rng.choice(np.arange(MIN_NUMBER, MAX_NUMBER + 1), size=NUMBERS_PER_DRAW, replace=False)
    return RecommendationSet(RANDOM_LABEL.format(index=index), RecommendationType.RANDOM, _sorted_numbers(numbers))


def fill_random_sets(
    recommendations: List[RecommendationSet],
    count: int,
    rng: np.random.Generator
) -> List[RecommendationSet]:
    """
    부족한 개수만큼 랜덤 조합을 채우고 count개로 자름

    Args:
        recommendations: 전략으로 만든 추천 세트
        count: 최종 세트 수
        rng: 난수 생성기

    Returns:
        정확히 count개의 추천 세트
    """
    result = list(recommendations)
    while len(result) < count:
        result.append(random_number_set(rng, len(result) + 1))
    return result[:count]


def build_recommendations(
    config: RecommendationConfig,
    frequency: FrequencyResult,
    recent: RecentTrendResult,
    cycle: CycleResult,
    rng: Optional[np.random.Generator] = None
) -> List[RecommendationSet]:
    """
    전략별 추천 세트 생성

    Args:
        config: 추천 설정 (count, strategy, recent_window)
        frequency: 전체 빈도 분석 결과
        recent: config.recent_window 기준 최근 트렌드 결과
        cycle: 주기 분석 결과
        rng: 난수 생성기 (None이면 config.random_seed로 생성)

    Returns:
        정확히 config.count개의 추천 세트
    """
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    strategy = config.strategy
    recommendations = []

    if strategy in ('frequency', 'mixed'):
        recommendations.append(hot_number_set(frequency))

    if strategy in ('gap', 'mixed'):
        recommendations.append(due_number_set(cycle))

    if strategy in ('balanced', 'mixed'):
        recommendations.append(balanced_number_set(frequency))

    if strategy == 'mixed':
        recommendations.append(mixed_number_set(frequency, cycle, recent))

    return fill_random_sets(recommendations, config.count, rng)
