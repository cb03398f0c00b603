"""
번호 추천 테스트 모듈

이 모듈은 전략별 추천 세트 생성과 랜덤 채우기를 테스트합니다.
"""

import unittest
import sys
from pathlib import Path

import numpy as np

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lotto_analyzer.src.utils.config import Config, RecommendationConfig
from lotto_analyzer.src.analysis.analysis_engine import AnalysisEngine
from lotto_analyzer.src.analysis.results import RecommendationSet, RecommendationType
from lotto_analyzer.src.analysis.recommendation import fill_random_sets
from lotto_analyzer.src.utils.data_loader import generate_demo_data

from test_analysis_engine import SAMPLE_RECORDS


class TestRecommendations(unittest.TestCase):
    """추천 생성 테스트"""

    def setUp(self):
        self.engine = AnalysisEngine(rng=np.random.default_rng(42))
        self.engine.load(SAMPLE_RECORDS)

    def assertValidSet(self, numbers):
        self.assertEqual(len(numbers), 6)
        self.assertEqual(len(set(numbers)), 6)
        self.assertEqual(list(numbers), sorted(numbers))
        for number in numbers:
            self.assertGreaterEqual(number, 1)
            self.assertLessEqual(number, 45)

    def test_mixed_strategy(self):
        """혼합 전략은 hot, cold, balanced, mixed 순서로 생성"""
        recommendations = self.engine.generate_recommendations()

        self.assertEqual(len(recommendations), 5)
        self.assertEqual(
            [r.type for r in recommendations],
            [RecommendationType.HOT, RecommendationType.COLD, RecommendationType.BALANCED,
             RecommendationType.MIXED, RecommendationType.RANDOM]
        )
        self.assertEqual(recommendations[0].numbers, (1, 2, 3, 4, 5, 7))
        self.assertEqual(recommendations[1].numbers, (9, 12, 13, 14, 18, 19))
        self.assertEqual(recommendations[2].numbers, (1, 2, 3, 4, 6, 7))
        self.assertEqual(recommendations[3].numbers, (1, 2, 3, 7, 9, 12))
        self.assertEqual(recommendations[4].name, '추천 조합 5')
        for recommendation in recommendations:
            self.assertValidSet(recommendation.numbers)

    def test_balanced_strategy(self):
        recommendations = self.engine.generate_recommendations({'count': 1, 'strategy': 'balanced'})

        self.assertEqual(len(recommendations), 1)
        numbers = recommendations[0].numbers
        self.assertEqual(recommendations[0].type, RecommendationType.BALANCED)
        self.assertEqual(len([n for n in numbers if n % 2 == 1]), 3)
        self.assertEqual(len([n for n in numbers if n % 2 == 0]), 3)

    def test_single_strategies_fill_with_random(self):
        for strategy, expected_type in (('frequency', RecommendationType.HOT), ('gap', RecommendationType.COLD)):
            with self.subTest(strategy=strategy):
                recommendations = self.engine.generate_recommendations(
                    RecommendationConfig(count=3, strategy=strategy)
                )
                self.assertEqual(len(recommendations), 3)
                self.assertEqual(recommendations[0].type, expected_type)
                self.assertEqual([r.type for r in recommendations[1:]], [RecommendationType.RANDOM] * 2)

    def test_count_truncates(self):
        recommendations = self.engine.generate_recommendations({'count': 2})
        self.assertEqual([r.type for r in recommendations], [RecommendationType.HOT, RecommendationType.COLD])

    def test_mixed_set_uses_recent_window(self):
        recommendations = self.engine.generate_recommendations({'count': 4, 'recent_window': 1})
        # 빈도 상위 1, 7 / 미출현 상위 9, 12 / 최근 1회차 1, 7, 11, 33 ...
        self.assertEqual(recommendations[3].numbers, (1, 7, 9, 11, 12, 33))
        self.assertEqual(self.engine.cached('recent').window_size, 1)

    def test_always_valid_sets(self):
        engine = AnalysisEngine(rng=np.random.default_rng(0))
        engine.load(generate_demo_data(60, rng=np.random.default_rng(1)))
        for strategy in ('frequency', 'gap', 'balanced', 'mixed'):
            for count in (1, 4, 10):
                with self.subTest(strategy=strategy, count=count):
                    recommendations = engine.generate_recommendations({'count': count, 'strategy': strategy})
                    self.assertEqual(len(recommendations), count)
                    for recommendation in recommendations:
                        self.assertValidSet(recommendation.numbers)

    def test_seed_makes_random_sets_reproducible(self):
        config = RecommendationConfig(count=8, strategy='frequency', random_seed=7)
        first = self.engine.generate_recommendations(config)
        second = self.engine.generate_recommendations(config)
        self.assertEqual(first, second)

        injected = self.engine.generate_recommendations(
            RecommendationConfig(count=8, strategy='frequency'), rng=np.random.default_rng(7)
        )
        self.assertEqual(first, injected)

    def test_engine_default_config(self):
        engine = AnalysisEngine(Config({'recommendation': {'count': 2, 'strategy': 'gap'}}))
        engine.load(SAMPLE_RECORDS)
        recommendations = engine.generate_recommendations()
        self.assertEqual(len(recommendations), 2)
        self.assertEqual(recommendations[0].type, RecommendationType.COLD)
        self.assertIs(engine.cached('recommendations'), recommendations)

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            self.engine.generate_recommendations({'strategy': 'lucky'})
        with self.assertRaises(ValueError):
            self.engine.generate_recommendations({'count': 0})

    def test_fill_random_sets(self):
        existing = [RecommendationSet('고정', RecommendationType.HOT, (1, 2, 3, 4, 5, 6))]
        filled = fill_random_sets(existing, 3, np.random.default_rng(5))

        self.assertEqual(len(filled), 3)
        self.assertIs(filled[0], existing[0])
        self.assertEqual([r.name for r in filled[1:]], ['추천 조합 2', '추천 조합 3'])
        self.assertEqual(fill_random_sets(existing * 4, 2, np.random.default_rng(5)), existing * 2)

    def test_to_dict(self):
        recommendation = self.engine.generate_recommendations({'count': 1})[0]
        self.assertEqual(
            recommendation.to_dict(),
            {'name': '빈도 기반 (Hot Numbers)', 'type': 'hot', 'numbers': [1, 2, 3, 4, 5, 7]}
        )


if __name__ == '__main__':
    unittest.main()
