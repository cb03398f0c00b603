"""
로또 당첨 이력 데이터 로더

이 모듈은 당첨 이력 파일(JSON, CSV)을 읽고, 파일이 없을 때 사용할 데모 데이터를 생성합니다.
"""

from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import numpy as np
import pandas as pd

from .config import Config
from .draw_records import REQUIRED_FIELDS, MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW
from .exceptions import ValidationError
from shared.error_handler import safe_execute

# 로거 설정
logger = logging.getLogger(__name__)

DEMO_DRAW_COUNT = 100
DEMO_START_DATE = '2023-01-01'


def records_to_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """외부 레코드 리스트를 데이터프레임으로 변환"""
    return pd.DataFrame(list(records), columns=REQUIRED_FIELDS)


def generate_demo_data(
    num_draws: int = DEMO_DRAW_COUNT,
    start_date: str = DEMO_START_DATE,
    rng: Optional[np.random.Generator] = None
) -> List[Dict[str, Any]]:
    """
    데모 데이터 생성

    1회차부터 매주 1회씩 추첨한 것으로 가정한 가상 당첨 이력입니다.

    Args:
        num_draws: 생성할 회차 수
        start_date: 1회차 추첨일 (YYYY-MM-DD)
        rng: 난수 생성기

    Returns:
        외부 레코드 형태의 리스트
    """
    if rng is None:
        rng = np.random.default_rng()

    first_date = date.fromisoformat(start_date)
    pool = np.arange(MIN_NUMBER, MAX_NUMBER + 1)
    data = []

    for draw_no in range(1, num_draws + 1):
        numbers = sorted(int(n) for n in rng.choice(pool, size=NUMBERS_PER_DRAW, replace=False))
        record = {
            'draw_no': draw_no,
            'draw_date': (first_date + timedelta(weeks=draw_no - 1)).isoformat()
        }
        record.update({f'num{i}': n for i, n in enumerate(numbers, start=1)})
        record['bonus'] = int(rng.integers(MIN_NUMBER, MAX_NUMBER + 1))
        data.append(record)

    return data


class DataManager:
    """데이터 관리자"""

    def __init__(self, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None):
        """
        데이터 관리자 초기화

        Args:
            config: 설정 객체
            rng: 데모 데이터 생성용 난수 생성기
        """
        self.config = config or Config()
        self.data_config = self.config.data
        self.rng = rng if rng is not None else np.random.default_rng()
        self.data = None

    def read_history_file(self, path: Optional[Union[str, Path]] = None) -> List[Dict[str, Any]]:
        """
        당첨 이력 파일 읽기

        Args:
            path: .json(객체 배열) 또는 .csv 파일 경로 (None이면 설정의 history_path)

        Returns:
            외부 레코드 형태의 리스트
        """
        if path is None and not self.data_config.history_path:
            raise ValueError("읽을 이력 파일 경로가 지정되지 않았습니다.")

        data_path = Path(path or self.data_config.history_path)
        if not data_path.exists():
            raise FileNotFoundError(f"데이터 파일을 찾을 수 없습니다: {data_path}")

        suffix = data_path.suffix.lower()
        if suffix == '.json':
            df = pd.read_json(data_path, orient='records', convert_dates=False)
        elif suffix == '.csv':
            df = pd.read_csv(data_path, dtype={'draw_date': str})
        else:
            raise ValidationError(f"지원하지 않는 파일 형식입니다: {suffix}", details={'path': str(data_path)})

        if df.empty and len(df.columns) == 0:
            self.data = records_to_frame([])
            logger.warning(f"데이터 파일이 비어있습니다: {data_path}")
            return []

        self._validate_columns(df)
        self.data = df[REQUIRED_FIELDS].copy()
        logger.info(f"데이터 파일 읽기 완료: {data_path} ({len(self.data)} 행)")
        return self.data.to_dict(orient='records')

    def _validate_columns(self, df: pd.DataFrame) -> None:
        """
        필수 컬럼 검사

        Args:
            df: 검사할 데이터프레임
        """
        missing_columns = [col for col in REQUIRED_FIELDS if col not in df.columns]
        if missing_columns:
            raise ValidationError(f"필수 컬럼이 없습니다: {missing_columns}", details={'missing': missing_columns})

    def generate_demo_data(self, num_draws: int = DEMO_DRAW_COUNT, start_date: str = DEMO_START_DATE) -> List[Dict[str, Any]]:
        """데모 데이터 생성 (관리자의 난수 생성기 사용)"""
        records = generate_demo_data(num_draws, start_date, rng=self.rng)
        self.data = records_to_frame(records)
        return records

    @safe_execute(default_return=None)
    def _try_read_history_file(self, path: Optional[Union[str, Path]]) -> Optional[List[Dict[str, Any]]]:
        return self.read_history_file(path)

    def load_history_or_demo(self, path: Optional[Union[str, Path]] = None) -> List[Dict[str, Any]]:
        """
        이력 파일을 읽고, 실패하거나 비어 있으면 데모 데이터를 반환

        Args:
            path: 이력 파일 경로 (None이면 설정의 history_path)

        Returns:
            외부 레코드 형태의 리스트
        """
        records = None
        if path is not None or self.data_config.history_path:
            records = self._try_read_history_file(path)

        if records:
            return records

        logger.warning("이력 파일을 사용할 수 없어 데모 데이터를 사용합니다.")
        return self.generate_demo_data()
