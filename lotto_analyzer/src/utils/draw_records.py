"""
로또 회차 데이터 모델

외부 입력(파일, 네트워크, 데모 생성기)의 느슨한 레코드를 검증하여
내부에서 사용하는 DrawRecord / DrawSequence로 변환합니다.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd
from marshmallow import Schema, fields, validate, validates_schema, EXCLUDE
from marshmallow import ValidationError as SchemaValidationError

from .exceptions import ValidationError, EmptyDataError

MIN_NUMBER = 1
MAX_NUMBER = 45
NUMBERS_PER_DRAW = 6
ALL_NUMBERS = tuple(range(MIN_NUMBER, MAX_NUMBER + 1))

NUMBER_FIELDS = [f'num{i}' for i in range(1, NUMBERS_PER_DRAW + 1)]
REQUIRED_FIELDS = ['draw_no', 'draw_date'] + NUMBER_FIELDS + ['bonus']


class DrawRecordSchema(Schema):
    """외부 회차 레코드 스키마 (draw_no, draw_date, num1~num6, bonus)"""

    class Meta:
        unknown = EXCLUDE

    draw_no = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))
    draw_date = fields.String(required=True)
    num1 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    num2 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    num3 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    num4 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    num5 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    num6 = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))
    bonus = fields.Integer(required=True, strict=True, validate=validate.Range(min=MIN_NUMBER, max=MAX_NUMBER))

    @validates_schema
    def validate_distinct_numbers(self, data, **kwargs):
        numbers = [data[field] for field in NUMBER_FIELDS if field in data]
        if len(set(numbers)) != len(numbers):
            raise SchemaValidationError(f"중복된 번호가 있습니다: {numbers}", field_name="numbers")


@dataclass(frozen=True)
class DrawRecord:
    """로또 1회차 추첨 결과"""
    draw_no: int
    draw_date: str
    numbers: Tuple[int, ...]
    bonus: int

    @classmethod
    def from_raw(cls, raw: Any, coerce: bool = False) -> 'DrawRecord':
        """
        외부 레코드를 DrawRecord로 변환

        검증을 거치지 않은 레코드도 변환할 수 있도록 누락된 필드는 None으로 채웁니다.

        Args:
            raw: 외부 레코드
            coerce: True이면 번호는 int, 날짜는 str로 변환 (변환 불가 시 TypeError/ValueError)
        """
        if not isinstance(raw, Mapping):
            raw = {}
        if coerce:
            return cls(
                draw_no=int(raw.get('draw_no')),
                draw_date=None if raw.get('draw_date') is None else str(raw.get('draw_date')),
                numbers=tuple(int(raw.get(field)) for field in NUMBER_FIELDS),
                bonus=int(raw.get('bonus'))
            )
        return cls(
            draw_no=raw.get('draw_no'),
            draw_date=raw.get('draw_date'),
            numbers=tuple(raw.get(field) for field in NUMBER_FIELDS),
            bonus=raw.get('bonus')
        )

    def to_raw(self) -> Dict[str, Any]:
        """외부 레코드 형태로 변환"""
        raw = {'draw_no': self.draw_no, 'draw_date': self.draw_date}
        raw.update(zip(NUMBER_FIELDS, self.numbers))
        raw['bonus'] = self.bonus
        return raw


class DrawSequence(Sequence):
    """회차 순서대로 정렬된 불변 DrawRecord 시퀀스"""

    def __init__(self, records: Optional[List[DrawRecord]] = None):
        self._records = tuple(records or ())
        self._numbers = None

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return DrawSequence(list(self._records[index]))
        return self._records[index]

    def __iter__(self) -> Iterator[DrawRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f'DrawSequence({len(self)} draws)'

    @property
    def first(self) -> Optional[DrawRecord]:
        return self._records[0] if self._records else None

    @property
    def last(self) -> Optional[DrawRecord]:
        return self._records[-1] if self._records else None

    def tail(self, size: int) -> 'DrawSequence':
        """최근 size회차 (size가 0이거나 전체 이상이면 전체)"""
        if size <= 0 or size >= len(self):
            return self
        return self[-size:]

    def main_numbers(self) -> np.ndarray:
        """
        당첨 번호 행렬

        Returns:
            (회차 수, 6) 크기의 정수 배열. 데이터가 없으면 (0, 6)
        """
        if self._numbers is None:
            if self._records:
                numbers = np.array([record.numbers for record in self._records], dtype=int)
            else:
                numbers = np.empty((0, NUMBERS_PER_DRAW), dtype=int)
            numbers.setflags(write=False)
            self._numbers = numbers
        return self._numbers

    def to_frame(self) -> pd.DataFrame:
        """외부 레코드 형태의 데이터프레임으로 변환"""
        return pd.DataFrame([record.to_raw() for record in self._records], columns=REQUIRED_FIELDS)


def validate_records(records: Any, sample_size: int = 5) -> None:
    """
    입력 레코드 유효성 검사

    성능을 위해 앞쪽 sample_size개 레코드만 검사합니다.

    Args:
        records: 외부 레코드 시퀀스
        sample_size: 검사할 레코드 수

    Raises:
        EmptyDataError: 레코드가 하나도 없는 경우
        ValidationError: 구조, 필수 필드, 번호 범위가 잘못된 경우
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise ValidationError("데이터가 배열이 아닙니다.", details={'type': type(records).__name__})

    if len(records) == 0:
        raise EmptyDataError()

    schema = DrawRecordSchema()
    for index, item in enumerate(records[:sample_size]):
        if not isinstance(item, Mapping):
            raise ValidationError(
                f"항목 {index}가 올바른 객체가 아닙니다.",
                details={'index': index, 'type': type(item).__name__}
            )

        missing = [field for field in REQUIRED_FIELDS if field not in item]
        if missing:
            raise ValidationError(
                f"항목 {index}에 필수 필드가 없습니다: {missing}",
                details={'index': index, 'missing': missing}
            )

        try:
            schema.load(item)
        except SchemaValidationError as e:
            raise ValidationError(
                f"항목 {index}에 유효하지 않은 값이 있습니다.",
                details={'index': index, 'errors': e.messages}
            ) from e


def parse_records(records: Any, validate_input: bool = True, sample_size: int = 5) -> DrawSequence:
    """
    외부 레코드를 DrawSequence로 변환

    Args:
        records: 외부 레코드 시퀀스
        validate_input: 유효성 검사 여부
        sample_size: 검사할 레코드 수

    Returns:
        변환된 DrawSequence
    """
    if not validate_input:
        return DrawSequence([DrawRecord.from_raw(item) for item in (records if records is not None else [])])

    validate_records(records, sample_size)

    # 검사 범위 밖의 레코드도 정수 번호로 정규화
    draws = []
    for index, item in enumerate(records):
        try:
            draws.append(DrawRecord.from_raw(item, coerce=True))
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"항목 {index}의 값을 정수로 변환할 수 없습니다.",
                details={'index': index}
            ) from e
    return DrawSequence(draws)
