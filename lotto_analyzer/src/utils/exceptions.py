"""
분석 엔진 예외 정의

데이터 로드와 분석 과정에서 발생하는 오류를 구분하기 위한 예외 클래스들입니다.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class LottoAnalysisError(Exception):
    """분석 엔진 기본 예외"""

    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ValidationError(LottoAnalysisError):
    """데이터 구조, 필수 필드, 번호 범위 오류"""

    def __init__(self, message: str = "데이터 유효성 검사 실패", details: Optional[Any] = None) -> None:
        super().__init__(code="validation_error", message=message, details=details)


class EmptyDataError(LottoAnalysisError):
    """로드할 데이터가 비어 있음"""

    def __init__(self, message: str = "데이터가 비어있습니다.", details: Optional[Any] = None) -> None:
        super().__init__(code="empty_data", message=message, details=details)


class EmptyDatasetOperationError(LottoAnalysisError):
    """데이터 없이 호출할 수 없는 작업"""

    def __init__(self, message: str = "로드된 데이터가 없습니다.", details: Optional[Any] = None) -> None:
        super().__init__(code="empty_dataset", message=message, details=details)
