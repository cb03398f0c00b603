"""
오류 처리 및 로깅 유틸리티

콘솔 로그는 컬러로 표시하고, 로그 디렉토리가 지정되면 파일에도 기록합니다.
"""

import logging
import os
import traceback
import sys
import functools
import time
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

# 로그 포맷
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - [%(filename)s:%(lineno)d]'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT, use_color: Optional[bool] = None):
        super().__init__(fmt, datefmt=datefmt)
        # 터미널이 아니면 컬러 코드를 붙이지 않음
        if use_color is None:
            use_color = hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()
        self.use_color = use_color

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if self.use_color and levelname in COLORS:
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 생성"""
    return logging.getLogger(name)


def setup_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
    log_file: str = 'lotto_analyzer.log'
) -> logging.Logger:
    """로거 설정

    같은 이름으로 여러 번 호출해도 핸들러는 한 번만 추가됩니다.

    Args:
        name: 로거 이름
        level: 로그 레벨 (정수 또는 'INFO' 같은 문자열)
        log_dir: 파일 로그를 남길 디렉토리 (None이면 콘솔만 사용)
        log_file: 파일 로그 이름

    Returns:
        설정된 로거
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(getattr(h, '_lotto_console', False) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter())
        console_handler._lotto_console = True
        logger.addHandler(console_handler)
    # 자체 핸들러가 있으므로 상위 로거로 전달하지 않음 (중복 출력 방지)
    logger.propagate = False

    if log_dir is not None:
        log_path = Path(log_dir) / log_file
        has_file_handler = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_path)
            for h in logger.handlers
        )
        if not has_file_handler:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


# 성능 측정 데코레이터
def log_performance(func: Callable) -> Callable:
    """
    성능 측정 데코레이터

    특징:
    1. 실행 시간 측정 (DEBUG 레벨로 기록)
    2. 실패 시 실행 시간과 오류를 기록한 뒤 예외를 다시 발생
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.error(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={execution_time:.3f}초, "
                f"오류={str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        logger.debug(f"함수 {func.__name__} 실행 완료: 시간={execution_time:.4f}초")
        return result

    return wrapper


# 안전한 실행 데코레이터
T = TypeVar('T')

def safe_execute(default_return: Optional[T] = None, reraise: bool = False) -> Callable:
    """
    함수 실행을 안전하게 처리하는 데코레이터

    Args:
        default_return: 오류 발생 시 반환할 기본값
        reraise: 예외를 다시 발생시킬지 여부
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger = get_logger(func.__module__)
                logger.error(
                    f"함수 {func.__name__} 실행 중 오류 발생:\n"
                    f"오류: {str(e)}\n"
                    f"스택 트레이스:\n{traceback.format_exc()}"
                )

                if reraise:
                    raise
                return default_return
        return wrapper
    return decorator
