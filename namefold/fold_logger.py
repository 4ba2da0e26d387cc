"""
FoldLogger 로깅 모듈

이름 정리 실행 중 발생하는 이벤트를 기록합니다.
콘솔은 stderr로 출력하여(stdout은 결과/JSON 전용) 출력 형식과 섞이지 않게 하고,
로그 디렉토리가 지정된 경우 요약/상세 파일을 로테이션하며 함께 기록합니다.
"""
import logging
import sys
from pathlib import Path
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional, Iterable

from namefold.path_change import PathChange, display_path


# 로그 파일 기본 설정
DEFAULT_LOG_FILENAME = "namefold.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5


class FoldLogger:
    """이름 정리 전용 로거 클래스"""

    def __init__(
        self,
        log_level: str = "WARNING",
        log_dir: Optional[Path] = None,
        log_filename: str = DEFAULT_LOG_FILENAME,
        max_bytes: int = DEFAULT_MAX_BYTES,
        backup_count: int = DEFAULT_BACKUP_COUNT,
        console_output: bool = True
    ):
        """
        FoldLogger 초기화

        Args:
            log_level: 콘솔 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_dir: 로그 파일 저장 디렉토리 (None이면 파일 기록 안 함)
            log_filename: 요약 로그 파일명
            max_bytes: 로그 파일 최대 크기 (기본 10MB)
            backup_count: 백업 파일 개수
            console_output: 콘솔 출력 여부
        """
        self.log_level = self._validate_log_level(log_level)
        self.log_dir = Path(log_dir) if log_dir else None

        # 1. Summary Log (namefold.log) - 고정 이름
        self.summary_log_filename = log_filename

        # 2. Detail Log (namefold_YYYYMMDD.log) - 일별
        date_str = datetime.now().strftime("%Y%m%d")
        stem = Path(log_filename).stem
        self.detail_log_filename = f"{stem}_{date_str}.log"

        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.console_output = console_output

        self._logger = self._setup_logger()

    def _validate_log_level(self, level: str) -> str:
        """로그 레벨 유효성 검증"""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        level_upper = str(level).upper()
        return level_upper if level_upper in valid_levels else "WARNING"

    def _get_log_level_int(self) -> int:
        """문자열 로그 레벨을 logging 모듈 상수로 변환"""
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR
        }
        return level_map.get(self.log_level, logging.WARNING)

    def _setup_logger(self) -> logging.Logger:
        """로거 설정 및 핸들러 추가"""
        # 고유한 로거 이름 생성 (테스트 시 충돌 방지)
        logger = logging.getLogger(f"namefold_{id(self)}")
        # 각 핸들러가 자신의 레벨에 맞게 필터링
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        if self.log_dir is not None:
            self._add_file_handler(logger, formatter, self.summary_log_filename, logging.INFO)
            self._add_file_handler(logger, formatter, self.detail_log_filename, logging.DEBUG)

        if self.console_output:
            self._setup_console_handler(logger, formatter)

        return logger

    def _add_file_handler(self, logger: logging.Logger, formatter: logging.Formatter, filename: str, level: int):
        """파일 핸들러 추가 (공통 메서드)"""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    def _setup_console_handler(self, logger: logging.Logger, formatter: logging.Formatter):
        """콘솔 핸들러 설정 (stderr)"""
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self._get_log_level_int())
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    @property
    def log_file_path(self) -> Optional[Path]:
        """상세 로그 파일 경로 반환 (파일 기록을 안 하면 None)"""
        if self.log_dir is None:
            return None
        return self.log_dir / self.detail_log_filename

    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def exception(self, message: str):
        """예외 발생 시 스택 트레이스와 함께 ERROR 로그"""
        self._logger.exception(message)

    def log_change(self, change: PathChange):
        """PathChange 한 건 기록 (상태에 따라 레벨 결정)"""
        if change.is_unchanged:
            self.debug(f"[UNCHANGED] {change.describe()}")
        elif change.is_changed:
            self.info(f"[RENAMED] {change.describe()}")
        elif change.modified is not None:
            self.debug(f"[RENAME-ERROR] {change.describe()}")
        else:
            self.warning(f"[ERROR] {change.describe()}")

    def log_run_start(self, paths: Iterable, dry_run: bool, max_workers: int):
        """실행 시작 로그"""
        targets = sorted(display_path(p) for p in paths)
        mode = "dry-run" if dry_run else "rename"
        self.info(f"{'='*60}")
        self.info(f"Run started ({mode}, workers={max_workers})")
        self.info(f"Starting paths: {len(targets)}")
        for target in targets:
            self.debug(f"  - {target}")
        self.info(f"{'='*60}")

    def log_run_complete(self, total: int, changed: int, pending: int, failed: int):
        """실행 완료 로그"""
        self.info(f"{'='*60}")
        self.info("Run completed")
        self.info(f"  Checked: {total}")
        self.info(f"  Renamed: {changed}")
        self.info(f"  Pending (dry-run): {pending}")
        self.info(f"  Failed: {failed}")
        self.info(f"{'='*60}")

    def close(self):
        """로거 핸들러 정리"""
        for handler in self._logger.handlers[:]:
            handler.close()
            self._logger.removeHandler(handler)

