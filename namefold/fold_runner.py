"""
Fold Runner

시작 경로 집합에 이름 정리를 적용하는 진입 컨트롤러입니다.
디렉토리는 Tree Walker로 하위까지, 그 외 경로는 Path Renamer로 바로 처리하고
모든 결과를 하나의 평탄화된 목록으로 돌려줍니다.

핵심 기능:
    - 시작 경로별 결함 격리 (한 경로의 실패가 다른 경로를 막지 않음)
    - Dry-run 모드: 파일 시스템 변경 없이 결과만 계산
    - 실행 요약 로그
"""
import os
from typing import Iterable, List, Optional, Union

from config.fold_config import FoldConfig
from namefold.fold_logger import FoldLogger
from namefold.path_change import PathChange, display_path
from namefold.path_renamer import PathRenamer
from namefold.result_collector import ResultCollector, FoldSummary
from namefold.tree_walker import TreeWalker


class FoldRunner:
    """이름 정리 실행 컨트롤러"""

    def __init__(self, config: FoldConfig, logger: Optional[FoldLogger] = None):
        """
        Args:
            config: 실행 설정
            logger: 로거 (없으면 설정의 로그 레벨로 생성)
        """
        self.config = config
        self.logger = logger or FoldLogger(
            log_level=config.log_level,
            log_dir=config.log_path,
            console_output=True
        )
        self.renamer = PathRenamer(config, self.logger)
        self.walker = TreeWalker(config, self.logger, self.renamer)
        self.last_summary: Optional[FoldSummary] = None

    def run(self, paths: Iterable[Union[str, os.PathLike]]) -> List[PathChange]:
        """
        시작 경로 전체 처리

        Args:
            paths: 시작 경로 집합 (존재하는 경로여야 함)

        Returns:
            방문한 모든 항목의 PathChange 목록 (순서 무의미)
        """
        paths = [os.fspath(p) for p in paths]

        if self.config.is_verbose:
            print(f"Running with options: {self.config.describe()}")

        self.logger.log_run_start(paths, self.config.dry_run, self.config.max_workers)

        entries = []
        for path in paths:
            if self.config.is_verbose:
                print(f"Checking: {display_path(path)}")
            entries.append((path, os.path.isdir(path)))

        collector = ResultCollector()
        if self.config.is_concurrent:
            collector.extend(self.walker.walk_entries(entries))
        else:
            for path, is_dir in entries:
                collector.extend(self._run_one(path, is_dir))

        summary = collector.summary()
        self.last_summary = summary
        self.logger.log_run_complete(summary.total, summary.changed, summary.pending, summary.failed)
        return collector.changes

    def _run_one(self, path: str, is_dir: bool) -> List[PathChange]:
        try:
            if is_dir:
                return self.walker.walk(path)
            return [self.renamer.process(path)]
        except Exception as e:
            self.logger.exception(f"시작 경로 처리 실패: {display_path(path)}")
            return [PathChange.path_error(path, f"{type(e).__name__}: {e}")]


def run_fold(
    paths: Iterable[Union[str, os.PathLike]],
    config: Optional[FoldConfig] = None,
    logger: Optional[FoldLogger] = None
) -> List[PathChange]:
    """FoldRunner 한 번 실행 헬퍼 함수 (기본 설정은 dry-run)"""
    config = config or FoldConfig(output="quiet")
    return FoldRunner(config, logger).run(paths)
