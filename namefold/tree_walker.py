"""
Tree Walker

디렉토리와 그 하위 항목 전체에 Path Renamer를 적용합니다.

핵심 규칙:
    - 디렉토리는 자신의 rename을 먼저 끝낸 뒤, 성공했다면 "새 경로"에서 목록을 읽음
    - 목록 읽기 실패 → error 한 건, 해당 디렉토리는 하강하지 않음
    - 항목 읽기 실패 → 항목마다 error 한 건, 나머지 항목은 계속 처리
    - 형제 항목끼리는 순서 의존성이 없으므로 스레드 풀에서 병렬 처리 가능

병렬 모드에서는 워커가 다른 워커의 완료를 기다리지 않습니다.
각 작업은 항목 하나(디렉토리면 rename + 목록 읽기)만 처리하고 자식 목록을 돌려주며,
조율 스레드가 자식을 다시 풀에 제출합니다.
"""
import os
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_COMPLETED
from typing import List, Optional, Tuple, Iterable, Union

from config.fold_config import FoldConfig
from namefold.fold_logger import FoldLogger
from namefold.path_change import PathChange, display_path
from namefold.path_renamer import PathRenamer
from namefold.result_collector import ResultCollector


# (경로, 디렉토리 여부)
Entry = Tuple[str, bool]


class TreeWalker:
    """디렉토리 트리 rename 워커"""

    def __init__(
        self,
        config: FoldConfig,
        logger: Optional[FoldLogger] = None,
        renamer: Optional[PathRenamer] = None
    ):
        """
        Args:
            config: 실행 설정 (dry_run, max_workers 사용)
            logger: 로거 (없으면 콘솔 출력 없는 로거 생성)
            renamer: Path Renamer (없으면 config로 생성)
        """
        self.config = config
        self.max_workers = config.max_workers
        self.logger = logger or FoldLogger(console_output=False)
        self.renamer = renamer or PathRenamer(config, self.logger)

    def walk(self, dir_path: Union[str, os.PathLike]) -> List[PathChange]:
        """
        디렉토리 하나와 그 하위 전체 처리

        Args:
            dir_path: 시작 디렉토리

        Returns:
            방문한 모든 항목의 PathChange 목록 (순서 무의미)
        """
        return self.walk_entries([(os.fspath(dir_path), True)])

    def walk_entries(self, entries: Iterable[Entry]) -> List[PathChange]:
        """
        여러 시작 항목 처리 (디렉토리는 하위까지)

        Args:
            entries: (경로, 디렉토리 여부) 목록

        Returns:
            평탄화된 PathChange 목록
        """
        entries = [(os.fspath(path), is_dir) for path, is_dir in entries]
        if self.max_workers > 1:
            return self._walk_concurrent(entries)

        collector = ResultCollector()
        for path, is_dir in entries:
            collector.extend(self._walk_sequential(path, is_dir))
        return collector.changes

    def _walk_sequential(self, path: str, is_dir: bool) -> List[PathChange]:
        changes, children = self._visit(path, is_dir)
        for child_path, child_is_dir in children:
            changes.extend(self._walk_sequential(child_path, child_is_dir))
        return changes

    def _walk_concurrent(self, entries: List[Entry]) -> List[PathChange]:
        collector = ResultCollector()
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending = {executor.submit(self._visit, path, is_dir) for path, is_dir in entries}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    changes, children = future.result()
                    collector.extend(changes)
                    for child_path, child_is_dir in children:
                        pending.add(executor.submit(self._visit, child_path, child_is_dir))
        return collector.changes

    def _visit(self, path: str, is_dir: bool) -> Tuple[List[PathChange], List[Entry]]:
        """
        항목 하나 처리 (하위 디렉토리로 재귀하지 않음)

        Returns:
            (이 항목의 결과 목록, 다음에 처리할 자식 항목 목록)
        """
        try:
            if not is_dir:
                return [self.renamer.process(path)], []
            return self._visit_directory(path)
        except Exception as e:
            # 결함 격리: 한 항목의 예기치 못한 에러가 형제 처리를 막지 않음
            self.logger.exception(f"항목 처리 실패: {display_path(path)}")
            return [PathChange.path_error(path, f"{type(e).__name__}: {e}")], []

    def _visit_directory(self, dir_path: str) -> Tuple[List[PathChange], List[Entry]]:
        own_change = self.renamer.process(dir_path)
        if own_change.is_changed:
            dir_path = own_change.modified

        errors, children = self._scan(dir_path)
        return [own_change] + errors, children

    def _scan(self, dir_path: str) -> Tuple[List[PathChange], List[Entry]]:
        """
        디렉토리 목록 읽기

        Returns:
            (읽기 에러 목록, 자식 항목 목록)
        """
        try:
            iterator = os.scandir(dir_path)
        except OSError as e:
            self.logger.warning(f"디렉토리 읽기 실패: {display_path(dir_path)} - {e}")
            return [PathChange.path_error(dir_path, f"Error while reading directory: {e}")], []

        errors: List[PathChange] = []
        children: List[Entry] = []
        with iterator:
            while True:
                try:
                    entry = next(iterator)
                except StopIteration:
                    break
                except OSError as e:
                    self.logger.warning(f"디렉토리 항목 읽기 실패: {display_path(dir_path)} - {e}")
                    errors.append(PathChange.path_error(
                        dir_path, f"Error reading dir entry of directory {e}"
                    ))
                    continue
                children.append((entry.path, self._is_directory(entry)))

        self.logger.debug(f"디렉토리 스캔: {display_path(dir_path)} ({len(children)}개 항목)")
        return errors, children

    @staticmethod
    def _is_directory(entry: os.DirEntry) -> bool:
        """심볼릭 링크는 따라가지 않음, 판별 실패 시 파일로 취급"""
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False


def clean_directory(
    dir_path: Union[str, os.PathLike],
    config: FoldConfig,
    logger: Optional[FoldLogger] = None
) -> List[PathChange]:
    """TreeWalker 한 번 실행 헬퍼 함수"""
    return TreeWalker(config, logger).walk(dir_path)
