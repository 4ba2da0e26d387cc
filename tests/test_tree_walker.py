"""
Tree Walker 테스트

디렉토리 rename 전파, dry-run 무변경, 순차/병렬 결과 동일성, 목록 읽기 에러 처리를 검증합니다.
"""
import os
import sys
import shutil
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.fold_config import FoldConfig
from namefold.path_change import DRY_RUN_ERROR
from namefold.tree_walker import TreeWalker, clean_directory


def snapshot(root: Path):
    """디렉토리 트리의 상대 경로 집합"""
    return {p.relative_to(root) for p in root.rglob('*')}


class FakeScandir:
    """항목 읽기 도중 에러를 내는 scandir 대체 객체"""

    def __init__(self, items):
        self._items = list(items)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        return self

    def __next__(self):
        if not self._items:
            raise StopIteration
        item = self._items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class TestTreeWalker:
    """TreeWalker 테스트 클래스"""

    @pytest.fixture
    def temp_dir(self):
        """임시 디렉토리 생성"""
        temp_dir = tempfile.mkdtemp()
        yield Path(temp_dir)
        shutil.rmtree(temp_dir, ignore_errors=True)

    @pytest.fixture
    def tree(self, temp_dir):
        """
        테스트 트리 생성

        my dir/
            a b.txt
            c.txt
            sub dir/
                x y
        """
        root = temp_dir / "my dir"
        (root / "sub dir").mkdir(parents=True)
        (root / "a b.txt").write_text("a")
        (root / "c.txt").write_text("c")
        (root / "sub dir" / "x y").write_text("x")
        return root

    def test_rename_propagates_to_children(self, temp_dir, tree):
        walker = TreeWalker(FoldConfig(dry_run=False))

        changes = walker.walk(tree)

        # 디렉토리 1 + 항목 3 + 하위 항목 1
        assert len(changes) == 5
        renamed = {Path(c.modified) for c in changes if c.is_changed}
        new_root = temp_dir / "my_dir"
        assert renamed == {
            new_root,
            new_root / "a_b.txt",
            new_root / "sub_dir",
            new_root / "sub_dir" / "x_y",
        }
        unchanged = [Path(c.path) for c in changes if c.is_unchanged]
        assert unchanged == [new_root / "c.txt"]
        assert snapshot(new_root) == {
            Path("a_b.txt"), Path("c.txt"), Path("sub_dir"), Path("sub_dir/x_y")
        }
        assert not tree.exists()

    def test_dry_run_leaves_tree(self, tree):
        before = snapshot(tree)
        walker = TreeWalker(FoldConfig(dry_run=True))

        changes = walker.walk(tree)

        assert len(changes) == 5
        assert snapshot(tree) == before
        pending = [c for c in changes if c.error == DRY_RUN_ERROR]
        assert {Path(c.path) for c in pending} == {
            tree, tree / "a b.txt", tree / "sub dir", tree / "sub dir" / "x y"
        }

    def test_concurrent_matches_sequential(self, tree):
        sequential = TreeWalker(FoldConfig(dry_run=True, max_workers=1)).walk(tree)
        concurrent = TreeWalker(FoldConfig(dry_run=True, max_workers=4)).walk(tree)

        assert set(sequential) == set(concurrent)
        assert len(sequential) == len(concurrent)

    def test_concurrent_rename(self, temp_dir, tree):
        changes = TreeWalker(FoldConfig(dry_run=False, max_workers=3)).walk(tree)

        assert len(changes) == 5
        assert sum(1 for c in changes if c.is_changed) == 4
        assert (temp_dir / "my_dir" / "sub_dir" / "x_y").exists()

    def test_walk_entries_mixes_files_and_dirs(self, temp_dir, tree):
        loose = temp_dir / "loose file"
        loose.write_text("l")
        walker = TreeWalker(FoldConfig(dry_run=True))

        changes = walker.walk_entries([(tree, True), (loose, False)])

        assert len(changes) == 6

    def test_listing_error(self, temp_dir):
        target = temp_dir / "clean"
        target.mkdir()
        walker = TreeWalker(FoldConfig(dry_run=True))

        with patch('namefold.tree_walker.os.scandir', side_effect=PermissionError("denied")):
            changes = walker.walk(target)

        assert len(changes) == 2
        assert changes[0].is_unchanged
        assert changes[1].status == "error"
        assert changes[1].error == "Error while reading directory: denied"
        assert changes[1].path == str(target)

    def test_entry_error_does_not_stop_siblings(self, temp_dir):
        target = temp_dir / "clean"
        target.mkdir()
        entry = Mock()
        entry.path = str(target / "a b")
        entry.is_dir.return_value = False
        fake = FakeScandir([OSError("bad entry"), entry])
        walker = TreeWalker(FoldConfig(dry_run=True))

        with patch('namefold.tree_walker.os.scandir', return_value=fake):
            changes = walker.walk(target)

        errors = [c for c in changes if c.status == "error"]
        assert len(errors) == 1
        assert errors[0].error == "Error reading dir entry of directory bad entry"
        assert any(c.path == str(target / "a b") and c.error == DRY_RUN_ERROR for c in changes)

    def test_unexpected_exception_isolated(self, tree):
        walker = TreeWalker(FoldConfig(dry_run=True))
        original = walker.renamer.process

        def flaky(path):
            if Path(path).name == "c.txt":
                raise RuntimeError("boom")
            return original(path)

        walker.renamer.process = flaky
        changes = walker.walk(tree)

        assert len(changes) == 5
        failed = [c for c in changes if c.status == "error"]
        assert len(failed) == 1
        assert failed[0].error == "RuntimeError: boom"

    @pytest.mark.skipif(not hasattr(os, 'symlink') or os.name != 'posix', reason="심볼릭 링크 필요")
    def test_symlinked_directory_not_followed(self, temp_dir):
        root = temp_dir / "root"
        root.mkdir()
        other = temp_dir / "other dir"
        other.mkdir()
        (other / "z z").write_text("z")
        os.symlink(other, root / "link")

        changes = TreeWalker(FoldConfig(dry_run=True)).walk(root)

        assert {c.path for c in changes} == {str(root), str(root / "link")}

    def test_clean_directory_helper(self, tree):
        assert len(clean_directory(tree, FoldConfig())) == 5
