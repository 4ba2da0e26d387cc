#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
namefold - CLI Entry Point

파일/디렉토리 이름을 안전한 ASCII 이름으로 정리하는 도구의 CLI 인터페이스입니다.

사용법:
    python main.py [옵션] [경로 ...]

예시:
    python main.py ./downloads            # dry-run 모드로 미리보기
    python main.py -d ./downloads         # 실제 rename 실행
    python main.py -e -p ./downloads      # 에러만 JSON(들여쓰기)으로 출력
"""
import sys
import os

# 프로젝트 루트를 sys.path에 추가 (절대 import 지원)
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from config.fold_config import FoldConfig, OUTPUT_JSON, OUTPUT_QUIET, VALID_LOG_LEVELS
from namefold.fold_runner import FoldRunner
from namefold.output_printer import print_output
from namefold.version import __version__, get_full_version


EXIT_ARGUMENT_ERROR = 1

# 출력 플래그 (인자 순서대로 적용)
FLAG_JSON = 'json'
FLAG_PRETTY = 'pretty'
FLAG_ERRORS = 'errors'
FLAG_QUIET = 'quiet'

# 현재 디렉토리 전체를 뜻하는 인자 (셸이 확장하지 않은 경우)
ALL_ENTRIES_ARG = '*'


def create_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서 생성"""
    parser = argparse.ArgumentParser(
        prog='namefold',
        description=f'namefold v{__version__} - 파일 이름을 안전한 ASCII 이름으로 정리하는 도구',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  %(prog)s ./downloads              # dry-run 모드로 미리보기 (기본값)
  %(prog)s -d ./downloads           # 실제 rename 실행
  %(prog)s -j ./downloads           # 전체 결과를 JSON으로 출력
  %(prog)s -e -p ./downloads        # 에러만 JSON(들여쓰기)으로 출력
  %(prog)s -w 8 -d ./downloads      # 스레드 8개로 실행
        """
    )

    parser.add_argument(
        'paths',
        nargs='*',
        help='정리할 파일/디렉토리 경로 (없으면 현재 디렉토리의 모든 항목)'
    )

    parser.add_argument(
        '-d', '--do',
        dest='do_rename',
        action='store_true',
        help='실제 rename 실행 (기본값: dry-run)'
    )

    # 출력 플래그는 순서가 의미를 가지므로 하나의 목록에 쌓음
    parser.add_argument(
        '-q', '--quiet',
        dest='output_flags',
        action='append_const',
        const=FLAG_QUIET,
        help='아무것도 출력하지 않음'
    )

    parser.add_argument(
        '-j', '--json',
        dest='output_flags',
        action='append_const',
        const=FLAG_JSON,
        help='결과 전체를 JSON으로 출력'
    )

    parser.add_argument(
        '-p', '--json-pretty',
        dest='output_flags',
        action='append_const',
        const=FLAG_PRETTY,
        help='JSON을 들여쓰기하여 출력'
    )

    parser.add_argument(
        '-e', '--json-error',
        dest='output_flags',
        action='append_const',
        const=FLAG_ERRORS,
        help='에러 항목만 JSON으로 출력'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='스레드 풀 크기 (1이면 순차 처리, 기본값: 1)'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help='콘솔 로그 레벨 (기본값: WARNING)'
    )

    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='로그 파일 저장 디렉토리 (지정 시 파일에도 기록)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='JSON 설정 파일 경로 (CLI 인자가 우선)'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=get_full_version(),
        help='버전 정보 출력'
    )

    return parser


def apply_output_flags(config: FoldConfig, flags: Sequence[str]) -> FoldConfig:
    """
    출력 플래그를 주어진 순서대로 설정에 적용

    -p는 현재 JSON 종류를 유지하고 들여쓰기만 켜며,
    -e/-j는 들여쓰기를 유지하고 종류만 바꿉니다.
    JSON이 아닌 상태에서 -e/-j가 오면 들여쓰기는 꺼진 상태로 시작합니다.
    """
    for flag in flags:
        was_json = config.output == OUTPUT_JSON
        if flag == FLAG_QUIET:
            config.output = OUTPUT_QUIET
            config.json_only_errors = False
            config.json_pretty = False
        elif flag == FLAG_PRETTY:
            if not was_json:
                config.json_only_errors = False
            config.output = OUTPUT_JSON
            config.json_pretty = True
        elif flag == FLAG_ERRORS:
            config.output = OUTPUT_JSON
            config.json_only_errors = True
            config.json_pretty = config.json_pretty if was_json else False
        elif flag == FLAG_JSON:
            config.output = OUTPUT_JSON
            config.json_only_errors = False
            config.json_pretty = config.json_pretty if was_json else False
    return config


def build_config(args: argparse.Namespace) -> FoldConfig:
    """설정 구성: 기본값 < 설정 파일 < 환경 변수 < CLI 인자"""
    if args.config:
        config = FoldConfig.load(Path(args.config))
    else:
        config = FoldConfig()

    config = config.with_env()

    if args.do_rename:
        config.dry_run = False
    if args.workers is not None:
        config.max_workers = args.workers
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_dir is not None:
        config.log_dir = args.log_dir

    apply_output_flags(config, args.output_flags or [])

    # CLI로 바뀐 값도 동일한 규칙으로 검증
    return config.validate()


def list_directory_entries(dir_path: str = '.') -> List[str]:
    """디렉토리의 모든 항목 경로 (읽기 실패 시 빈 목록)"""
    try:
        with os.scandir(dir_path) as iterator:
            return [entry.path for entry in iterator]
    except OSError:
        return []


def resolve_paths(path_args: Sequence[str], verbose: bool) -> Optional[List[str]]:
    """
    경로 인자를 시작 경로 목록으로 변환

    Args:
        path_args: CLI 경로 인자
        verbose: 상세 출력 모드 (없는 경로 안내 출력)

    Returns:
        시작 경로 목록 (입력 텍스트 그대로, 중복 제거), 경로 인자 하나가 존재하지 않으면 None
    """
    resolved = {}
    for arg in path_args:
        if arg == ALL_ENTRIES_ARG:
            for entry in list_directory_entries('.'):
                resolved.setdefault(entry, None)
        elif os.path.lexists(arg):
            resolved.setdefault(arg, None)
        elif verbose:
            print(f"Cannot find path: {arg}")

    if len(path_args) == 1 and not resolved:
        return None

    if not resolved:
        return list_directory_entries('.')

    return list(resolved)


def run_main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI 실행

    Args:
        argv: 명령행 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 정상, 1: 인자 오류, 2: JSON 직렬화 실패)
    """
    parser = create_parser()
    args = parser.parse_intermixed_args(argv)

    config = build_config(args)

    paths = resolve_paths(args.paths or [], config.is_verbose)
    if paths is None:
        return EXIT_ARGUMENT_ERROR

    runner = FoldRunner(config)
    try:
        changes = runner.run(paths)
    finally:
        runner.logger.close()

    return print_output(changes, config)


def main():
    """메인 엔트리포인트"""
    try:
        sys.exit(run_main())
    except KeyboardInterrupt:
        print("\n사용자에 의해 중단되었습니다.", file=sys.stderr)
        sys.exit(130)


if __name__ == '__main__':
    main()
