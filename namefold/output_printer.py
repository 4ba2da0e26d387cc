"""
Output Printer

실행 결과(PathChange 목록)를 설정된 형식으로 stdout에 출력합니다.

형식:
    default → 변경/에러 항목 한 줄씩 + "N files checked"
    json    → 전체 또는 에러만, 압축/들여쓰기
    quiet   → 출력 없음
"""
import json
from typing import List, Dict, Any

from config.fold_config import FoldConfig, OUTPUT_DEFAULT, OUTPUT_JSON
from namefold.path_change import PathChange
from namefold.result_collector import ResultCollector


EXIT_OK = 0
EXIT_SERIALIZE_ERROR = 2


def format_verbose(changes: List[PathChange]) -> List[str]:
    """상세 출력 줄 목록 생성 (unchanged는 생략)"""
    lines = [change.describe() for change in changes if not change.is_unchanged]
    count = len(changes)
    lines.append(f"{count} file checked" if count == 1 else f"{count} files checked")
    return lines


def select_for_json(changes: List[PathChange], only_errors: bool) -> List[Dict[str, Any]]:
    """JSON 출력 대상 레코드 선택"""
    if only_errors:
        changes = ResultCollector(changes).only_errors()
    return [change.to_dict() for change in changes]


def format_json(changes: List[PathChange], only_errors: bool = False, pretty: bool = False) -> str:
    """JSON 문자열 생성"""
    records = select_for_json(changes, only_errors)
    if pretty:
        return json.dumps(records, ensure_ascii=False, indent=2)
    return json.dumps(records, ensure_ascii=False)


def print_output(changes: List[PathChange], config: FoldConfig) -> int:
    """
    설정에 맞게 결과 출력

    Args:
        changes: 실행 결과
        config: 출력 설정

    Returns:
        종료 코드 (0: 정상, 2: 직렬화/출력 실패)
    """
    if config.output == OUTPUT_DEFAULT:
        for line in format_verbose(changes):
            print(line)
        return EXIT_OK

    if config.output == OUTPUT_JSON:
        try:
            text = format_json(changes, config.json_only_errors, config.json_pretty)
            # 디코딩 불가 바이트(surrogateescape)가 섞인 경로는 UTF-8로 직렬화할 수 없음
            text.encode('utf-8')
            print(text)
        except (TypeError, ValueError):
            print('{"error": "Cannot serialize result"}')
            return EXIT_SERIALIZE_ERROR
        return EXIT_OK

    return EXIT_OK
