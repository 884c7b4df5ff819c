"""
목적:
- 루트 `.env`를 읽어 FindItem/FindFolder 요청 XML을 출력하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일을 직접 읽지 않는다.
- 이 스크립트는 뷰 구성 -> 요청 검증 -> SOAP 봉투 직렬화 흐름을 데모한다.
- 전송은 하지 않으며, 결과 XML을 표준 출력에 기록한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/ews_search/config/models.py
- src_py/ews_search/requests/find.py
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from ews_search import (
    BasePropertySet,
    ExchangeVersion,
    FindFolderRequest,
    FindItemRequest,
    FolderSchema,
    FolderView,
    ItemSchema,
    ItemView,
    PropertySet,
    ServiceConfig,
    SortDirection,
    XmlWriterConfig,
)

ITEM_PROPERTIES = {
    name.lower(): value for name, value in vars(ItemSchema).items() if not name.startswith("_")
}
FOLDER_PROPERTIES = {
    name.lower(): value for name, value in vars(FolderSchema).items() if not name.startswith("_")
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="EWS Search 요청 렌더러")
    parser.add_argument("kind", choices=["item", "folder"], help="검색 대상 종류")
    parser.add_argument("--folder", action="append", default=[], help="상위 폴더 이름 (반복 가능, 기본: inbox)")
    parser.add_argument("--page-size", type=int, default=50, help="페이지 크기")
    parser.add_argument("--offset", type=int, default=0, help="페이지 오프셋")
    parser.add_argument(
        "--property",
        action="append",
        default=[],
        help="추가 속성 이름 (예: subject, date_time_received)",
    )
    parser.add_argument("--id-only", action="store_true", help="기본 셰이프를 IdOnly로 지정")
    parser.add_argument("--sort", default=None, help="정렬 속성 이름 (아이템 전용)")
    parser.add_argument("--descending", action="store_true", help="내림차순 정렬")
    parser.add_argument("--query", default=None, help="AQS 질의 문자열 (아이템 전용)")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="루트 기준 환경 파일 경로 (기본: .env, 없으면 무시)",
    )
    parser.add_argument("--verbose", action="store_true", help="디버그 로그 출력")
    return parser.parse_args()


def load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ[key] = value


def parse_bool_env(key: str, default: str) -> bool:
    raw = os.environ.get(key, default).strip().lower()
    if raw in {"1", "true", "yes", "y"}:
        return True
    if raw in {"0", "false", "no", "n"}:
        return False
    raise RuntimeError(f"불리언 환경 변수 형식이 잘못되었습니다: {key}={raw}")


def build_config() -> ServiceConfig:
    version = os.environ.get("EWS_REQUESTED_SERVER_VERSION", ExchangeVersion.EXCHANGE_2013.value)
    return ServiceConfig(
        requested_server_version=ExchangeVersion(version),
        writer=XmlWriterConfig(
            encoding=os.environ.get("EWS_XML_ENCODING", "utf-8"),
            pretty_print=parse_bool_env("EWS_XML_PRETTY_PRINT", "true"),
            xml_declaration=parse_bool_env("EWS_XML_DECLARATION", "true"),
        ),
    )


def resolve_property(name: str, catalog: dict[str, object]):
    key = name.strip().lower()
    if key not in catalog:
        known = ", ".join(sorted(catalog))
        raise RuntimeError(f"알 수 없는 속성 이름입니다: {name} (사용 가능: {known})")
    return catalog[key]


def build_request(args: argparse.Namespace, config: ServiceConfig):
    catalog = ITEM_PROPERTIES if args.kind == "item" else FOLDER_PROPERTIES
    base = BasePropertySet.ID_ONLY if args.id_only else BasePropertySet.FIRST_CLASS_PROPERTIES

    property_set = None
    if args.property or args.id_only:
        property_set = PropertySet(base, [resolve_property(name, catalog) for name in args.property])

    folders = args.folder or ["inbox"]

    if args.kind == "folder":
        view = FolderView(page_size=args.page_size, offset=args.offset, property_set=property_set)
        return FindFolderRequest(view, folders, service=config)

    view = ItemView(page_size=args.page_size, offset=args.offset, property_set=property_set)
    if args.sort:
        direction = SortDirection.DESCENDING if args.descending else SortDirection.ASCENDING
        view.order_by.add(resolve_property(args.sort, catalog), direction)
    return FindItemRequest(view, folders, query_string=args.query, service=config)


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    repo_root = Path(__file__).resolve().parents[1]
    load_env_file(repo_root / args.env_file)

    config = build_config()
    request = build_request(args, config)

    sys.stdout.write(request.to_xml().decode(config.writer.encoding))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
