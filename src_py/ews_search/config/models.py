"""
목적:
- EWS Search 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 요청 대상 서버 버전과 XML 출력 형식을 단일 모델로 관리한다.
- 라이브러리는 환경 변수나 설정 파일을 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/ews_search/requests/base.py
- src_py/ews_search/xml/writer.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ews_search.core.enums import ExchangeVersion


class XmlWriterConfig(BaseModel):
    """XML 작성기 출력 설정 모델."""

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", min_length=1)
    pretty_print: bool = Field(default=False)
    xml_declaration: bool = Field(default=False)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        try:
            "".encode(value)
        except LookupError as exc:
            raise ValueError(f"지원하지 않는 인코딩입니다: {value}") from exc
        return value


class ServiceConfig(BaseModel):
    """서비스 요청 설정 모델."""

    model_config = ConfigDict(frozen=True)

    requested_server_version: ExchangeVersion = Field(default=ExchangeVersion.EXCHANGE_2013)
    writer: XmlWriterConfig = Field(default_factory=XmlWriterConfig)
