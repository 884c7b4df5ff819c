"""
목적:
- 페이지 단위 뷰가 공유하는 페이지 창(page window) 값 객체를 정의한다.

설명:
- 아이템/폴더 뷰가 상속 대신 합성으로 페이지 크기와 오프셋 규칙을 공유한다.
- 입력 검증 실패는 뷰 계층에서 `ConfigurationError`로 변환된다.

디자인 패턴:
- 값 객체(Value Object) + 합성(Composition).

참조:
- src_py/ews_search/search/item_view.py
- src_py/ews_search/search/folder_view.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ews_search.core.enums import OffsetBasePoint
from ews_search.exceptions import ConfigurationError
from ews_search.xml.names import XmlAttributeNames
from ews_search.xml.writer import ServiceXmlWriter


class PageWindow(BaseModel):
    """페이지 크기/오프셋 설정 모델."""

    model_config = ConfigDict(validate_assignment=True)

    page_size: int = Field(ge=1)
    offset: int = Field(default=0, ge=0)
    offset_base_point: OffsetBasePoint = Field(default=OffsetBasePoint.BEGINNING)

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        writer.write_attribute_value(XmlAttributeNames.OFFSET, self.offset)
        writer.write_attribute_value(XmlAttributeNames.BASE_POINT, self.offset_base_point)


def build_page_window(page_size: int, offset: int, offset_base_point: OffsetBasePoint) -> PageWindow:
    """페이지 창을 생성한다."""
    try:
        return PageWindow(page_size=page_size, offset=offset, offset_base_point=offset_base_point)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def assign_page_setting(window: PageWindow, name: str, value: object) -> None:
    """페이지 창 필드를 검증 후 갱신한다."""
    try:
        setattr(window, name, value)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
