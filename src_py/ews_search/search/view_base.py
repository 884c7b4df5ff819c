"""
목적:
- 검색 뷰(search view)의 추상 베이스 클래스를 제공한다.

설명:
- 뷰는 선택적 속성 집합과 선택적 최대 결과 개수를 가지며, 자신을 검색 요청 XML 조각으로 직렬화한다.
- 검증(`validate`)과 직렬화(`write_to_xml`)는 서로 독립적인 두 단계이며,
  검증 결과를 캐시하지 않는다. 호출 순서는 요청 파이프라인이 보장한다.
- 요소 이름, 객체 종류, 최대 개수, 검색 설정 기록은 하위 뷰가 제공한다.

디자인 패턴:
- 템플릿 메서드(Template Method).

참조:
- src_py/ews_search/search/item_view.py
- src_py/ews_search/search/folder_view.py
- src_py/ews_search/search/calendar_view.py
- src_py/ews_search/requests/find.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ews_search.core.enums import ServiceObjectType, XmlNamespace
from ews_search.properties.property_set import PropertySet
from ews_search.xml.names import XmlAttributeNames
from ews_search.xml.writer import ServiceXmlWriter

if TYPE_CHECKING:
    from ews_search.requests.base import ServiceRequestBase
    from ews_search.search.grouping import Grouping


class ViewBase(ABC):
    """검색 뷰 베이스 클래스.

    `property_set`이 `None`이면 직렬화 시점에 `PropertySet.FIRST_CLASS_PROPERTIES`가 사용된다.
    기본값은 뷰에 저장되지 않는다.
    """

    def __init__(self, property_set: PropertySet | None = None) -> None:
        self.property_set = property_set

    def get_property_set_or_default(self) -> PropertySet:
        """설정된 속성 집합 또는 프로세스 전역 기본값을 반환한다."""
        if self.property_set is None:
            return PropertySet.FIRST_CLASS_PROPERTIES
        return self.property_set

    def validate(self, request: ServiceRequestBase) -> None:
        """이 뷰를 요청에 사용할 수 있는지 검사한다. 뷰와 요청은 변경하지 않는다."""
        if self.property_set is not None:
            self.property_set.internal_validate()
            self.property_set.validate_for_request(request, summary_properties_only=True)

    def write_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None = None) -> None:
        """속성 셰이프, 뷰 요소, 검색 설정을 순서대로 기록한다.

        검증은 수행하지 않는다. 작성기 오류는 그대로 전파된다.
        """
        self.get_property_set_or_default().write_to_xml(writer, self.get_service_object_type())

        with writer.element(XmlNamespace.MESSAGES, self.get_view_xml_element_name()):
            self.write_view_attributes_to_xml(writer)

        self.write_search_settings_to_xml(writer, group_by)

    def write_view_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        """뷰 요소 자체의 속성을 기록한다. 하위 뷰는 확장 시 먼저 이 메서드를 호출한다."""
        max_entries_returned = self.get_max_entries_returned()
        if max_entries_returned is not None:
            writer.write_attribute_value(XmlAttributeNames.MAX_ENTRIES_RETURNED, max_entries_returned)

    @abstractmethod
    def write_search_settings_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None) -> None:
        """뷰 요소 뒤에 형제로 붙는 검색 설정(그룹화 등)을 기록한다."""

    @abstractmethod
    def write_order_by_to_xml(self, writer: ServiceXmlWriter) -> None:
        """정렬 조건을 기록한다."""

    @abstractmethod
    def get_view_xml_element_name(self) -> str:
        """뷰 요소 이름."""

    @abstractmethod
    def get_max_entries_returned(self) -> int | None:
        """검색이 반환할 최대 개수. `None`이면 제한 없음."""

    @abstractmethod
    def get_service_object_type(self) -> ServiceObjectType:
        """검색 대상 객체 종류."""

    @abstractmethod
    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        """요청 요소에 붙는 뷰 속성(예: `Traversal`)을 기록한다."""
