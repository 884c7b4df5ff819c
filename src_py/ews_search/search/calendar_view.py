"""
목적:
- 기간 기반 일정 검색 뷰(`CalendarView`)를 제공한다.

설명:
- 반복 일정을 기간 안에서 펼쳐 반환받기 위한 뷰이며, 페이지/그룹화/정렬을 지원하지 않는다.
- 최대 반환 개수는 선택 사항이고, 지정하지 않으면 속성을 기록하지 않는다.

디자인 패턴:
- 템플릿 메서드 구현(Concrete Template).

참조:
- src_py/ews_search/search/view_base.py
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ews_search.core.enums import ItemTraversal, ServiceObjectType
from ews_search.exceptions import ConfigurationError, ServiceValidationError
from ews_search.properties.property_set import PropertySet
from ews_search.search.grouping import Grouping
from ews_search.search.view_base import ViewBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter, as_utc

if TYPE_CHECKING:
    from ews_search.requests.base import ServiceRequestBase


class CalendarView(ViewBase):
    """일정 기간 검색 뷰."""

    def __init__(
        self,
        start_date: datetime,
        end_date: datetime,
        max_items_returned: int | None = None,
        traversal: ItemTraversal = ItemTraversal.SHALLOW,
        property_set: PropertySet | None = None,
    ) -> None:
        super().__init__(property_set)
        self.start_date = start_date
        self.end_date = end_date
        self.max_items_returned = max_items_returned
        self.traversal = traversal

    @property
    def max_items_returned(self) -> int | None:
        return self._max_items_returned

    @max_items_returned.setter
    def max_items_returned(self, value: int | None) -> None:
        if value is not None and value < 1:
            raise ConfigurationError(f"max_items_returned는 1 이상이어야 합니다: {value}")
        self._max_items_returned = value

    def validate(self, request: ServiceRequestBase) -> None:
        super().validate(request)
        if as_utc(self.end_date) < as_utc(self.start_date):
            raise ServiceValidationError(
                "end_date는 start_date 이후여야 합니다: "
                f"start_date={self.start_date.isoformat()}, end_date={self.end_date.isoformat()}"
            )

    def get_view_xml_element_name(self) -> str:
        return XmlElementNames.CALENDAR_VIEW

    def get_max_entries_returned(self) -> int | None:
        return self._max_items_returned

    def get_service_object_type(self) -> ServiceObjectType:
        return ServiceObjectType.ITEM

    def write_view_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        super().write_view_attributes_to_xml(writer)
        writer.write_attribute_value(XmlAttributeNames.START_DATE, self.start_date)
        writer.write_attribute_value(XmlAttributeNames.END_DATE, self.end_date)

    def write_search_settings_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None) -> None:
        return None

    def write_order_by_to_xml(self, writer: ServiceXmlWriter) -> None:
        return None

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        writer.write_attribute_value(XmlAttributeNames.TRAVERSAL, self.traversal)
