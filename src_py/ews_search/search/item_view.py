"""
목적:
- 페이지 단위 아이템 검색 뷰(`IndexedPageItemView`)를 제공한다.

설명:
- 최대 반환 개수는 페이지 크기이며, 오프셋/기준점은 뷰 요소 속성으로 기록된다.
- 그룹화 조건은 뷰 요소 뒤에, 정렬 조건은 요청 파이프라인이 별도로 기록한다.

디자인 패턴:
- 템플릿 메서드 구현(Concrete Template) + 합성(Composition).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/search/paging.py
"""

from __future__ import annotations

from ews_search.core.enums import ItemTraversal, OffsetBasePoint, ServiceObjectType
from ews_search.properties.property_set import PropertySet
from ews_search.search.grouping import Grouping
from ews_search.search.order_by import OrderByCollection
from ews_search.search.paging import assign_page_setting, build_page_window
from ews_search.search.view_base import ViewBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter


class ItemView(ViewBase):
    """아이템 검색 뷰."""

    def __init__(
        self,
        page_size: int,
        offset: int = 0,
        offset_base_point: OffsetBasePoint = OffsetBasePoint.BEGINNING,
        traversal: ItemTraversal = ItemTraversal.SHALLOW,
        property_set: PropertySet | None = None,
    ) -> None:
        super().__init__(property_set)
        self._window = build_page_window(page_size, offset, offset_base_point)
        self.traversal = traversal
        self.order_by = OrderByCollection()

    @property
    def page_size(self) -> int:
        return self._window.page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        assign_page_setting(self._window, "page_size", value)

    @property
    def offset(self) -> int:
        return self._window.offset

    @offset.setter
    def offset(self, value: int) -> None:
        assign_page_setting(self._window, "offset", value)

    @property
    def offset_base_point(self) -> OffsetBasePoint:
        return self._window.offset_base_point

    @offset_base_point.setter
    def offset_base_point(self, value: OffsetBasePoint) -> None:
        assign_page_setting(self._window, "offset_base_point", value)

    def get_view_xml_element_name(self) -> str:
        return XmlElementNames.INDEXED_PAGE_ITEM_VIEW

    def get_max_entries_returned(self) -> int | None:
        return self._window.page_size

    def get_service_object_type(self) -> ServiceObjectType:
        return ServiceObjectType.ITEM

    def write_view_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        super().write_view_attributes_to_xml(writer)
        self._window.write_attributes_to_xml(writer)

    def write_search_settings_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None) -> None:
        if group_by is not None:
            group_by.write_to_xml(writer)

    def write_order_by_to_xml(self, writer: ServiceXmlWriter) -> None:
        self.order_by.write_to_xml(writer, XmlElementNames.SORT_ORDER)

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        writer.write_attribute_value(XmlAttributeNames.TRAVERSAL, self.traversal)
