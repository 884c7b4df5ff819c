"""
목적:
- 페이지 단위 폴더 검색 뷰(`IndexedPageFolderView`)를 제공한다.

설명:
- 폴더 검색은 정렬 조건을 지원하지 않으므로 정렬 기록은 비어 있다.

디자인 패턴:
- 템플릿 메서드 구현(Concrete Template) + 합성(Composition).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/search/paging.py
"""

from __future__ import annotations

from ews_search.core.enums import FolderTraversal, OffsetBasePoint, ServiceObjectType
from ews_search.properties.property_set import PropertySet
from ews_search.search.grouping import Grouping
from ews_search.search.paging import assign_page_setting, build_page_window
from ews_search.search.view_base import ViewBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter


class FolderView(ViewBase):
    """폴더 검색 뷰."""

    def __init__(
        self,
        page_size: int,
        offset: int = 0,
        offset_base_point: OffsetBasePoint = OffsetBasePoint.BEGINNING,
        traversal: FolderTraversal = FolderTraversal.SHALLOW,
        property_set: PropertySet | None = None,
    ) -> None:
        super().__init__(property_set)
        self._window = build_page_window(page_size, offset, offset_base_point)
        self.traversal = traversal

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
        return XmlElementNames.INDEXED_PAGE_FOLDER_VIEW

    def get_max_entries_returned(self) -> int | None:
        return self._window.page_size

    def get_service_object_type(self) -> ServiceObjectType:
        return ServiceObjectType.FOLDER

    def write_view_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        super().write_view_attributes_to_xml(writer)
        self._window.write_attributes_to_xml(writer)

    def write_search_settings_to_xml(self, writer: ServiceXmlWriter, group_by: Grouping | None) -> None:
        if group_by is not None:
            group_by.write_to_xml(writer)

    def write_order_by_to_xml(self, writer: ServiceXmlWriter) -> None:
        # FindFolder에는 SortOrder가 없다.
        return None

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        writer.write_attribute_value(XmlAttributeNames.TRAVERSAL, self.traversal)
