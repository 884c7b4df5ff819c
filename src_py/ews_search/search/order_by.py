"""
목적:
- 아이템 검색의 정렬 조건 목록을 정의한다.

설명:
- 속성 정의당 하나의 정렬 방향만 허용하며, 추가 순서가 곧 정렬 우선순위이다.

디자인 패턴:
- 컬렉션 래퍼(Collection Wrapper).

참조:
- src_py/ews_search/search/item_view.py
"""

from __future__ import annotations

from typing import Iterator

from ews_search.core.enums import SortDirection, XmlNamespace
from ews_search.exceptions import ServiceLocalError
from ews_search.properties.definitions import PropertyDefinitionBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter


class OrderByCollection:
    """정렬 조건 컬렉션."""

    def __init__(self) -> None:
        self._pairs: list[tuple[PropertyDefinitionBase, SortDirection]] = []

    def add(self, definition: PropertyDefinitionBase, direction: SortDirection = SortDirection.ASCENDING) -> None:
        if definition in self:
            raise ServiceLocalError(f"정렬 조건에 이미 존재하는 속성입니다: {definition.name}")
        self._pairs.append((definition, direction))

    def remove(self, definition: PropertyDefinitionBase) -> bool:
        for index, (current, _) in enumerate(self._pairs):
            if current == definition:
                del self._pairs[index]
                return True
        return False

    def clear(self) -> None:
        self._pairs.clear()

    def __contains__(self, definition: object) -> bool:
        return any(current == definition for current, _ in self._pairs)

    def __iter__(self) -> Iterator[tuple[PropertyDefinitionBase, SortDirection]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def write_to_xml(self, writer: ServiceXmlWriter, xml_element_name: str) -> None:
        """정렬 조건이 있으면 `xml_element_name` 요소로 감싸 기록한다."""
        if not self._pairs:
            return

        with writer.element(XmlNamespace.MESSAGES, xml_element_name):
            for definition, direction in self._pairs:
                with writer.element(XmlNamespace.TYPES, XmlElementNames.FIELD_ORDER):
                    writer.write_attribute_value(XmlAttributeNames.ORDER, direction)
                    definition.write_to_xml(writer)
