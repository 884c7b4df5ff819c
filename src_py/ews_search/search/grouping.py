"""
목적:
- 아이템 검색 결과의 서버 측 그룹화 조건을 정의한다.

설명:
- 그룹 기준 속성과 집계 기준 속성은 모두 필수이며, `internal_validate`에서 검사한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/ews_search/search/item_view.py
- src_py/ews_search/requests/find.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ews_search.core.enums import AggregateType, SortDirection, XmlNamespace
from ews_search.exceptions import ServiceValidationError, ServiceXmlSerializationError
from ews_search.properties.definitions import PropertyDefinitionBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter


class Grouping(BaseModel):
    """검색 결과 그룹화 조건 모델."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    group_on: PropertyDefinitionBase | None = Field(default=None)
    aggregate_on: PropertyDefinitionBase | None = Field(default=None)
    sort_direction: SortDirection = Field(default=SortDirection.ASCENDING)
    aggregate_type: AggregateType = Field(default=AggregateType.MINIMUM)

    def internal_validate(self) -> None:
        if self.group_on is None:
            raise ServiceValidationError("Grouping.group_on은 필수입니다")
        if self.aggregate_on is None:
            raise ServiceValidationError("Grouping.aggregate_on은 필수입니다")

    def write_to_xml(self, writer: ServiceXmlWriter) -> None:
        """`GroupBy` 요소를 기록한다."""
        if self.group_on is None or self.aggregate_on is None:
            raise ServiceXmlSerializationError(
                "그룹 기준/집계 기준 속성이 없는 Grouping은 기록할 수 없습니다: "
                f"group_on={self.group_on is not None}, aggregate_on={self.aggregate_on is not None}"
            )

        with writer.element(XmlNamespace.MESSAGES, XmlElementNames.GROUP_BY):
            writer.write_attribute_value(XmlAttributeNames.ORDER, self.sort_direction)
            self.group_on.write_to_xml(writer)

            with writer.element(XmlNamespace.TYPES, XmlElementNames.AGGREGATE_ON):
                writer.write_attribute_value(XmlAttributeNames.AGGREGATE, self.aggregate_type)
                self.aggregate_on.write_to_xml(writer)
