"""
목적:
- 검색 결과 객체에 적재할 필드 집합(속성 집합)을 정의한다.

설명:
- 기본 셰이프(`IdOnly`/`AllProperties`)와 추가 속성 목록, 본문 형식 옵션을 보관한다.
- 자체 일관성 검사(`internal_validate`)와 요청 호환성 검사(`validate_for_request`)를 제공한다.
- 프로세스 전역 기본값 `FIRST_CLASS_PROPERTIES`, `ID_ONLY`는 읽기 전용 싱글턴이다.

디자인 패턴:
- 값 객체(Value Object) + 읽기 전용 싱글턴(Read-only Singleton).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/properties/definitions.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Iterable, Iterator

from ews_search.core.enums import BasePropertySet, BodyType, ExchangeVersion, ServiceObjectType, XmlNamespace
from ews_search.exceptions import (
    PropertySetReadOnlyError,
    ServiceValidationError,
    ServiceVersionError,
    ServiceXmlSerializationError,
)
from ews_search.properties.definitions import PropertyDefinitionBase, PropertyDefinitionFlags
from ews_search.xml.names import XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter

if TYPE_CHECKING:
    from ews_search.requests.base import ServiceRequestBase

_SHAPE_ELEMENT_NAMES = {
    ServiceObjectType.ITEM: XmlElementNames.ITEM_SHAPE,
    ServiceObjectType.FOLDER: XmlElementNames.FOLDER_SHAPE,
}


class PropertySet:
    """검색 결과에 적재할 속성 집합."""

    FIRST_CLASS_PROPERTIES: ClassVar[PropertySet]
    ID_ONLY: ClassVar[PropertySet]

    def __init__(
        self,
        base_property_set: BasePropertySet = BasePropertySet.ID_ONLY,
        additional_properties: Iterable[PropertyDefinitionBase] | None = None,
    ) -> None:
        self._base_property_set = base_property_set
        self._additional_properties: list[PropertyDefinitionBase] = []
        self._requested_body_type: BodyType | None = None
        self._filter_html_content: bool | None = None
        self._is_read_only = False
        if additional_properties is not None:
            self.add_range(additional_properties)

    @classmethod
    def _create_read_only(cls, base_property_set: BasePropertySet) -> PropertySet:
        property_set = cls(base_property_set)
        property_set._is_read_only = True
        return property_set

    @property
    def is_read_only(self) -> bool:
        return self._is_read_only

    @property
    def base_property_set(self) -> BasePropertySet:
        return self._base_property_set

    @base_property_set.setter
    def base_property_set(self, value: BasePropertySet) -> None:
        self._throw_if_read_only()
        self._base_property_set = value

    @property
    def requested_body_type(self) -> BodyType | None:
        return self._requested_body_type

    @requested_body_type.setter
    def requested_body_type(self, value: BodyType | None) -> None:
        self._throw_if_read_only()
        self._requested_body_type = value

    @property
    def filter_html_content(self) -> bool | None:
        return self._filter_html_content

    @filter_html_content.setter
    def filter_html_content(self, value: bool | None) -> None:
        self._throw_if_read_only()
        self._filter_html_content = value

    def add(self, definition: PropertyDefinitionBase) -> None:
        """추가 속성을 등록한다. 이미 있으면 무시한다."""
        self._throw_if_read_only()
        if definition not in self._additional_properties:
            self._additional_properties.append(definition)

    def add_range(self, definitions: Iterable[PropertyDefinitionBase]) -> None:
        for definition in definitions:
            self.add(definition)

    def remove(self, definition: PropertyDefinitionBase) -> bool:
        """추가 속성을 제거하고, 제거 여부를 반환한다."""
        self._throw_if_read_only()
        if definition in self._additional_properties:
            self._additional_properties.remove(definition)
            return True
        return False

    def clear(self) -> None:
        self._throw_if_read_only()
        self._additional_properties.clear()

    def __contains__(self, definition: object) -> bool:
        return definition in self._additional_properties

    def __iter__(self) -> Iterator[PropertyDefinitionBase]:
        return iter(list(self._additional_properties))

    def __len__(self) -> int:
        return len(self._additional_properties)

    def __repr__(self) -> str:
        names = [getattr(item, "name", repr(item)) for item in self._additional_properties]
        return f"PropertySet(base={self._base_property_set.value}, additional={names})"

    def internal_validate(self) -> None:
        """속성 집합 자체의 일관성을 검사한다."""
        for index, definition in enumerate(self._additional_properties):
            if not isinstance(definition, PropertyDefinitionBase):
                raise ServiceValidationError(
                    f"추가 속성 {index}번 항목이 속성 정의가 아닙니다: {definition!r}"
                )

    def validate_for_request(self, request: ServiceRequestBase, summary_properties_only: bool) -> None:
        """요청의 서버 버전/요약 전용 모드와 호환되는지 검사한다."""
        version = request.requested_server_version
        for definition in self._additional_properties:
            if not isinstance(definition, PropertyDefinitionBase):
                continue

            if not version.is_at_least(definition.version):
                raise ServiceVersionError(
                    f"속성 {definition.name}은(는) {definition.version.value} 이상에서만 사용할 수 있습니다: "
                    f"requested={version.value}"
                )

            if summary_properties_only and not definition.has_flag(PropertyDefinitionFlags.CAN_FIND):
                raise ServiceValidationError(
                    f"속성 {definition.name}은(는) {request.get_xml_element_name()} 요청에 사용할 수 없습니다"
                )

        if self._filter_html_content is not None and not version.is_at_least(ExchangeVersion.EXCHANGE_2010):
            raise ServiceVersionError(
                f"FilterHtmlContent는 {ExchangeVersion.EXCHANGE_2010.value} 이상에서만 사용할 수 있습니다: "
                f"requested={version.value}"
            )

    def write_to_xml(self, writer: ServiceXmlWriter, service_object_type: ServiceObjectType) -> None:
        """`ItemShape`/`FolderShape` 블록을 기록한다."""
        element_name = _SHAPE_ELEMENT_NAMES.get(service_object_type)
        if element_name is None:
            raise ServiceXmlSerializationError(
                f"속성 집합을 기록할 수 없는 객체 종류입니다: {service_object_type.value}"
            )

        with writer.element(XmlNamespace.MESSAGES, element_name):
            writer.write_element_value(XmlNamespace.TYPES, XmlElementNames.BASE_SHAPE, self._base_property_set)

            if service_object_type == ServiceObjectType.ITEM:
                if self._requested_body_type is not None:
                    writer.write_element_value(
                        XmlNamespace.TYPES,
                        XmlElementNames.BODY_TYPE,
                        self._requested_body_type,
                    )
                if self._filter_html_content is not None:
                    writer.write_element_value(
                        XmlNamespace.TYPES,
                        XmlElementNames.FILTER_HTML_CONTENT,
                        self._filter_html_content,
                    )

            if self._additional_properties:
                with writer.element(XmlNamespace.TYPES, XmlElementNames.ADDITIONAL_PROPERTIES):
                    for definition in self._additional_properties:
                        if not isinstance(definition, PropertyDefinitionBase):
                            raise ServiceXmlSerializationError(
                                f"속성 정의가 아닌 항목은 기록할 수 없습니다: {definition!r}"
                            )
                        definition.write_to_xml(writer)

    def _throw_if_read_only(self) -> None:
        if self._is_read_only:
            raise PropertySetReadOnlyError("읽기 전용 속성 집합은 수정할 수 없습니다")


PropertySet.FIRST_CLASS_PROPERTIES = PropertySet._create_read_only(BasePropertySet.FIRST_CLASS_PROPERTIES)
PropertySet.ID_ONLY = PropertySet._create_read_only(BasePropertySet.ID_ONLY)
