"""
목적:
- 검색 결과에 적재할 필드를 식별하는 속성 정의 타입을 제공한다.

설명:
- `PropertyDefinition`은 스키마에 이름이 있는 필드(`FieldURI`)를 나타낸다.
- `ExtendedPropertyDefinition`은 MAPI 확장 속성(`ExtendedFieldURI`)을 나타낸다.
- 플래그와 최소 서버 버전은 요청 검증 단계에서 사용된다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/ews_search/properties/property_set.py
- src_py/ews_search/properties/schema.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntFlag

from ews_search.core.enums import ExchangeVersion, XmlNamespace
from ews_search.exceptions import ServiceValidationError
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter


class PropertyDefinitionFlags(IntFlag):
    """속성 정의 동작 플래그."""

    NONE = 0
    AUTO_INSTANTIATE_ON_READ = 1
    REUSE_INSTANCE = 2
    CAN_SET = 4
    CAN_UPDATE = 8
    CAN_DELETE = 16
    CAN_FIND = 32
    MUST_BE_EXPLICITLY_LOADED = 64


class MapiPropertyType(str, Enum):
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    LONG = "Long"
    DOUBLE = "Double"
    STRING = "String"
    SYSTEM_TIME = "SystemTime"
    BINARY = "Binary"
    STRING_ARRAY = "StringArray"


class PropertyDefinitionBase(ABC):
    """`AdditionalProperties`에 기록 가능한 속성 정의의 공통 베이스."""

    @property
    @abstractmethod
    def name(self) -> str:
        """오류 메시지에 사용할 표시 이름."""

    @property
    @abstractmethod
    def version(self) -> ExchangeVersion:
        """이 속성을 사용할 수 있는 최소 서버 버전."""

    @abstractmethod
    def has_flag(self, flag: PropertyDefinitionFlags) -> bool:
        """정의에 `flag`가 설정되어 있는지 반환한다."""

    @abstractmethod
    def write_to_xml(self, writer: ServiceXmlWriter) -> None:
        """속성 식별 요소를 기록한다."""


@dataclass(frozen=True, slots=True)
class PropertyDefinition(PropertyDefinitionBase):
    """스키마 필드 속성 정의. `uri`는 `item:Subject` 형식이다."""

    xml_element_name: str
    uri: str
    flags: PropertyDefinitionFlags = PropertyDefinitionFlags.NONE
    min_version: ExchangeVersion = ExchangeVersion.EXCHANGE_2007_SP1

    @property
    def name(self) -> str:
        return self.xml_element_name

    @property
    def version(self) -> ExchangeVersion:
        return self.min_version

    def has_flag(self, flag: PropertyDefinitionFlags) -> bool:
        return (self.flags & flag) == flag

    def write_to_xml(self, writer: ServiceXmlWriter) -> None:
        with writer.element(XmlNamespace.TYPES, XmlElementNames.FIELD_URI):
            writer.write_attribute_value(XmlAttributeNames.FIELD_URI, self.uri)


@dataclass(frozen=True, slots=True)
class ExtendedPropertyDefinition(PropertyDefinitionBase):
    """MAPI 확장 속성 정의.

    태그(`property_tag`) 또는 속성 집합 식별자(`property_set_id`/`distinguished_property_set_id`)와
    이름/번호 조합 중 하나로 식별된다. 확장 속성은 항상 검색 요청에 사용할 수 있다.
    """

    property_type: MapiPropertyType
    property_tag: int | None = None
    property_set_id: str | None = None
    distinguished_property_set_id: str | None = None
    property_name: str | None = None
    property_id: int | None = None

    def __post_init__(self) -> None:
        if self.property_tag is not None:
            if not 0 <= self.property_tag <= 0xFFFF:
                raise ServiceValidationError(
                    f"property_tag는 0x0000~0xFFFF 범위여야 합니다: {self.property_tag}"
                )
            if any(
                value is not None
                for value in (
                    self.property_set_id,
                    self.distinguished_property_set_id,
                    self.property_name,
                    self.property_id,
                )
            ):
                raise ServiceValidationError("property_tag는 다른 식별자와 함께 사용할 수 없습니다")
            return

        if (self.property_set_id is None) == (self.distinguished_property_set_id is None):
            raise ServiceValidationError(
                "property_set_id와 distinguished_property_set_id 중 정확히 하나가 필요합니다"
            )
        if (self.property_name is None) == (self.property_id is None):
            raise ServiceValidationError("property_name과 property_id 중 정확히 하나가 필요합니다")

    @property
    def name(self) -> str:
        if self.property_tag is not None:
            return f"0x{self.property_tag:04X}"
        set_id = self.property_set_id or self.distinguished_property_set_id
        key = self.property_name if self.property_name is not None else self.property_id
        return f"{set_id}:{key}"

    @property
    def version(self) -> ExchangeVersion:
        return ExchangeVersion.EXCHANGE_2007_SP1

    def has_flag(self, flag: PropertyDefinitionFlags) -> bool:
        return flag in (PropertyDefinitionFlags.NONE, PropertyDefinitionFlags.CAN_FIND)

    def write_to_xml(self, writer: ServiceXmlWriter) -> None:
        with writer.element(XmlNamespace.TYPES, XmlElementNames.EXTENDED_FIELD_URI):
            if self.property_tag is not None:
                writer.write_attribute_value(XmlAttributeNames.PROPERTY_TAG, f"0x{self.property_tag:04X}")
            writer.write_attribute_value(
                XmlAttributeNames.DISTINGUISHED_PROPERTY_SET_ID,
                self.distinguished_property_set_id,
            )
            writer.write_attribute_value(XmlAttributeNames.PROPERTY_SET_ID, self.property_set_id)
            writer.write_attribute_value(XmlAttributeNames.PROPERTY_NAME, self.property_name)
            writer.write_attribute_value(XmlAttributeNames.PROPERTY_ID, self.property_id)
            writer.write_attribute_value(XmlAttributeNames.PROPERTY_TYPE, self.property_type)
