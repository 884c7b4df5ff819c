"""
목적:
- EWS 검색 계층에서 공통으로 사용하는 열거형을 정의한다.

설명:
- 각 멤버의 값은 XML에 그대로 기록되는 와이어 문자열이다.
- `ExchangeVersion`은 선언 순서가 곧 버전 순서이다.

디자인 패턴:
- 열거형 값 객체(Enumerated Value Object).

참조:
- src_py/ews_search/xml/writer.py
- src_py/ews_search/properties/property_set.py
"""

from __future__ import annotations

from enum import Enum


class ExchangeVersion(str, Enum):
    """요청 대상 서버 버전."""

    EXCHANGE_2007_SP1 = "Exchange2007_SP1"
    EXCHANGE_2010 = "Exchange2010"
    EXCHANGE_2010_SP1 = "Exchange2010_SP1"
    EXCHANGE_2010_SP2 = "Exchange2010_SP2"
    EXCHANGE_2013 = "Exchange2013"

    @property
    def ordinal(self) -> int:
        return _VERSION_ORDER.index(self)

    def is_at_least(self, other: ExchangeVersion) -> bool:
        """이 버전이 `other` 이상인지 반환한다."""
        return self.ordinal >= other.ordinal


_VERSION_ORDER = list(ExchangeVersion)


class XmlNamespace(str, Enum):
    """EWS 메시지에 사용하는 XML 네임스페이스."""

    MESSAGES = "http://schemas.microsoft.com/exchange/services/2006/messages"
    TYPES = "http://schemas.microsoft.com/exchange/services/2006/types"
    SOAP = "http://schemas.xmlsoap.org/soap/envelope/"

    @property
    def prefix(self) -> str:
        return _NAMESPACE_PREFIXES[self]


_NAMESPACE_PREFIXES = {
    XmlNamespace.MESSAGES: "m",
    XmlNamespace.TYPES: "t",
    XmlNamespace.SOAP: "soap",
}


class ServiceObjectType(str, Enum):
    """뷰가 검색 대상으로 삼는 서비스 객체 종류."""

    FOLDER = "Folder"
    ITEM = "Item"
    CONVERSATION = "Conversation"


class BasePropertySet(str, Enum):
    """속성 집합의 기본 셰이프. 값은 `BaseShape` 요소 텍스트이다."""

    ID_ONLY = "IdOnly"
    FIRST_CLASS_PROPERTIES = "AllProperties"


class BodyType(str, Enum):
    HTML = "HTML"
    TEXT = "Text"
    BEST = "Best"


class ItemTraversal(str, Enum):
    SHALLOW = "Shallow"
    SOFT_DELETED = "SoftDeleted"
    ASSOCIATED = "Associated"


class FolderTraversal(str, Enum):
    SHALLOW = "Shallow"
    DEEP = "Deep"
    SOFT_DELETED = "SoftDeleted"


class OffsetBasePoint(str, Enum):
    BEGINNING = "Beginning"
    END = "End"


class SortDirection(str, Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


class AggregateType(str, Enum):
    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"
