"""
목적:
- 공통 열거형 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/ews_search/core/enums.py
"""

from .enums import (
    AggregateType,
    BasePropertySet,
    BodyType,
    ExchangeVersion,
    FolderTraversal,
    ItemTraversal,
    OffsetBasePoint,
    ServiceObjectType,
    SortDirection,
    XmlNamespace,
)

__all__ = [
    "ExchangeVersion",
    "XmlNamespace",
    "ServiceObjectType",
    "BasePropertySet",
    "BodyType",
    "ItemTraversal",
    "FolderTraversal",
    "OffsetBasePoint",
    "SortDirection",
    "AggregateType",
]
