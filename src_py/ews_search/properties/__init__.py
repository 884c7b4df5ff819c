"""
목적:
- 속성 정의/속성 집합 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/ews_search/properties/definitions.py
- src_py/ews_search/properties/schema.py
- src_py/ews_search/properties/property_set.py
"""

from .definitions import (
    ExtendedPropertyDefinition,
    MapiPropertyType,
    PropertyDefinition,
    PropertyDefinitionBase,
    PropertyDefinitionFlags,
)
from .property_set import PropertySet
from .schema import FolderSchema, ItemSchema

__all__ = [
    "PropertyDefinitionBase",
    "PropertyDefinition",
    "ExtendedPropertyDefinition",
    "PropertyDefinitionFlags",
    "MapiPropertyType",
    "PropertySet",
    "ItemSchema",
    "FolderSchema",
]
