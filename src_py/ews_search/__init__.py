"""
목적:
- EWS Search Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 검색 뷰(`ItemView`, `FolderView`, `CalendarView`)와
  이를 사용하는 요청(`FindItemRequest`, `FindFolderRequest`)이다.
- 설정/속성 집합/XML 작성기/예외를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/requests/find.py
"""

from .config.models import ServiceConfig, XmlWriterConfig
from .core.enums import (
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
from .exceptions import (
    ConfigurationError,
    EwsSearchError,
    PropertySetReadOnlyError,
    ServiceLocalError,
    ServiceValidationError,
    ServiceVersionError,
    ServiceXmlSerializationError,
)
from .properties import (
    ExtendedPropertyDefinition,
    FolderSchema,
    ItemSchema,
    MapiPropertyType,
    PropertyDefinition,
    PropertyDefinitionBase,
    PropertyDefinitionFlags,
    PropertySet,
)
from .requests import FindFolderRequest, FindItemRequest, ServiceRequestBase
from .search import (
    CalendarView,
    FolderView,
    Grouping,
    ItemView,
    OrderByCollection,
    PageWindow,
    ViewBase,
)
from .version import __version__
from .xml import ServiceXmlWriter

__all__ = [
    "__version__",
    "ViewBase",
    "ItemView",
    "FolderView",
    "CalendarView",
    "PageWindow",
    "Grouping",
    "OrderByCollection",
    "ServiceRequestBase",
    "FindItemRequest",
    "FindFolderRequest",
    "ServiceConfig",
    "XmlWriterConfig",
    "ServiceXmlWriter",
    "PropertySet",
    "PropertyDefinitionBase",
    "PropertyDefinition",
    "ExtendedPropertyDefinition",
    "PropertyDefinitionFlags",
    "MapiPropertyType",
    "ItemSchema",
    "FolderSchema",
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
    "EwsSearchError",
    "ConfigurationError",
    "ServiceLocalError",
    "ServiceValidationError",
    "ServiceVersionError",
    "ServiceXmlSerializationError",
    "PropertySetReadOnlyError",
]
