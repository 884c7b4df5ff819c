"""
목적:
- EWS 검색 요청에서 사용하는 XML 요소/속성 이름 상수를 정의한다.

디자인 패턴:
- 상수 네임스페이스(Constant Namespace).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/properties/property_set.py
"""

from __future__ import annotations


class XmlElementNames:
    """XML 요소 이름 상수."""

    ENVELOPE = "Envelope"
    HEADER = "Header"
    BODY = "Body"
    REQUEST_SERVER_VERSION = "RequestServerVersion"
    FIND_ITEM = "FindItem"
    FIND_FOLDER = "FindFolder"
    ITEM_SHAPE = "ItemShape"
    FOLDER_SHAPE = "FolderShape"
    BASE_SHAPE = "BaseShape"
    BODY_TYPE = "BodyType"
    FILTER_HTML_CONTENT = "FilterHtmlContent"
    ADDITIONAL_PROPERTIES = "AdditionalProperties"
    FIELD_URI = "FieldURI"
    EXTENDED_FIELD_URI = "ExtendedFieldURI"
    INDEXED_PAGE_ITEM_VIEW = "IndexedPageItemView"
    INDEXED_PAGE_FOLDER_VIEW = "IndexedPageFolderView"
    CALENDAR_VIEW = "CalendarView"
    GROUP_BY = "GroupBy"
    AGGREGATE_ON = "AggregateOn"
    SORT_ORDER = "SortOrder"
    FIELD_ORDER = "FieldOrder"
    PARENT_FOLDER_IDS = "ParentFolderIds"
    DISTINGUISHED_FOLDER_ID = "DistinguishedFolderId"
    QUERY_STRING = "QueryString"


class XmlAttributeNames:
    """XML 속성 이름 상수."""

    VERSION = "Version"
    MAX_ENTRIES_RETURNED = "MaxEntriesReturned"
    OFFSET = "Offset"
    BASE_POINT = "BasePoint"
    START_DATE = "StartDate"
    END_DATE = "EndDate"
    TRAVERSAL = "Traversal"
    ORDER = "Order"
    AGGREGATE = "Aggregate"
    FIELD_URI = "FieldURI"
    ID = "Id"
    PROPERTY_TAG = "PropertyTag"
    PROPERTY_SET_ID = "PropertySetId"
    DISTINGUISHED_PROPERTY_SET_ID = "DistinguishedPropertySetId"
    PROPERTY_NAME = "PropertyName"
    PROPERTY_ID = "PropertyId"
    PROPERTY_TYPE = "PropertyType"
