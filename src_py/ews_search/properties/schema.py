"""
목적:
- 아이템/폴더 검색에서 자주 쓰는 스키마 속성 정의를 제공한다.

설명:
- `CAN_FIND`가 없는 속성(본문, 첨부 등)은 요약 전용 모드 검증에서 거절된다.
- `min_version`보다 낮은 서버 버전 요청에서는 버전 오류가 발생한다.

디자인 패턴:
- 상수 네임스페이스(Constant Namespace).

참조:
- src_py/ews_search/properties/definitions.py
"""

from __future__ import annotations

from ews_search.core.enums import ExchangeVersion
from ews_search.properties.definitions import PropertyDefinition
from ews_search.properties.definitions import PropertyDefinitionFlags as F

_FIND = F.CAN_FIND
_SETTABLE = F.CAN_SET | F.CAN_UPDATE | F.CAN_DELETE
_EXPLICIT = F.MUST_BE_EXPLICITLY_LOADED


class ItemSchema:
    """아이템 속성 정의."""

    ID = PropertyDefinition("ItemId", "item:ItemId", F.CAN_FIND)
    PARENT_FOLDER_ID = PropertyDefinition("ParentFolderId", "item:ParentFolderId", F.CAN_FIND)
    ITEM_CLASS = PropertyDefinition("ItemClass", "item:ItemClass", _SETTABLE | _FIND)
    SUBJECT = PropertyDefinition("Subject", "item:Subject", _SETTABLE | _FIND)
    DATE_TIME_RECEIVED = PropertyDefinition("DateTimeReceived", "item:DateTimeReceived", _FIND)
    DATE_TIME_SENT = PropertyDefinition("DateTimeSent", "item:DateTimeSent", _FIND)
    SIZE = PropertyDefinition("Size", "item:Size", _FIND)
    IMPORTANCE = PropertyDefinition("Importance", "item:Importance", _SETTABLE | _FIND)
    CATEGORIES = PropertyDefinition("Categories", "item:Categories", _SETTABLE | _FIND)
    HAS_ATTACHMENTS = PropertyDefinition("HasAttachments", "item:HasAttachments", _FIND)
    IS_DRAFT = PropertyDefinition("IsDraft", "item:IsDraft", _FIND)
    DISPLAY_TO = PropertyDefinition("DisplayTo", "item:DisplayTo", _FIND)
    BODY = PropertyDefinition("Body", "item:Body", _SETTABLE)
    ATTACHMENTS = PropertyDefinition("Attachments", "item:Attachments", F.AUTO_INSTANTIATE_ON_READ)
    MIME_CONTENT = PropertyDefinition("MimeContent", "item:MimeContent", _SETTABLE | _EXPLICIT)
    UNIQUE_BODY = PropertyDefinition(
        "UniqueBody",
        "item:UniqueBody",
        _EXPLICIT,
        ExchangeVersion.EXCHANGE_2010,
    )
    CONVERSATION_ID = PropertyDefinition(
        "ConversationId",
        "item:ConversationId",
        _FIND,
        ExchangeVersion.EXCHANGE_2010,
    )
    FLAG = PropertyDefinition("Flag", "item:Flag", _SETTABLE | _FIND, ExchangeVersion.EXCHANGE_2013)


class FolderSchema:
    """폴더 속성 정의."""

    ID = PropertyDefinition("FolderId", "folder:FolderId", F.CAN_FIND)
    PARENT_FOLDER_ID = PropertyDefinition("ParentFolderId", "folder:ParentFolderId", F.CAN_FIND)
    DISPLAY_NAME = PropertyDefinition("DisplayName", "folder:DisplayName", _SETTABLE | _FIND)
    FOLDER_CLASS = PropertyDefinition("FolderClass", "folder:FolderClass", _SETTABLE | _FIND)
    TOTAL_COUNT = PropertyDefinition("TotalCount", "folder:TotalCount", _FIND)
    CHILD_FOLDER_COUNT = PropertyDefinition("ChildFolderCount", "folder:ChildFolderCount", _FIND)
    UNREAD_COUNT = PropertyDefinition("UnreadCount", "folder:UnreadCount", _FIND)
    EFFECTIVE_RIGHTS = PropertyDefinition("EffectiveRights", "folder:EffectiveRights", _FIND)
    PERMISSIONS = PropertyDefinition("PermissionSet", "folder:PermissionSet", _SETTABLE | _EXPLICIT)
    WELL_KNOWN_FOLDER_NAME = PropertyDefinition(
        "WellKnownFolderName",
        "folder:DistinguishedFolderId",
        _FIND,
        ExchangeVersion.EXCHANGE_2013,
    )
