"""
목적:
- 검색 뷰 계층의 공개 진입점을 제공한다.

설명:
- 뷰 베이스와 아이템/폴더/일정 뷰, 그룹화/정렬 조건을 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/ews_search/search/view_base.py
"""

from .calendar_view import CalendarView
from .folder_view import FolderView
from .grouping import Grouping
from .item_view import ItemView
from .order_by import OrderByCollection
from .paging import PageWindow
from .view_base import ViewBase

__all__ = [
    "ViewBase",
    "ItemView",
    "FolderView",
    "CalendarView",
    "PageWindow",
    "Grouping",
    "OrderByCollection",
]
