"""
목적:
- 서비스 요청 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/ews_search/requests/base.py
- src_py/ews_search/requests/find.py
"""

from .base import ServiceRequestBase
from .find import FindFolderRequest, FindItemRequest, FindRequest

__all__ = [
    "ServiceRequestBase",
    "FindRequest",
    "FindItemRequest",
    "FindFolderRequest",
]
