"""
목적:
- XML 직렬화 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/ews_search/xml/names.py
- src_py/ews_search/xml/writer.py
"""

from .names import XmlAttributeNames, XmlElementNames
from .writer import ServiceXmlWriter

__all__ = ["ServiceXmlWriter", "XmlElementNames", "XmlAttributeNames"]
