"""
목적:
- 뷰를 사용하는 FindItem/FindFolder 요청을 제공한다.

설명:
- 검증 단계에서 뷰, 그룹화 조건, 상위 폴더 목록을 검사한다.
- 직렬화 순서: 속성 셰이프와 뷰(`view.write_to_xml`), 정렬 조건, 상위 폴더, 질의 문자열.
- 뷰의 `Traversal` 속성은 요청 요소에 기록된다.

디자인 패턴:
- 템플릿 메서드 구현(Concrete Template).

참조:
- src_py/ews_search/requests/base.py
- src_py/ews_search/search/view_base.py
"""

from __future__ import annotations

import logging
from typing import Iterable

from ews_search.config.models import ServiceConfig
from ews_search.core.enums import ExchangeVersion, ServiceObjectType, XmlNamespace
from ews_search.exceptions import ServiceValidationError, ServiceVersionError
from ews_search.requests.base import ServiceRequestBase
from ews_search.search.grouping import Grouping
from ews_search.search.view_base import ViewBase
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter

logger = logging.getLogger(__name__)


class FindRequest(ServiceRequestBase):
    """뷰 기반 검색 요청 베이스 클래스."""

    service_object_type: ServiceObjectType

    def __init__(
        self,
        view: ViewBase,
        parent_folder_ids: Iterable[str],
        service: ServiceConfig | None = None,
    ) -> None:
        super().__init__(service)
        self.view = view
        self.parent_folder_ids = list(parent_folder_ids)

    def get_group_by(self) -> Grouping | None:
        return None

    def validate(self) -> None:
        super().validate()

        if not self.parent_folder_ids:
            raise ServiceValidationError(f"{self.get_xml_element_name()} 요청에는 상위 폴더가 하나 이상 필요합니다")

        view_type = self.view.get_service_object_type()
        if view_type != self.service_object_type:
            raise ServiceValidationError(
                f"{self.get_xml_element_name()} 요청에 사용할 수 없는 뷰입니다: "
                f"view={type(self.view).__name__}, object_type={view_type.value}"
            )

        self.view.validate(self)
        logger.debug("view validated view=%s", type(self.view).__name__)

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        self.view.write_attributes_to_xml(writer)

    def write_elements_to_xml(self, writer: ServiceXmlWriter) -> None:
        self.view.write_to_xml(writer, self.get_group_by())
        self.view.write_order_by_to_xml(writer)

        with writer.element(XmlNamespace.MESSAGES, XmlElementNames.PARENT_FOLDER_IDS):
            for folder_id in self.parent_folder_ids:
                with writer.element(XmlNamespace.TYPES, XmlElementNames.DISTINGUISHED_FOLDER_ID):
                    writer.write_attribute_value(XmlAttributeNames.ID, folder_id)


class FindItemRequest(FindRequest):
    """아이템 검색 요청."""

    service_object_type = ServiceObjectType.ITEM

    def __init__(
        self,
        view: ViewBase,
        parent_folder_ids: Iterable[str],
        group_by: Grouping | None = None,
        query_string: str | None = None,
        service: ServiceConfig | None = None,
    ) -> None:
        super().__init__(view, parent_folder_ids, service)
        self.group_by = group_by
        self.query_string = query_string

    def get_xml_element_name(self) -> str:
        return XmlElementNames.FIND_ITEM

    def get_group_by(self) -> Grouping | None:
        return self.group_by

    def validate(self) -> None:
        super().validate()

        if self.group_by is not None:
            self.group_by.internal_validate()

        if self.query_string and not self.requested_server_version.is_at_least(ExchangeVersion.EXCHANGE_2010):
            raise ServiceVersionError(
                f"QueryString은 {ExchangeVersion.EXCHANGE_2010.value} 이상에서만 사용할 수 있습니다: "
                f"requested={self.requested_server_version.value}"
            )

    def write_elements_to_xml(self, writer: ServiceXmlWriter) -> None:
        super().write_elements_to_xml(writer)
        if self.query_string:
            writer.write_element_value(XmlNamespace.MESSAGES, XmlElementNames.QUERY_STRING, self.query_string)


class FindFolderRequest(FindRequest):
    """폴더 검색 요청."""

    service_object_type = ServiceObjectType.FOLDER

    def get_xml_element_name(self) -> str:
        return XmlElementNames.FIND_FOLDER
