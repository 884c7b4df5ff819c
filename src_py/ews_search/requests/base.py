"""
목적:
- EWS 서비스 요청의 공통 베이스 클래스를 제공한다.

설명:
- 요청은 주입된 `ServiceConfig`의 서버 버전을 기준으로 검증된다.
- `to_xml`은 항상 검증을 먼저 수행한 뒤 SOAP 봉투를 직렬화한다.
- 전송/인증/재시도는 이 계층의 범위가 아니며, 결과는 요청 본문 바이트에서 끝난다.

디자인 패턴:
- 템플릿 메서드(Template Method).

참조:
- src_py/ews_search/requests/find.py
- src_py/ews_search/xml/writer.py
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ews_search.config.models import ServiceConfig
from ews_search.core.enums import ExchangeVersion, XmlNamespace
from ews_search.exceptions import ServiceVersionError
from ews_search.xml.names import XmlAttributeNames, XmlElementNames
from ews_search.xml.writer import ServiceXmlWriter

logger = logging.getLogger(__name__)


class ServiceRequestBase(ABC):
    """서비스 요청 베이스 클래스."""

    def __init__(self, service: ServiceConfig | None = None) -> None:
        self._service = service or ServiceConfig()

    @property
    def service(self) -> ServiceConfig:
        return self._service

    @property
    def requested_server_version(self) -> ExchangeVersion:
        return self._service.requested_server_version

    @abstractmethod
    def get_xml_element_name(self) -> str:
        """요청 요소 이름."""

    def get_minimum_required_server_version(self) -> ExchangeVersion:
        return ExchangeVersion.EXCHANGE_2007_SP1

    def validate(self) -> None:
        """요청 구성을 검사한다. 하위 요청은 확장 시 먼저 이 메서드를 호출한다."""
        minimum = self.get_minimum_required_server_version()
        if not self.requested_server_version.is_at_least(minimum):
            raise ServiceVersionError(
                f"{self.get_xml_element_name()} 요청은 {minimum.value} 이상에서만 사용할 수 있습니다: "
                f"requested={self.requested_server_version.value}"
            )

    def write_attributes_to_xml(self, writer: ServiceXmlWriter) -> None:
        return None

    @abstractmethod
    def write_elements_to_xml(self, writer: ServiceXmlWriter) -> None:
        """요청 요소의 하위 요소를 기록한다."""

    def write_to_xml(self, writer: ServiceXmlWriter) -> None:
        with writer.element(XmlNamespace.MESSAGES, self.get_xml_element_name()):
            self.write_attributes_to_xml(writer)
            self.write_elements_to_xml(writer)

    def to_xml(self) -> bytes:
        """요청을 검증한 뒤 SOAP 봉투 전체를 직렬화한다."""
        element_name = self.get_xml_element_name()
        self.validate()
        logger.debug(
            "request validated element=%s version=%s",
            element_name,
            self.requested_server_version.value,
        )

        writer = ServiceXmlWriter.for_service(self._service)
        with writer.element(XmlNamespace.SOAP, XmlElementNames.ENVELOPE):
            with writer.element(XmlNamespace.SOAP, XmlElementNames.HEADER):
                with writer.element(XmlNamespace.TYPES, XmlElementNames.REQUEST_SERVER_VERSION):
                    writer.write_attribute_value(XmlAttributeNames.VERSION, self.requested_server_version)
            with writer.element(XmlNamespace.SOAP, XmlElementNames.BODY):
                self.write_to_xml(writer)

        payload = writer.to_bytes()
        logger.debug("request serialized element=%s bytes=%d", element_name, len(payload))
        return payload
