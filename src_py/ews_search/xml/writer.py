"""
목적:
- EWS 요청 직렬화에 사용하는 XML 작성기를 제공한다.

설명:
- lxml `etree` 요소 트리를 스택 방식으로 쌓아 네임스페이스 한정 요소/속성을 기록한다.
- 스트림 작성기와 같은 규칙을 강제한다: 속성은 자식 요소/텍스트보다 먼저 기록되어야 하고,
  열린 요소가 남아 있으면 결과를 내보낼 수 없다.
- lxml의 `ValueError`/`TypeError`는 `ServiceXmlSerializationError`로 변환한다.

디자인 패턴:
- 어댑터(Adapter) + 스코프 자원(Scoped Resource).

참조:
- src_py/ews_search/search/view_base.py
- src_py/ews_search/requests/base.py
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import UTC, datetime
from enum import Enum
from typing import Iterator

import lxml.etree as etree

from ews_search.config.models import ServiceConfig, XmlWriterConfig
from ews_search.core.enums import ExchangeVersion, XmlNamespace
from ews_search.exceptions import ServiceXmlSerializationError

_NSMAP = {namespace.prefix: namespace.value for namespace in XmlNamespace}


def as_utc(value: datetime) -> datetime:
    """시간대가 없는 값은 UTC로 간주하고, 모든 값을 UTC로 변환한다."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ServiceXmlWriter:
    """EWS 요청용 XML 작성기."""

    def __init__(
        self,
        requested_server_version: ExchangeVersion = ExchangeVersion.EXCHANGE_2013,
        config: XmlWriterConfig | None = None,
    ) -> None:
        self._requested_server_version = requested_server_version
        self._config = config or XmlWriterConfig()
        self._roots: list[etree._Element] = []
        self._stack: list[etree._Element] = []
        self._content_started: list[bool] = []

    @classmethod
    def for_service(cls, service: ServiceConfig) -> ServiceXmlWriter:
        """서비스 설정으로 작성기를 생성한다."""
        return cls(service.requested_server_version, service.writer)

    @property
    def requested_server_version(self) -> ExchangeVersion:
        return self._requested_server_version

    @property
    def depth(self) -> int:
        """현재 열린 요소 개수를 반환한다."""
        return len(self._stack)

    def write_start_element(self, namespace: XmlNamespace, local_name: str) -> None:
        """요소를 연다. 열린 요소가 있으면 그 자식으로 추가된다."""
        try:
            qname = etree.QName(namespace.value, local_name)
            if self._stack:
                element = etree.SubElement(self._stack[-1], qname)
                self._content_started[-1] = True
            else:
                element = etree.Element(qname, nsmap=_NSMAP)
                self._roots.append(element)
        except (ValueError, TypeError) as exc:
            raise ServiceXmlSerializationError(
                f"XML 요소를 열 수 없습니다: name={local_name}, error={exc}"
            ) from exc

        self._stack.append(element)
        self._content_started.append(False)

    def write_end_element(self) -> None:
        """가장 최근에 연 요소를 닫는다."""
        if not self._stack:
            raise ServiceXmlSerializationError("닫을 XML 요소가 없습니다")
        self._stack.pop()
        self._content_started.pop()

    @contextmanager
    def element(self, namespace: XmlNamespace, local_name: str) -> Iterator[None]:
        """요소를 열고, 블록을 벗어날 때 예외 여부와 무관하게 닫는다.

        블록 안에서 닫히지 않은 하위 요소가 있으면 함께 닫아 스택 깊이를 진입 전으로 되돌린다.
        """
        depth = self.depth
        self.write_start_element(namespace, local_name)
        try:
            yield
        finally:
            while self.depth > depth:
                self.write_end_element()

    def write_attribute_value(self, local_name: str, value: object) -> None:
        """현재 요소에 속성을 기록한다. 값이 없거나 빈 문자열이면 기록하지 않는다."""
        text = self._to_xml_string(local_name, value)
        if not text:
            return

        if not self._stack:
            raise ServiceXmlSerializationError(f"속성을 기록할 열린 요소가 없습니다: name={local_name}")
        if self._content_started[-1]:
            raise ServiceXmlSerializationError(
                f"속성은 자식 요소/텍스트보다 먼저 기록되어야 합니다: name={local_name}"
            )

        try:
            self._stack[-1].set(local_name, text)
        except (ValueError, TypeError) as exc:
            raise ServiceXmlSerializationError(
                f"XML 속성을 기록할 수 없습니다: name={local_name}, error={exc}"
            ) from exc

    def write_value(self, value: object, name: str = "") -> None:
        """현재 요소에 텍스트를 기록한다."""
        text = self._to_xml_string(name, value)
        if text is None:
            return
        if not self._stack:
            raise ServiceXmlSerializationError(f"텍스트를 기록할 열린 요소가 없습니다: name={name}")

        current = self._stack[-1]
        try:
            if len(current):
                last = current[-1]
                last.tail = (last.tail or "") + text
            else:
                current.text = (current.text or "") + text
        except (ValueError, TypeError) as exc:
            raise ServiceXmlSerializationError(
                f"XML 텍스트를 기록할 수 없습니다: name={name}, error={exc}"
            ) from exc
        self._content_started[-1] = True

    def write_element_value(self, namespace: XmlNamespace, local_name: str, value: object) -> None:
        """텍스트 하나만 가진 요소를 기록한다."""
        with self.element(namespace, local_name):
            self.write_value(value, local_name)

    def to_bytes(self) -> bytes:
        """기록된 최상위 요소들을 순서대로 직렬화한다."""
        if self._stack:
            names = ", ".join(etree.QName(element).localname for element in self._stack)
            raise ServiceXmlSerializationError(f"닫히지 않은 XML 요소가 있습니다: {names}")

        parts: list[bytes] = []
        for index, root in enumerate(self._roots):
            parts.append(
                etree.tostring(
                    root,
                    encoding=self._config.encoding,
                    xml_declaration=self._config.xml_declaration and index == 0,
                    pretty_print=self._config.pretty_print,
                )
            )
        return b"".join(parts)

    def to_string(self) -> str:
        return self.to_bytes().decode(self._config.encoding)

    @staticmethod
    def _to_xml_string(name: str, value: object) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, datetime):
            return as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")
        if isinstance(value, (str, int, float)):
            return str(value)
        raise ServiceXmlSerializationError(
            f"XML 값으로 변환할 수 없는 타입입니다: name={name}, type={type(value).__name__}"
        )
