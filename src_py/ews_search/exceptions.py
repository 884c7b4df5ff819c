"""
목적:
- EWS 검색 클라이언트 계층의 예외 타입을 표준화한다.

설명:
- 검증/버전/XML 직렬화 오류를 명시적으로 구분해
  요청 파이프라인이 재구성/중단 전략을 선택할 수 있게 한다.
- 모든 예외는 변환이나 억제 없이 호출자에게 그대로 전파된다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/ews_search/properties/property_set.py
- src_py/ews_search/xml/writer.py
"""


class EwsSearchError(Exception):
    """EWS Search 공통 베이스 예외."""


class ConfigurationError(EwsSearchError):
    """설정값이 유효하지 않을 때 발생한다."""


class ServiceLocalError(EwsSearchError):
    """서버 호출 전 클라이언트 측에서 감지된 오류의 베이스 예외."""


class ServiceValidationError(ServiceLocalError):
    """뷰/속성 집합/요청 구성이 유효하지 않을 때 발생한다."""


class ServiceVersionError(ServiceLocalError):
    """요청된 서버 버전이 지원하지 않는 기능을 사용할 때 발생한다."""


class ServiceXmlSerializationError(ServiceLocalError):
    """XML 작성기가 요청을 직렬화하지 못했을 때 발생한다."""


class PropertySetReadOnlyError(EwsSearchError):
    """읽기 전용 속성 집합을 수정하려 할 때 발생한다."""
