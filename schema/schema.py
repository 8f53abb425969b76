from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar

from common import camel_to_snake, snake_to_camel


@dataclass
class Schema:
    # 자동 camelCase 변환으로 표현할 수 없는 JSON 키 (필드 이름 -> JSON 키)
    _WIRE_KEYS: ClassVar[dict[str, str]] = {}

    @classmethod
    def _to_field_name(cls, key: str) -> str:
        """JSON 키(별칭, camelCase, snake_case)를 필드 이름으로 변환"""
        for field_name, wire_key in cls._WIRE_KEYS.items():
            if key == wire_key:
                return field_name
        return camel_to_snake(key)

    @classmethod
    def _to_wire_key(cls, field_name: str) -> str:
        """필드 이름을 JSON 키로 변환"""
        return cls._WIRE_KEYS.get(field_name, snake_to_camel(field_name))

    @classmethod
    def validate_keys(cls, schema_dict: dict, strict: bool = True) -> dict:
        """
        Description:
            입력된 딕셔너리의 각 camelCase(또는 snake_case) 키를 필드 이름으로 변환한 후,
            해당 클래스의 필드 이름과 모두 일치하는지 확인합니다.

            strict=False 인 경우 알 수 없는 키는 예외 대신 무시합니다.
            (서비스 응답에는 이 라이브러리가 다루지 않는 필드가 포함될 수 있음)

        Args:
            schema_dict (dict): 입력 딕셔너리
            strict (bool): 알 수 없는 키에 대해 예외를 발생시킬지 여부

        Returns:
            dict: 필드 이름을 키로 하는 딕셔너리
        """
        valid_fields = {f.name for f in fields(cls)}
        processed_dict = {}
        for key, value in schema_dict.items():
            converted_key = cls._to_field_name(key)
            if converted_key not in valid_fields:
                if not strict:
                    continue
                raise ValueError(
                    f"Invalid key in input dict: '{key}' (converted to '{converted_key}') "
                    f"is not a valid field for {cls.__name__}"
                )
            processed_dict[converted_key] = value
        return processed_dict

    @classmethod
    def create_from_dict(cls, schema_dict: dict, strict: bool = True) -> "Schema":
        """
        부모 클래스에서 전체 구현을 제공하여, 입력 딕셔너리의
        camelCase 또는 snake_case 키를 모두 필드 이름으로 변환한 뒤,
        해당 클래스의 생성자에 전달하여 인스턴스를 생성합니다.

        (cls 인자를 통해 현재 호출한 클래스를 직접 참조하기 위해 static 대신 @classmethod 사용)
        """
        processed_dict = cls.validate_keys(schema_dict, strict)
        return cls(**processed_dict)

    def as_dict(self, omit_none: bool = False) -> dict[str, Any]:
        """
        객체를 사전(dict)로 변환합니다.
        키를 snake_case에서 camelCase(또는 지정된 별칭)로 변환하고,
        Enum 타입의 값은 .value를 사용하여 직렬화하며,
        중첩된 Schema 객체에 대해서는 재귀적 as_dict 변환을 수행합니다.

        omit_none=True 인 경우 값이 None인 필드는 결과에서 제외합니다. (요청 본문 작성용)
        """
        result = {}

        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and omit_none:
                continue
            result[self._to_wire_key(f.name)] = self._process_value(value, omit_none)

        return result

    def _process_value(self, value, omit_none: bool = False):
        """타입에 따라 값을 변환하는 헬퍼 메서드"""
        if isinstance(value, Enum):
            return value.value
        elif isinstance(value, Schema):
            return value.as_dict(omit_none)
        elif isinstance(value, dict):
            # 일반 딕셔너리는 사용자 정의 데이터이므로 키를 변환하지 않음
            return {k: self._process_value(v, omit_none) for k, v in value.items()}
        elif isinstance(value, list):
            return [self._process_value(item, omit_none) for item in value]
        return value
