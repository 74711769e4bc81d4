"""
Form data model.

Holds the values typed into the generator form as an immutable record.
The controller owns the current value and replaces it on every edit.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

# camelCase key -> attribute
_FIELD_SPECS: Dict[str, str] = {
    "projectName": "project_name",
    "domainName": "domain_name",
    "n8nWebhookDomain": "n8n_webhook_domain",
    "redisPassword": "redis_password",
    "postgresPassword": "postgres_password",
    "encryptionKey": "encryption_key",
}

FIELD_KEYS: Tuple[str, ...] = tuple(_FIELD_SPECS)
SECRET_FIELD_KEYS: Tuple[str, ...] = (
    "redisPassword",
    "postgresPassword",
    "encryptionKey",
)

_ATTR_TO_KEY = {attr: key for key, attr in _FIELD_SPECS.items()}


class MissingFieldsError(ValueError):
    """Raised when required form fields are blank."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


def _to_attribute(key: str) -> str:
    """Resolve a camelCase key or snake_case attribute name."""
    if key in _FIELD_SPECS:
        return _FIELD_SPECS[key]
    if key in _ATTR_TO_KEY:
        return key
    raise ValueError(f"Unknown form field: {key!r}")


@dataclass(frozen=True)
class FormData:
    """The flat record of user-entered configuration values."""

    project_name: str = ""
    domain_name: str = ""
    n8n_webhook_domain: str = ""
    redis_password: str = ""
    postgres_password: str = ""
    encryption_key: str = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FormData":
        """
        Build a record from camelCase or snake_case keys.
        Missing keys default to the empty string.
        """
        values: Dict[str, str] = {}
        for key, value in mapping.items():
            attr = _to_attribute(key)
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string")
            values[attr] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """camelCase mapping in form order."""
        raw = asdict(self)
        return {key: raw[_FIELD_SPECS[key]] for key in FIELD_KEYS}

    def get(self, key: str) -> str:
        return getattr(self, _to_attribute(key))

    def with_value(self, key: str, value: str) -> "FormData":
        """Return a copy with one field replaced."""
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string")
        return replace(self, **{_to_attribute(key): value})

    def missing_fields(self, keys: Optional[Iterable[str]] = None) -> List[str]:
        """
        Keys of fields that are empty or whitespace only.
        When `keys` is given only those fields are checked, in form order.
        """
        wanted = None if keys is None else {_to_attribute(k) for k in keys}
        return [
            _ATTR_TO_KEY[f.name]
            for f in fields(self)
            if (wanted is None or f.name in wanted)
            and not getattr(self, f.name).strip()
        ]

    def validate_required(self, keys: Optional[Iterable[str]] = None) -> None:
        missing = self.missing_fields(keys)
        if missing:
            raise MissingFieldsError(missing)
