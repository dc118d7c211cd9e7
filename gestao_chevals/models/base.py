"""
Gestão Chevals - Base Record
Registros remotos: identidade e timestamps atribuídos pelo servidor
"""
from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

RecordId = Union[int, str]


def same_id(a: Optional[RecordId], b: Optional[RecordId]) -> bool:
    """Compara ids vindos do servidor (int ou uuid) com ids vindos da rota (str)"""
    if a is None or b is None:
        return False
    return str(a) == str(b)


class Record(BaseModel):
    """Cópia local de uma linha remota"""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def nulos_como_padrao(cls, data: Any) -> Any:
        # coluna nula no servidor assume o default do campo (0, False, status inicial)
        if not isinstance(data, dict):
            return data
        return {
            key: value for key, value in data.items()
            if value is not None
            or key not in cls.model_fields
            or cls.model_fields[key].is_required()
            or cls.model_fields[key].default is None
        }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
